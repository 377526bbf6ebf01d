[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordfreq-bench"
version = "0.1.0"
description = "Count word frequencies in a text file and time the count for each number of workers."
requires-python = ">=3.10"
dependencies = []
keywords = ["word count", "word frequency", "benchmark", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordfreq-bench = "wordfreq_bench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordfreq_bench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
