# wordfreq-bench

This package counts how often each word appears in a text. It can also time
that count once for each number of worker threads, from one up to a maximum.

## What counts as a word

The text is first split on whitespace. Each token then has punctuation removed
from its start and end. Punctuation here means any character that is not a
letter or a digit. What remains is kept only if it is a valid word:

- It starts with a letter.
- It contains only letters, digits, hyphens and apostrophes.
- It ends with a letter or a digit.

A single letter on its own is also a word. Letters are `A-Z`, `a-z` and the
accented Latin letters `À`–`ÿ`, together with `Á É Í Ó Ú Ñ á é í ó ú ñ`.
Matching is case-sensitive, so `Hello` and `hello` are counted as different
words.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
wordfreq-bench [--input FILE] [--csv FILE] [--max-workers N]
```

| Option | Default | Meaning |
| --- | --- | --- |
| `--input` | `example.txt` | text file to analyse |
| `--csv` | `resultados_rendimiento.csv` | where to write the timings |
| `--max-workers` | number of CPUs | largest number of workers to try; must be at least 1 |

The command reads the input file and counts its word frequencies once for each
worker count from 1 to `--max-workers`. After each run it prints a line such as
`Utilizando 2 CPUs - Tiempo: 1.234ms`. When all runs are done, it writes the
timings to the CSV file. The file has a header row `NumCPUs,TiempoNanosegundos`
and then one row per run, with the time in whole nanoseconds.

It then prints a summary of the fastest run:

- the number of workers it used and its time
- the most frequent word and how often it appears
- the total number of words

If the text holds no valid words, the summary says so instead. The output
messages are in Spanish.

If the input file cannot be read, or the CSV file cannot be written, the
command prints an error to standard error and exits with status 1. Otherwise
it exits with status 0.

## Library

```python
from wordfreq_bench.counter import WordCounter
from wordfreq_bench.cli import benchmark, most_frequent, write_csv
from wordfreq_bench.file import read_file

counter = WordCounter(workers=4)
freq = counter.count_word_frequency("Hello, world! Hello again.")
# {'Hello': 2, 'world': 1, 'again': 1}
counter.count_words("Hello, world!")  # 2

word, count = most_frequent(freq)     # ('Hello', 2); ('', 0) for an empty mapping

results = list(benchmark(read_file("example.txt"), max_workers=4))
write_csv(results, "timings.csv")
```

### `wordfreq_bench.counter`

- `WordCounter(workers=1)` holds the number of worker threads to use.
- `is_valid_word(word)` tells whether a token that has already been stripped
  is a word.
- `clean_words(words)` strips punctuation from each token and keeps the valid
  ones, in their original order. With fewer than 1000 tokens, or one worker,
  it does the work on the calling thread.
- `count_word_frequency(text)` returns a `dict` that maps each word to its
  count.
- `count_words(text)` returns the total number of words.

### `wordfreq_bench.cli`

- `benchmark(text, max_workers)` yields one `RunResult` per worker count. Each
  `RunResult` has the fields `workers`, `elapsed_ns`, `frequencies` and
  `total`.
- `most_frequent(frequencies)` returns the word with the highest count.
- `write_csv(results, path)` writes the timing CSV described above.
- `main(argv=None)` runs the command and returns its exit status.

### `wordfreq_bench.file`

- `read_file(path)` returns the file's content, decoded as UTF-8. Invalid byte
  sequences are replaced rather than raising an error. It raises `OSError`,
  for example `FileNotFoundError`, if the file cannot be read.
- `write_file(path, content)` writes text encoded as UTF-8. It creates the file
  if needed and truncates it if it already exists.

### `wordfreq_bench.worker`

- `count_fields(lines)` returns the total number of whitespace-separated fields
  across the given lines.