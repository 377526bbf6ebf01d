import pytest

from wordfreq_bench.counter import WordCounter


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello world", 2),
        ("Go is awesome", 3),
        ("", 0),
        ("   ", 0),
        ("One\ntwo\nthree", 3),
        ("A quick brown fox jumps over the lazy dog", 9),
    ],
)
def test_count_words(text, expected):
    assert WordCounter().count_words(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello world", 2),
        ("A quick brown fox jumps over the lazy dog", 9),
        ("", 0),
    ],
)
def test_count_words_with_many_workers(text, expected):
    assert WordCounter(4).count_words(text) == expected


@pytest.mark.parametrize(
    ("word", "valid"),
    [
        ("a", True),
        ("don't", True),
        ("well-known", True),
        ("año", True),
        ("a1", True),
        ("1a", False),
        ("end-", False),
        ("x'", False),
        ("", False),
    ],
)
def test_is_valid_word(word, valid):
    assert WordCounter().is_valid_word(word) is valid


def test_clean_words_strips_punctuation_and_drops_invalid():
    words = ["...", "hello,", "¡Hola!", "123", "(world)"]
    assert WordCounter().clean_words(words) == ["hello", "Hola", "world"]


def test_count_word_frequency_ignores_edge_punctuation():
    freq = WordCounter().count_word_frequency("Hola, hola. Hola! mundo")
    assert freq == {"Hola": 2, "hola": 1, "mundo": 1}


def test_count_word_frequency_empty_text():
    assert WordCounter(3).count_word_frequency("") == {}


def test_zero_workers_behaves_as_one():
    text = "one two two three three three"
    assert WordCounter(0).count_word_frequency(text) == WordCounter(1).count_word_frequency(text)


def _large_text():
    vocabulary = ["alpha,", "beta", "gamma!", "delta", "42", "épsilon", "--", "zeta's"]
    return " ".join(vocabulary[i % len(vocabulary)] for i in range(5003))


@pytest.mark.parametrize("workers", [2, 3, 7, 16])
def test_parallel_clean_preserves_order(workers):
    words = _large_text().split()
    assert WordCounter(workers).clean_words(words) == WordCounter(1).clean_words(words)


@pytest.mark.parametrize("workers", [2, 3, 7, 16])
def test_parallel_frequency_matches_sequential(workers):
    text = _large_text()
    assert WordCounter(workers).count_word_frequency(text) == WordCounter(1).count_word_frequency(text)


def test_count_words_is_sum_of_frequencies():
    text = _large_text()
    counter = WordCounter(4)
    assert counter.count_words(text) == sum(counter.count_word_frequency(text).values())