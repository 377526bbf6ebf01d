import pytest

from wordfreq_bench.worker import count_fields


def test_count_fields_empty_input():
    assert count_fields([]) == 0


def test_count_fields_accepts_generator():
    lines = (line for line in ["a b", "c"])
    assert count_fields(lines) == 3


def test_count_fields_is_additive():
    first = ["alpha beta", "gamma"]
    second = ["delta  epsilon\tzeta"]
    assert count_fields(first + second) == count_fields(first) + count_fields(second)