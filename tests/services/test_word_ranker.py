import pytest

from wordcrawl.services.word_ranker import rank_words


def test_count_then_length_then_alphabetical():
    counts = {"a": 3, "bb": 3, "c": 5, "dd": 1}
    assert list(rank_words(counts, 2).items()) == [("c", 5), ("bb", 3)]


def test_full_ordering_with_ties():
    counts = {"zeta": 2, "beta": 2, "alphabet": 2, "x": 7, "yy": 2}
    assert list(rank_words(counts, 10)) == ["x", "alphabet", "beta", "zeta", "yy"]


def test_limit_larger_than_mapping_returns_everything():
    assert rank_words({"a": 1}, 5) == {"a": 1}


def test_zero_limit_returns_empty():
    assert rank_words({"a": 1, "b": 2}, 0) == {}


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        rank_words({"a": 1}, -1)


def test_result_does_not_depend_on_input_order():
    forward = {"apple": 4, "pear": 4, "fig": 4, "kiwi": 4}
    backward = dict(reversed(list(forward.items())))
    assert list(rank_words(forward, 4).items()) == list(rank_words(backward, 4).items())
