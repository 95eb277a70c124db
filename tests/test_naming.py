import pytest

from oaspec.naming import append_unique, singular


def test_append_unique_adds_new_item():
    assert append_unique(["a", "b"], "c") == ["a", "b", "c"]


def test_append_unique_keeps_existing():
    items = ["a", "b"]
    result = append_unique(items, "a")
    assert result == ["a", "b"]
    assert result.count("a") == 1


def test_append_unique_does_not_mutate_input():
    items = ["x"]
    append_unique(items, "y")
    assert items == ["x"]


def test_append_unique_is_idempotent():
    once = append_unique([], "server")
    assert append_unique(once, "server") == once


def test_singular_ves():
    assert singular("shelves") == "shelf"


def test_singular_ies():
    assert singular("libraries") == "library"


def test_singular_s():
    assert singular("books") == "book"


@pytest.mark.parametrize("word", ["data", "", "item", "child"])
def test_singular_leaves_words_without_plural_ending(word):
    assert singular(word) == word


@pytest.mark.parametrize("stem", ["thing", "otherthing", "pet"])
def test_singular_strips_trailing_s(stem):
    assert singular(stem + "s") == stem