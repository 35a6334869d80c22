"""Tests for the word and whitespace transformers."""

from itertools import islice

import pytest

from split_preserve import (
    Other,
    SplitPreserveWS,
    Whitespace,
    join_tokens,
    map_whitespace,
    map_words,
)

TEXT = "Line\twith\nweird whitespace"

CORPUS = [
    "",
    "   ",
    "word",
    TEXT,
    "  padded  ",
    "a\r\n\r\nb  c\td",
]


def test_map_words_reverses_each_word():
    result = "".join(SplitPreserveWS(TEXT).map_words(lambda w: w[::-1]))
    assert result == "eniL\thtiw\ndriew ecapsetihw"


def test_map_whitespace_single_spaces():
    result = "".join(SplitPreserveWS(TEXT).map_whitespace(lambda _: " "))
    assert result == "Line with weird whitespace"


def test_module_functions_match_methods():
    upper = str.upper
    assert list(map_words(SplitPreserveWS(TEXT), upper)) == list(
        SplitPreserveWS(TEXT).map_words(upper)
    )
    assert list(map_whitespace(SplitPreserveWS(TEXT), repr)) == list(
        SplitPreserveWS(TEXT).map_whitespace(repr)
    )


def test_accepts_any_iterable_of_tokens():
    tokens = [Other("ab"), Whitespace("  "), Other("cd")]
    assert list(map_words(tokens, str.upper)) == ["AB", "  ", "CD"]
    assert list(map_whitespace(tokens, lambda s: "_" * len(s))) == ["ab", "__", "cd"]


def test_empty_input_yields_nothing():
    assert list(SplitPreserveWS("").map_words(str.upper)) == []
    assert list(SplitPreserveWS("").map_whitespace(str.upper)) == []


@pytest.mark.parametrize("text", CORPUS)
def test_identity_round_trip(text):
    assert "".join(SplitPreserveWS(text).map_words(lambda s: s)) == text
    assert "".join(SplitPreserveWS(text).map_whitespace(lambda s: s)) == text


@pytest.mark.parametrize("text", CORPUS)
def test_map_words_leaves_whitespace_alone(text):
    tokens = list(SplitPreserveWS(text))
    mapped = list(SplitPreserveWS(text).map_words(lambda _: "<word>"))

    assert len(mapped) == len(tokens)
    for token, out in zip(tokens, mapped):
        if token.is_whitespace:
            assert out == token.text
        else:
            assert out == "<word>"


@pytest.mark.parametrize("text", CORPUS)
def test_map_whitespace_leaves_words_alone(text):
    tokens = list(SplitPreserveWS(text))
    mapped = list(SplitPreserveWS(text).map_whitespace(lambda _: ""))

    assert len(mapped) == len(tokens)
    for token, out in zip(tokens, mapped):
        if token.is_whitespace:
            assert out == ""
        else:
            assert out == token.text


def test_transform_may_change_length():
    mapped = SplitPreserveWS("a  b").map_whitespace(lambda s: "\n" * len(s) * 2)
    assert "".join(mapped) == "a\n\n\n\nb"


class TestLaziness:
    """The transform runs only for tokens that are pulled."""

    def test_transform_called_on_demand(self):
        calls = []

        def record(word):
            calls.append(word)
            return word

        mapped = SplitPreserveWS("one two three").map_words(record)
        assert calls == []

        assert list(islice(mapped, 1)) == ["one"]
        assert calls == ["one"]

        # The whitespace token does not reach the transform
        assert next(mapped) == " "
        assert calls == ["one"]

    def test_transform_errors_propagate_at_pull(self):
        def explode(word):
            if word == "boom":
                raise ValueError(f"cannot map {word}")
            return word

        mapped = SplitPreserveWS("ok boom later").map_whitespace(str.upper)
        assert list(mapped) == ["ok", " ", "boom", " ", "later"]

        mapped = SplitPreserveWS("ok boom later").map_words(explode)
        assert next(mapped) == "ok"
        assert next(mapped) == " "
        with pytest.raises(ValueError, match="cannot map boom"):
            next(mapped)

    def test_consumes_the_scanner(self):
        scanner = SplitPreserveWS("a b")
        assert list(scanner.map_words(str.upper)) == ["A", " ", "B"]
        assert scanner.exhausted
        assert list(scanner.map_words(str.upper)) == []


def test_rejects_non_segments():
    with pytest.raises(TypeError, match="Expected a Segment"):
        list(map_words(["plain string"], str.upper))
    with pytest.raises(TypeError, match="Expected a Segment"):
        list(map_whitespace([None], str.upper))


class TestJoinTokens:
    """Tests for join_tokens."""

    def test_joins_segments(self):
        assert join_tokens(SplitPreserveWS(TEXT)) == TEXT

    def test_joins_mapped_strings(self):
        mapped = SplitPreserveWS(TEXT).map_words(str.upper)
        assert join_tokens(mapped) == "LINE\tWITH\nWEIRD WHITESPACE"

    def test_joins_mixed(self):
        assert join_tokens([Other("a"), " ", Whitespace("\t"), "b"]) == "a \tb"

    def test_empty(self):
        assert join_tokens([]) == ""
