from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .types import Other, Segment, Whitespace


def map_words(tokens: Iterable[Segment], f: Callable[[str], str]) -> Iterator[str]:
    """Yield ``f(text)`` for :class:`Other` tokens and whitespace as-is.

    Lazy: ``f`` runs only when the corresponding token is pulled, and any
    exception it raises propagates to the consumer at that point.
    """
    for token in tokens:
        match token:
            case Other(text=text):
                yield f(text)
            case Whitespace(text=text):
                yield text
            case _:
                raise TypeError(f"Expected a Segment, got {type(token).__name__}")


def map_whitespace(
    tokens: Iterable[Segment], f: Callable[[str], str]
) -> Iterator[str]:
    """Yield ``f(text)`` for :class:`Whitespace` tokens and words as-is."""
    for token in tokens:
        match token:
            case Whitespace(text=text):
                yield f(text)
            case Other(text=text):
                yield text
            case _:
                raise TypeError(f"Expected a Segment, got {type(token).__name__}")


def join_tokens(items: Iterable[Segment | str]) -> str:
    """Concatenate tokens (or already mapped strings) back into one string."""
    return "".join(item if isinstance(item, str) else item.text for item in items)
