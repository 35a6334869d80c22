"""Whitespace-preserving scanner for split_preserve.

This module provides an iterator over the whitespace and non-whitespace
runs of a string. Unlike ``str.split()`` nothing is thrown away: joining the
emitted tokens gives back the original text.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator

from .constants import WHITE_SPACE
from .transform import map_whitespace, map_words
from .types import Other, Segment, Whitespace

logger = logging.getLogger(__name__)

_WS_CLASS = "".join(re.escape(ch) for ch in sorted(WHITE_SPACE))

# Each pattern matches the longest run of its class starting at a position.
_RUNS: dict[type[Segment], re.Pattern[str]] = {
    Whitespace: re.compile(f"[{_WS_CLASS}]+"),
    Other: re.compile(f"[^{_WS_CLASS}]+"),
}
_OPPOSITE: dict[type[Segment], type[Segment]] = {
    Whitespace: Other,
    Other: Whitespace,
}


def is_whitespace(ch: str) -> bool:
    """Return True if ``ch`` has the Unicode White_Space property."""
    return ch in WHITE_SPACE


class SplitPreserveWS:
    """An iterator over the whitespace and non-whitespace runs of a string.

    Tokens are emitted left to right as :class:`Whitespace` or :class:`Other`,
    and consecutive tokens always alternate between the two. Each token
    records its ``char_start`` offset into the scanned text.

    Example:
        >>> next(SplitPreserveWS("aa  "))
        Other(text='aa', char_start=0)

    The iterator is single-pass. Build a new one to scan the text again.
    """

    def __init__(self, text: str) -> None:
        """Initialize the scanner.

        Args:
            text: Text to split. It is not copied.

        Raises:
            TypeError: If ``text`` is not a str
        """
        if not isinstance(text, str):
            raise TypeError(f"SplitPreserveWS expects str, got {type(text).__name__}")
        self._text = text
        self._pos = 0
        self._pending: type[Segment] | None
        if not text:
            self._pending = None
        elif is_whitespace(text[0]):
            self._pending = Whitespace
        else:
            self._pending = Other
        logger.debug(f"Scanning {len(text)} characters")

    def __iter__(self) -> SplitPreserveWS:
        return self

    def __next__(self) -> Segment:
        kind = self._pending
        if kind is None:
            raise StopIteration

        start = self._pos
        # The pending remainder is non-empty and starts with a ``kind`` char,
        # so the match is never empty.
        end = _RUNS[kind].match(self._text, start).end()
        if end == len(self._text):
            self._pending = None
        else:
            self._pending = _OPPOSITE[kind]
        self._pos = end
        return kind(self._text[start:end], char_start=start)

    @property
    def exhausted(self) -> bool:
        return self._pending is None

    def map_words(self, f: Callable[[str], str]) -> Iterator[str]:
        """Map over the :class:`Other` tokens, passing whitespace through.

        >>> "".join(
        ...     SplitPreserveWS("Line\\twith\\nweird whitespace").map_words(
        ...         lambda w: w[::-1]
        ...     )
        ... )
        'eniL\\thtiw\\ndriew ecapsetihw'
        """
        return map_words(self, f)

    def map_whitespace(self, f: Callable[[str], str]) -> Iterator[str]:
        """Map over the :class:`Whitespace` tokens, passing words through.

        >>> "".join(
        ...     SplitPreserveWS("Line\\twith\\nweird whitespace").map_whitespace(
        ...         lambda _: " "
        ...     )
        ... )
        'Line with weird whitespace'
        """
        return map_whitespace(self, f)


def split_preserve_ws(text: str) -> SplitPreserveWS:
    """Split ``text`` on whitespace, keeping the whitespace as tokens."""
    return SplitPreserveWS(text)
