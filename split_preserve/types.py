from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class Whitespace:
    """A maximal run of whitespace characters.

    ``char_start`` is the offset of the first character in the scanned text.
    It is excluded from equality and hashing.
    """

    text: str
    char_start: int = field(default=0, compare=False)

    is_whitespace: ClassVar[bool] = True

    @property
    def char_end(self) -> int:
        return self.char_start + len(self.text)


@dataclass(frozen=True)
class Other:
    """A maximal run of non-whitespace characters."""

    text: str
    char_start: int = field(default=0, compare=False)

    is_whitespace: ClassVar[bool] = False

    @property
    def char_end(self) -> int:
        return self.char_start + len(self.text)


Segment = Whitespace | Other
