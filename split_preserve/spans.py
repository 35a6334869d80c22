"""Offset tables over a whitespace-preserving scan.

Alignment code usually wants integer offsets rather than string slices, so
these helpers expose the scan as numpy arrays.
"""

from __future__ import annotations

import logging

import numpy as np

from .scanner import SplitPreserveWS
from .types import Segment

logger = logging.getLogger(__name__)


def _scan(text: str) -> list[Segment]:
    tokens = list(SplitPreserveWS(text))
    logger.debug(f"Built span table with {len(tokens)} tokens")
    return tokens


def token_spans(text: str) -> np.ndarray:
    """Return the ``(char_start, char_end)`` of every token.

    Args:
        text: Text to scan

    Returns:
        int64 array of shape ``(n_tokens, 2)``; ``(0, 2)`` for empty text
    """
    tokens = _scan(text)
    spans = np.empty((len(tokens), 2), dtype=np.int64)
    for i, token in enumerate(tokens):
        spans[i, 0] = token.char_start
        spans[i, 1] = token.char_end
    return spans


def whitespace_mask(text: str) -> np.ndarray:
    """Boolean array, True where the token at that index is whitespace."""
    return np.fromiter(
        (token.is_whitespace for token in SplitPreserveWS(text)), dtype=bool
    )


def segment_at(text: str, pos: int) -> Segment:
    """Return the token covering character offset ``pos``.

    Raises:
        IndexError: If ``pos`` is outside ``[0, len(text))``
    """
    tokens = _scan(text)
    if pos < 0 or pos >= len(text):
        raise IndexError(f"Offset {pos} out of range for text of length {len(text)}")
    ends = np.fromiter(
        (token.char_end for token in tokens), dtype=np.int64, count=len(tokens)
    )
    return tokens[int(np.searchsorted(ends, pos, side="right"))]
