"""split_preserve - split strings on whitespace without losing the whitespace."""

from .scanner import SplitPreserveWS, is_whitespace, split_preserve_ws
from .spans import segment_at, token_spans, whitespace_mask
from .transform import join_tokens, map_whitespace, map_words
from .types import Other, Segment, Whitespace

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "SplitPreserveWS",
    "split_preserve_ws",
    "is_whitespace",
    "Segment",
    "Whitespace",
    "Other",
    "map_words",
    "map_whitespace",
    "join_tokens",
    "token_spans",
    "whitespace_mask",
    "segment_at",
]
