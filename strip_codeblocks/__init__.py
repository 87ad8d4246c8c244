from .core import strip_codeblocks
from .fence import is_fence_marker, parse_fence_marker
from .models import FenceMarker, Line
from .utils.lines import LineSequence, join_lines, split_lines

__all__ = [
    "strip_codeblocks",
    "parse_fence_marker",
    "is_fence_marker",
    "split_lines",
    "join_lines",
    "LineSequence",
    "FenceMarker",
    "Line",
]
