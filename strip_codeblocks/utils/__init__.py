# strip_codeblocks/utils/__init__.py
from .lines import LineSequence, join_lines, split_lines

__all__ = [
    "LineSequence",
    "join_lines",
    "split_lines",
]
