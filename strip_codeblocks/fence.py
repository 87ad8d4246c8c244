# strip_codeblocks/fence.py
import re
from typing import Optional

from .models.fence import FenceMarker

# A fence line, once trimmed: 3+ backticks, then anything without a backtick.
_FENCE_RE = re.compile(r"^(?P<ticks>`{3,})(?P<info>[^`\r\n]*)\Z")


def parse_fence_marker(line: str) -> Optional[FenceMarker]:
    """
    Return a FenceMarker if `line` is a backtick fence, else None.

    Leading/trailing whitespace (including the line terminator) is ignored.
    A line whose info string contains another backtick, such as
    "``` `x` ```", is not a fence.
    """
    m = _FENCE_RE.match(line.strip())
    if not m:
        return None
    info = m.group("info").strip()
    parts = info.split()
    return FenceMarker(
        ticks=len(m.group("ticks")),
        info=info,
        language=parts[0].lower() if parts else "",
    )


def is_fence_marker(line: str) -> bool:
    return parse_fence_marker(line) is not None
