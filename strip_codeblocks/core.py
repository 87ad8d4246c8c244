# strip_codeblocks/core.py
from __future__ import annotations

from typing import List, Optional

from ._logging import resolve_logger
from .fence import parse_fence_marker
from .models.line import Line
from .utils.lines import LineSequence, join_lines


def strip_codeblocks(text: Optional[str], *, logger=None, log: bool = False) -> str:
    """
    Remove backtick fence lines from markdown text, keeping what they enclose.

    Every line that trims to three or more backticks plus an optional info
    string (for example "```rust" or a bare "````") toggles the inside-fence
    state and is dropped. All other lines, fenced or not, are emitted verbatim with
    their own line terminators, so inline code such as `x` is never touched.

    Never raises for text input:
      - an unterminated fence just stops being tracked at end of input;
      - a fence line inside a fence closes it (no nesting);
      - a fence line that is the final, unterminated line also takes the
        separator before it, so "```\\nplain block\\n```" -> "plain block".

    Returns "" for None or empty input.
    """
    log = resolve_logger(logger, enabled=log)

    if not text:
        return ""

    out: List[Line] = []
    inside_fence = False
    open_lineno = 0

    for lineno, line in enumerate(LineSequence(text), start=1):
        marker = parse_fence_marker(line.content)
        if marker is None:
            out.append(line)
            continue

        inside_fence = not inside_fence
        if inside_fence:
            open_lineno = lineno
            log.debug(f"Opened fence at line {lineno} (language={marker.language or 'none'})")
        else:
            log.debug(f"Closed fence at line {lineno} (opened at line {open_lineno})")

        # The last line has no terminator of its own; drop the one before it.
        if not line.terminator and out:
            out[-1] = Line(out[-1].content, "")

    if inside_fence:
        log.warning(f"Unterminated fence opened at line {open_lineno}; kept remaining lines as-is")

    return join_lines(out)
