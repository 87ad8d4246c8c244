# strip_codeblocks/utils/lines.py
import re
from typing import Iterable, Iterator, List

from ..models.line import Line

# '\r\n' must come first so a CRLF pair is one terminator, not two.
_EOL_RE = re.compile(r"\r\n|\r|\n")


def iter_lines(text: str) -> Iterator[Line]:
    """
    Yield the lines of `text` in order, each with its own terminator.

    A trailing terminator does not produce an extra empty line, and a final
    line without a terminator gets terminator ''.
    """
    pos = 0
    for m in _EOL_RE.finditer(text):
        yield Line(text[pos:m.start()], m.group())
        pos = m.end()
    if pos < len(text):
        yield Line(text[pos:], "")


def split_lines(text: str) -> List[Line]:
    return list(iter_lines(text))


def join_lines(lines: Iterable[Line]) -> str:
    """Inverse of split_lines: join_lines(split_lines(s)) == s."""
    return "".join(str(line) for line in lines)


class LineSequence:
    """
    Lazy, restartable view of a text as Lines.

    Every call to iter() starts again from the first line; nothing is cached.
    """

    def __init__(self, text: str):
        self._text = text

    def __iter__(self) -> Iterator[Line]:
        return iter_lines(self._text)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"LineSequence({self._text!r})"
