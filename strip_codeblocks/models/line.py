from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """One line of input text and the terminator that ended it."""

    content: str
    terminator: str = ""  # '\r\n', '\n', '\r', or '' for a final partial line

    def __str__(self) -> str:
        return self.content + self.terminator
