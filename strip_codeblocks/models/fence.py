from dataclasses import dataclass


@dataclass(frozen=True)
class FenceMarker:
    """A line made of 3+ backticks and an optional info string."""
    ticks: int      # run length (>=3)
    info: str       # text after the run, stripped; never contains a backtick
    language: str   # first token of info, lowercased ('' when absent)
