"""Pick where strip_codeblocks writes its fence events: nowhere unless asked."""
from __future__ import annotations

import logging

STRIPPER_LOGGER = "strip_codeblocks.core"


class NoopLogger:
    """Accepts the calls the stripper makes and drops them."""

    def debug(self, msg, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    warning = debug


def resolve_logger(logger=None, *, enabled: bool = False) -> logging.Logger | NoopLogger:
    """
    A caller-supplied logger is returned unchanged. With `enabled`, fence
    events go to the `strip_codeblocks.core` logger at DEBUG, propagating to
    root. Otherwise events are discarded.
    """
    if logger is not None:
        return logger
    if not enabled:
        return NoopLogger()
    lg = logging.getLogger(STRIPPER_LOGGER)
    lg.setLevel(logging.DEBUG)
    lg.propagate = True
    return lg
