"""Running registered callbacks on Ctrl+C and termination signals."""

from __future__ import annotations

import signal
import sys
from typing import Callable

CtrlCHandler = Callable[[], None]

_handlers: list[CtrlCHandler] = []


def add_ctrl_c_handler(handler: CtrlCHandler) -> None:
    """Register a callback to run when an interrupt signal arrives."""
    _handlers.append(handler)


def _dispatch(signum, frame) -> None:
    for handler in list(_handlers):
        handler()


def init() -> None:
    """Install the dispatcher for SIGINT and SIGTERM."""
    for name in ("SIGINT", "SIGTERM"):
        signum = getattr(signal, name, None)
        if signum is None:
            continue
        try:
            signal.signal(signum, _dispatch)
        except (ValueError, OSError):
            print(f"failed to set {name} handler", file=sys.stderr, flush=True)