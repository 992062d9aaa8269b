"""
levellog ▸ Rotate on signal

External rotation tools move the log file away and then signal the process
(logrotate: ``postrotate kill -HUP <pid>``). `install_rotation_handler` wires
that signal to ``logger.rotate()``.

Python runs signal handlers on the main thread between bytecodes, possibly
while that thread holds a writer lock or is inside a buffered flush. The
handler therefore only starts a short‑lived thread that calls ``rotate()``;
it never writes to a stream itself.
"""
from __future__ import annotations

import signal
import threading
from typing import Any, Callable, Union

from levellog.base import Logger
from levellog.logger import get_logger

log = get_logger(__name__)

ROTATE_THREAD_PREFIX = "levellog-rotate-"

_Handler = Union[Callable[[int, Any], Any], int, None]


def resolve_signal(name_or_number: Union[str, int]) -> signal.Signals:
    """Accept "SIGHUP", "HUP" or a number."""
    if isinstance(name_or_number, int):
        return signal.Signals(name_or_number)
    name = name_or_number.strip().upper()
    if not name.startswith("SIG"):
        name = "SIG" + name
    try:
        return signal.Signals[name]
    except KeyError:
        raise ValueError(f"Unknown signal: {name_or_number!r}") from None


def install_rotation_handler(logger: Logger, signum: Union[str, int] = "SIGHUP") -> _Handler:
    """
    Call ``logger.rotate()`` on a worker thread whenever *signum* is delivered.

    Must be called from the main thread. Returns the previous handler so it
    can be restored with `uninstall_rotation_handler`.
    """
    sig = resolve_signal(signum)

    def _on_signal(_signum: int, _frame: Any) -> None:
        threading.Thread(target=logger.rotate, name=ROTATE_THREAD_PREFIX + sig.name, daemon=True).start()

    previous = signal.signal(sig, _on_signal)
    log.debug("Rotation handler installed on %s for %r", sig.name, logger)
    return previous


def uninstall_rotation_handler(signum: Union[str, int], previous: _Handler) -> None:
    sig = resolve_signal(signum)
    signal.signal(sig, previous if previous is not None else signal.SIG_DFL)


__all__ = ["ROTATE_THREAD_PREFIX", "install_rotation_handler", "uninstall_rotation_handler", "resolve_signal"]
