"""Capability surface shared by `FileLogger` and `ProcessLogger`."""
from __future__ import annotations

from typing import Any, Optional, Protocol, TextIO, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """
    Leveled logger.

    `output` and `log` take an explicit call depth counted from the writer:
    per-level methods pass 3 so the written line names their caller.
    """

    def log_level(self) -> int: ...

    def log_level_string(self) -> str: ...

    def get_log_writer(self) -> Optional[TextIO]:
        """Raw destination stream, or None when there is none to hand out."""
        ...

    def rotate(self) -> None: ...

    def output(self, calldepth: int, s: str) -> None: ...

    def log(self, level: int, depth: int, *args: Any) -> None: ...

    def fatal(self, *args: Any) -> None: ...

    def error(self, *args: Any) -> None: ...

    def warning(self, *args: Any) -> None: ...

    def info(self, *args: Any) -> None: ...

    def debug(self, *args: Any) -> None: ...

    def debug2(self, *args: Any) -> None: ...


__all__ = ["Logger"]
