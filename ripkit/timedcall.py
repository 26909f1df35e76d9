"""Run a callable with a time limit."""

from __future__ import annotations

import threading
from typing import Any, Callable, TypeVar

T = TypeVar("T")

_NS_PER_SECOND = 1_000_000_000


def _with_fraction(value: int, precision: int) -> str:
    """Render value / 10**precision without trailing zeros in the fraction."""
    whole, rest = divmod(value, 10**precision)
    digits = str(rest).rjust(precision, "0").rstrip("0")
    return f"{whole}.{digits}" if digits else str(whole)


def format_duration(seconds: float) -> str:
    """Format a duration in seconds the way a duration string is conventionally
    written, e.g. ``10ms``, ``1.5s``, ``3m0s`` or ``1h0m0s``."""
    ns = round(seconds * _NS_PER_SECOND)
    sign = "-" if ns < 0 else ""
    ns = abs(ns)
    if ns == 0:
        return "0s"
    if ns < _NS_PER_SECOND:
        if ns < 1_000:
            return f"{sign}{ns}ns"
        if ns < 1_000_000:
            return f"{sign}{_with_fraction(ns, 3)}µs"
        return f"{sign}{_with_fraction(ns, 6)}ms"
    total_seconds, fraction = divmod(ns, _NS_PER_SECOND)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    sec_text = _with_fraction(secs * _NS_PER_SECOND + fraction, 9)
    if hours:
        return f"{sign}{hours}h{minutes}m{sec_text}s"
    if minutes:
        return f"{sign}{minutes}m{sec_text}s"
    return f"{sign}{sec_text}s"


class CallTimeoutError(TimeoutError):
    """Raised when a timed call does not finish within its time limit."""

    def __init__(self, duration: float, cmd: str) -> None:
        self.duration = duration
        self.cmd = cmd
        super().__init__(f"hit {format_duration(duration)} timeout running '{cmd}'")


def timed_call(description: str, duration: float, fn: Callable[[], T]) -> T:
    """Run fn, raising CallTimeoutError if it takes longer than duration seconds.

    Exceptions raised by fn propagate unchanged; its return value is returned.
    The description is used in the timeout message.
    """
    outcome: dict[str, Any] = {}
    done = threading.Event()

    def target() -> None:
        try:
            outcome["value"] = fn()
        except BaseException as exc:  # handed back to the caller
            outcome["error"] = exc
        finally:
            done.set()

    worker = threading.Thread(
        target=target, name=f"timed_call({description})", daemon=True
    )
    worker.start()
    if not done.wait(duration):
        raise CallTimeoutError(duration, description)
    if "error" in outcome:
        raise outcome["error"]
    return outcome.get("value")