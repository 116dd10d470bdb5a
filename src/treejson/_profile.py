"""
Per-step profiling for parsing and dumping.

Each scanner, builder and serializer step reports how long it ran and how
many characters of the document it moved the cursor across, or that it
failed. Profiling starts enabled when ``TREEJSON_PROFILE`` is set in the
environment and can be switched at runtime with ``enable_profiling`` and
``disable_profiling``.
"""

import os
import time
from dataclasses import dataclass
from dataclasses import replace
from typing import Any

_enabled = "TREEJSON_PROFILE" in os.environ
_step_stats: dict[str, "StepStats"] = {}


@dataclass
class StepStats:
    """Accumulated timing and cursor movement for one named step."""

    step: str
    calls: int = 0
    failures: int = 0
    elapsed_ns: int = 0
    chars_consumed: int = 0

    @property
    def chars_per_call(self) -> float:
        succeeded = self.calls - self.failures
        return self.chars_consumed / succeeded if succeeded else 0.0

    @property
    def ns_per_char(self) -> float:
        if not self.chars_consumed:
            return 0.0
        return self.elapsed_ns / self.chars_consumed


def enable_profiling() -> None:
    global _enabled
    _enabled = True


def disable_profiling() -> None:
    global _enabled
    _enabled = False


def profiling_enabled() -> bool:
    return _enabled


def get_step_stats() -> dict[str, StepStats]:
    """Returns a snapshot of the statistics gathered so far."""
    return {step: replace(stats) for step, stats in _step_stats.items()}


def clear_step_stats() -> None:
    _step_stats.clear()


class StepTimer:
    """
    Times one call of a parse or dump step.

    ``start`` is the cursor the step begins at. Before leaving the block
    the step calls ``finish`` with the cursor it stopped at, or with None
    when it failed. A block left without ``finish`` counts as a call that
    consumed nothing.
    """

    __slots__ = ("step", "start", "_end", "_failed", "_started_ns")

    def __init__(self, step: str, start: int = 0) -> None:
        self.step = step
        self.start = start
        self._end = start
        self._failed = False
        self._started_ns = 0

    def __enter__(self) -> "StepTimer":
        if _enabled:
            self._started_ns = time.perf_counter_ns()
        return self

    def finish(self, end: int | None) -> None:
        if end is None:
            self._failed = True
        else:
            self._end = end

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if not _enabled or not self._started_ns:
            return
        stats = _step_stats.get(self.step)
        if stats is None:
            stats = _step_stats[self.step] = StepStats(self.step)
        stats.calls += 1
        stats.elapsed_ns += time.perf_counter_ns() - self._started_ns
        if self._failed or exc_type is not None:
            stats.failures += 1
        else:
            stats.chars_consumed += self._end - self.start
