"""Processor topology: how many cores there are and threads per core."""

from __future__ import annotations

import os

__all__ = ["Affinity", "parse_threads_per_core"]

_CPUINFO = "/proc/cpuinfo"
_CPU_CORES_PREFIX = "cpu cores"


def parse_threads_per_core(text: str) -> int:
    """Read the number from the first ``cpu cores`` line of a cpuinfo listing.

    Returns 0 when there is no such line or it holds no digits.
    """
    for line in text.splitlines():
        if line.startswith(_CPU_CORES_PREFIX):
            digits = "".join(c for c in line[len(_CPU_CORES_PREFIX):] if "0" <= c <= "9")
            return int(digits) if digits else 0
    return 0


def _online_processors() -> int:
    try:
        count = os.sysconf("SC_NPROCESSORS_ONLN")
    except (AttributeError, ValueError, OSError):
        count = os.cpu_count() or 0
    return count


def _read_cpuinfo() -> str:
    try:
        with open(_CPUINFO, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError:
        return ""


class Affinity:
    """Counts of cores and hardware threads on this machine.

    ``is_accurate`` is False when any figure had to be guessed.
    """

    def __init__(self) -> None:
        accurate = True
        self.core_count = _online_processors()
        if self.core_count <= 0:
            self.core_count = 1
            accurate = False

        threads = parse_threads_per_core(_read_cpuinfo())
        if threads == 0:
            threads = 1
            accurate = False

        self.threads_per_core = threads
        self.thread_count = self.threads_per_core * self.core_count
        self.is_accurate = accurate

    def set(self, core: int, thread_index: int) -> bool:
        """Pin the calling thread to a core; pinning is left to the scheduler here."""
        return True

    def thread_count_for_core(self, core: int) -> int:
        """Number of hardware threads on ``core``."""
        if not 0 <= core < self.core_count:
            raise IndexError(f"core {core} out of range 0..{self.core_count - 1}")
        return self.threads_per_core

    def __repr__(self) -> str:
        return (
            f"Affinity(core_count={self.core_count}, threads_per_core={self.threads_per_core}, "
            f"is_accurate={self.is_accurate})"
        )