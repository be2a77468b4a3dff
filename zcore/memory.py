"""Alignment, comparison and size helpers for raw memory values."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "is_power_of_two",
    "align_forward",
    "align_forward_value",
    "memcompare",
    "kilobytes",
    "megabytes",
    "gigabytes",
    "terabytes",
]


def is_power_of_two(x: int) -> bool:
    """Return True when ``x`` is a positive power of two."""
    if x <= 0:
        return False
    return not (x & (x - 1))


def align_forward(address: int, alignment: int) -> int:
    """Round ``address`` up to the next multiple of a power-of-two ``alignment``."""
    if not is_power_of_two(alignment):
        raise ValueError(f"alignment must be a power of two, got {alignment}")
    return (address + (alignment - 1)) & ~(alignment - 1)


def _c_mod(value: int, divisor: int) -> int:
    """Remainder that takes the sign of the dividend, as fixed-width integers do."""
    remainder = abs(value) % abs(divisor)
    return -remainder if value < 0 else remainder


def align_forward_value(value: int, alignment: int) -> int:
    """Round ``value`` up to a multiple of ``alignment`` (any positive integer)."""
    if alignment <= 0:
        raise ValueError(f"alignment must be positive, got {alignment}")
    return value + _c_mod(alignment - _c_mod(value, alignment), alignment)


def memcompare(a: Optional[bytes], b: Optional[bytes], size: int) -> int:
    """Compare the first ``size`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0 when
    they are equal or either buffer is missing.
    """
    if a is None or b is None:
        return 0
    for left, right in zip(memoryview(a)[:size], memoryview(b)[:size]):
        if left != right:
            return left - right
    return 0


def kilobytes(x: int) -> int:
    """Number of bytes in ``x`` kilobytes."""
    return x * 1024


def megabytes(x: int) -> int:
    """Number of bytes in ``x`` megabytes."""
    return kilobytes(x) * 1024


def gigabytes(x: int) -> int:
    """Number of bytes in ``x`` gigabytes."""
    return megabytes(x) * 1024


def terabytes(x: int) -> int:
    """Number of bytes in ``x`` terabytes."""
    return gigabytes(x) * 1024