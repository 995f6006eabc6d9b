"""32-bit wrapping sequence numbers."""

from __future__ import annotations

from dataclasses import dataclass

_MOD32 = 1 << 32
_MASK32 = _MOD32 - 1
_MASK64 = (1 << 64) - 1


@dataclass(frozen=True)
class Wrap32:
    """A 32-bit unsigned value that starts at a zero point and wraps at 2**32."""

    raw_value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    @classmethod
    def wrap(cls, n: int, zero_point: Wrap32) -> Wrap32:
        """Wrap the absolute sequence number ``n`` relative to ``zero_point``."""
        return zero_point + (n & _MASK32)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number closest to ``checkpoint`` that wraps to this value."""
        checkpoint &= _MASK64
        offset = (self.raw_value - zero_point.raw_value) & _MASK32
        turns = ((checkpoint - offset) & _MASK64) // _MOD32
        first = (offset + _MOD32 * turns) & _MASK64
        second = (offset + _MOD32 * (turns + 1)) & _MASK64
        return first if abs(checkpoint - first) < abs(checkpoint - second) else second

    def __add__(self, n: int) -> Wrap32:
        return Wrap32((self.raw_value + n) & _MASK32)

    def __str__(self) -> str:
        return f"Wrap32<{self.raw_value}>"