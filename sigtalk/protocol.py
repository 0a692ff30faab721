"""Bit-level encoding of bytes as SIGUSR1/SIGUSR2 signals."""

from __future__ import annotations

import signal
from collections.abc import Iterator
from dataclasses import dataclass, field

BITS_PER_BYTE = 8


def byte_to_bits(byte: int) -> list[int]:
    """Return the eight bits of *byte*, most significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return [(byte >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1)]


def message_to_bits(message: str | bytes) -> Iterator[int]:
    """Yield the bits of every byte of *message* in transmission order."""
    data = (
        message.encode("utf-8", "surrogateescape")
        if isinstance(message, str)
        else bytes(message)
    )
    for byte in data:
        yield from byte_to_bits(byte)


def signal_for_bit(bit: int) -> signal.Signals:
    """Map a 0 bit to SIGUSR1 and a 1 bit to SIGUSR2."""
    if bit == 0:
        return signal.SIGUSR1
    if bit == 1:
        return signal.SIGUSR2
    raise ValueError(f"not a bit: {bit}")


def bit_for_signal(signum: int) -> int:
    """Map SIGUSR1 to 0 and SIGUSR2 to 1."""
    if signum == signal.SIGUSR1:
        return 0
    if signum == signal.SIGUSR2:
        return 1
    raise ValueError(f"signal {signum} carries no bit")


@dataclass
class BitDecoder:
    """Collects bits, most significant first, into bytes."""

    _value: int = field(default=0, repr=False)
    _count: int = field(default=0, repr=False)

    def feed(self, bit: int) -> int | None:
        """Add one bit; return the completed byte, or None if still partial."""
        if bit not in (0, 1):
            raise ValueError(f"not a bit: {bit}")
        self._value = (self._value << 1) | bit
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte