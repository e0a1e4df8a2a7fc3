"""Tones played through the DAC from a 16-step sine table."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

CPU_CLOCK = 22_118_400
SAMPLES_PER_CYCLE = 16
FULL_ENVELOPE = 512

# The table is held as unsigned bytes, so its negative half wraps.
SINE = bytes(
    v & 0xFF
    for v in (48, 89, 116, 126, 116, 89, 48, 0, -48, -89, -116, -126, -116, -89, -48, 0)
)


def reload_value(frequency: int) -> int:
    """Return the 16-bit timer reload value that plays ``frequency`` hertz."""
    if frequency <= 0:
        raise ValueError(f"frequency must be positive, got {frequency}")
    return -(CPU_CLOCK // (frequency * SAMPLES_PER_CYCLE)) & 0xFFFF


@dataclass(frozen=True)
class Tone:
    """A decaying tone: ``cycles`` extra sine cycles after the first one."""

    frequency: int
    cycles: int
    envelope: int = FULL_ENVELOPE

    def __post_init__(self) -> None:
        if self.frequency <= 0:
            raise ValueError(f"frequency must be positive, got {self.frequency}")
        if self.cycles < 0:
            raise ValueError(f"cycles must not be negative, got {self.cycles}")
        if self.envelope < 0:
            raise ValueError(f"envelope must not be negative, got {self.envelope}")

    def samples(self) -> Iterator[int]:
        """Yield the DAC bytes of the tone, one per timer tick."""
        envelope = self.envelope
        for _ in range(self.cycles + 1):
            for value in SINE:
                yield (((value * envelope) >> 10) + 128) & 0xFF
            if envelope > 0:
                envelope -= 1


def launch_tone() -> Tone:
    """The high tone played when a banana is thrown."""
    return Tone(800, 20, FULL_ENVELOPE)


def explosion_tone() -> Tone:
    """The low tone played when a banana lands."""
    return Tone(300, 20, FULL_ENVELOPE)