"""Per-key pitch tables for alternative tunings."""

from __future__ import annotations

from typing import Optional, Sequence

KEY_COUNT = 128
OCTAVE_KEYS = 12


def _equal_temperament() -> list[float]:
    return [i * 100.0 for i in range(KEY_COUNT)]


class Tuning:
    """Pitch in cents for each of the 128 MIDI keys."""

    def __init__(self, pitch: Optional[Sequence[float]] = None) -> None:
        if pitch is None:
            self.pitch = _equal_temperament()
        else:
            if len(pitch) != KEY_COUNT:
                raise ValueError(f"a key tuning needs {KEY_COUNT} pitches, got {len(pitch)}")
            self.pitch = [float(p) for p in pitch]

    @classmethod
    def new_key_tuning(cls, pitch: Sequence[float]) -> "Tuning":
        """Build a tuning from the pitch of every key in cents."""
        return cls(pitch)

    @classmethod
    def new_octave_tuning(cls, pitch: Sequence[float]) -> "Tuning":
        """Build a tuning from 12 deviations in cents from the well-tempered scale."""
        if len(pitch) != OCTAVE_KEYS:
            raise ValueError(
                f"an octave tuning needs {OCTAVE_KEYS} deviations, got {len(pitch)}"
            )
        return cls([base + pitch[i % OCTAVE_KEYS] for i, base in enumerate(_equal_temperament())])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuning):
            return NotImplemented
        return self.pitch == other.pitch

    def __repr__(self) -> str:
        return f"Tuning(pitch={self.pitch!r})"