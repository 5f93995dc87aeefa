"""Synthesizer settings and their validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)


class InterpolationMethod(IntEnum):
    """Sample interpolation quality."""

    NONE = 0
    LINEAR = 1
    FOURTH_ORDER = 4
    SEVENTH_ORDER = 7


class SettingsError(ValueError):
    """A synthesizer descriptor holds an invalid value."""


class RangeError(SettingsError):
    """A setting lies outside its allowed range."""

    def __init__(
        self,
        name: str,
        got: float,
        *,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ) -> None:
        self.name = name
        self.got = got
        self.minimum = minimum
        self.maximum = maximum
        if minimum is not None:
            message = f"{name}: {got} is too small (min {minimum})"
        else:
            message = f"{name}: {got} is too big (max {maximum})"
        super().__init__(message)

    @property
    def too_small(self) -> bool:
        return self.minimum is not None


@dataclass(frozen=True)
class _Range(Generic[T]):
    name: str
    low: T
    high: T

    def check(self, value: T) -> T:
        if value < self.low:
            raise RangeError(self.name, value, minimum=self.low)
        if value > self.high:
            raise RangeError(self.name, value, maximum=self.high)
        return value


_POLYPHONY_RANGE = _Range("polyphony", 1, 65535)
_GAIN_RANGE = _Range("gain", 0.0, 10.0)
_AUDIO_CHANNELS_RANGE = _Range("audio_channels", 1, 128)
_AUDIO_GROUPS_RANGE = _Range("audio_groups", 1, 128)
_SAMPLE_RATE_RANGE = _Range("sample_rate", 8000.0, 96000.0)
_MIN_NOTE_LENGTH_RANGE = _Range("min_note_length", 0, 65535)


@dataclass
class SynthDescriptor:
    """Requested synthesizer configuration, checked by :meth:`Settings.from_descriptor`."""

    reverb_active: bool = True
    chorus_active: bool = True
    drums_channel_active: bool = True
    interpolation: InterpolationMethod = InterpolationMethod.FOURTH_ORDER
    polyphony: int = 256
    midi_channels: int = 16
    gain: float = 0.2
    audio_channels: int = 1
    audio_groups: int = 1
    sample_rate: float = 44100.0
    min_note_length: int = 10


@dataclass
class Settings:
    """Validated synthesizer settings."""

    reverb_active: bool
    chorus_active: bool
    drums_channel_active: bool
    interpolation: InterpolationMethod
    polyphony: int
    midi_channels: int
    gain: float
    audio_channels: int
    audio_groups: int
    sample_rate: float
    min_note_length: int

    @classmethod
    def from_descriptor(cls, desc: SynthDescriptor) -> "Settings":
        """Validate ``desc``; raises :class:`SettingsError` on the first bad value."""
        if desc.midi_channels % 16 != 0:
            logger.warning(
                "Requested number of MIDI channels is not a multiple of 16. "
                "Increase the number of channels to the next multiple."
            )
            raise SettingsError(
                f"midi_channels: {desc.midi_channels} is not a multiple of 16"
            )
        return cls(
            reverb_active=desc.reverb_active,
            chorus_active=desc.chorus_active,
            drums_channel_active=desc.drums_channel_active,
            interpolation=InterpolationMethod(desc.interpolation),
            polyphony=_POLYPHONY_RANGE.check(desc.polyphony),
            midi_channels=desc.midi_channels,
            gain=_GAIN_RANGE.check(desc.gain),
            audio_channels=_AUDIO_CHANNELS_RANGE.check(desc.audio_channels),
            audio_groups=_AUDIO_GROUPS_RANGE.check(desc.audio_groups),
            sample_rate=_SAMPLE_RATE_RANGE.check(desc.sample_rate),
            min_note_length=_MIN_NOTE_LENGTH_RANGE.check(desc.min_note_length),
        )

    def set_sample_rate(self, sample_rate: float) -> None:
        """Change the sample rate; the minimum note length in ticks follows it."""
        self.sample_rate = sample_rate

    @property
    def min_note_length_ticks(self) -> int:
        """Minimum note length (ms) expressed in samples at the current rate."""
        return int(self.min_note_length * self.sample_rate / 1000.0)