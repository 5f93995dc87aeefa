"""Multi-tap modulated delay chorus."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

logger = logging.getLogger(__name__)

MIN_SPEED_HZ = 0.29
MAX_SPEED_HZ = 5.0
MAX_NUMBER_BLOCKS = 99

_MAX_SAMPLES_LN2 = 12
MAX_SAMPLES = 1 << (_MAX_SAMPLES_LN2 - 1)
_MAX_SAMPLES_ANDMASK = MAX_SAMPLES - 1

_INTERPOLATION_SUBSAMPLES_LN2 = 8
_INTERPOLATION_SUBSAMPLES = 1 << (_INTERPOLATION_SUBSAMPLES_LN2 - 1)
_INTERPOLATION_SUBSAMPLES_ANDMASK = _INTERPOLATION_SUBSAMPLES - 1

_INTERPOLATION_SAMPLES = 5

# Offset that keeps every lookup value negative enough for delay positions
# to stay positive.
_LOOKUP_OFFSET = 3 * MAX_SAMPLES * _INTERPOLATION_SUBSAMPLES


class ChorusMode(IntEnum):
    """Shape of the delay modulation."""

    SINE = 0
    TRIANGLE = 1


@dataclass(frozen=True)
class ChorusParams:
    """Chorus settings: block count, level, speed (Hz), depth (ms) and mode."""

    nr: int = 3
    level: float = 2.0
    speed: float = 0.3
    depth: float = 8.0
    mode: ChorusMode = ChorusMode.SINE


def _build_sinc_table() -> list[list[float]]:
    table = []
    for i in range(_INTERPOLATION_SAMPLES):
        row = []
        for ii in range(_INTERPOLATION_SUBSAMPLES):
            shifted = i - _INTERPOLATION_SAMPLES / 2.0 + ii / _INTERPOLATION_SUBSAMPLES
            if abs(shifted) < 0.000001:
                row.append(1.0)
            else:
                value = math.sin(shifted * math.pi) / (math.pi * shifted)
                # Hamming window
                value *= 0.5 * (1.0 + math.cos(2.0 * math.pi * shifted / 5.0))
                row.append(value)
        table.append(row)
    return table


def _modulate_sine(buf: list[int], length: int, depth: int) -> None:
    for i in range(min(length, len(buf))):
        val = math.sin(i / length * 2.0 * math.pi)
        buf[i] = int((1.0 + val) * depth / 2.0 * _INTERPOLATION_SUBSAMPLES) - _LOOKUP_OFFSET


def _modulate_triangle(buf: list[int], length: int, depth: int) -> None:
    low, high = 0, length - 1
    while low <= high:
        val = low * 2.0 / length * depth * _INTERPOLATION_SUBSAMPLES
        val2 = int(val + 0.5) - _LOOKUP_OFFSET
        buf[low] = val2
        buf[high] = val2
        low += 1
        high -= 1


class Chorus:
    """A chorus effect working on mono input and producing stereo output."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = float(sample_rate)
        self._mode = ChorusMode.SINE
        self._new_mode = ChorusMode.SINE
        self._depth_ms = 0.0
        self._new_depth_ms = 0.0
        self._level = 0.0
        self._new_level = 0.0
        self._speed_hz = 0.0
        self._new_speed_hz = 0.0
        self._number_blocks = 0
        self._new_number_blocks = 0
        self._buffer = [0.0] * MAX_SAMPLES
        self._counter = 0
        self._phase = [0] * MAX_NUMBER_BLOCKS
        self._period = 0
        self._lookup = [0] * int(self._sample_rate / MIN_SPEED_HZ)
        self._sinc = _build_sinc_table()
        self._init()

    def _init(self) -> None:
        self._buffer = [0.0] * MAX_SAMPLES
        self.set_params(ChorusParams())
        self._update()

    def _update(self) -> None:
        if self._new_number_blocks > MAX_NUMBER_BLOCKS:
            logger.warning(
                "chorus: number blocks larger than max. allowed! Setting value to %d.",
                MAX_NUMBER_BLOCKS,
            )
            self._new_number_blocks = MAX_NUMBER_BLOCKS
        if self._new_speed_hz < MIN_SPEED_HZ:
            logger.warning("chorus: speed is too low (min %s)! Setting value to min.", MIN_SPEED_HZ)
            self._new_speed_hz = MIN_SPEED_HZ
        elif self._new_speed_hz > MAX_SPEED_HZ:
            logger.warning("chorus: speed must be below %s Hz! Setting value to max.", 5)
            self._new_speed_hz = MAX_SPEED_HZ
        if self._new_depth_ms < 0.0:
            logger.warning("chorus: depth must be positive! Setting value to 0.")
            self._new_depth_ms = 0.0
        if self._new_level < 0.0:
            logger.warning("chorus: level must be positive! Setting value to 0.")
            self._new_level = 0.0
        elif self._new_level > 10.0:
            logger.warning(
                "chorus: level must be < 10. A reasonable level is << 1! Setting it to 0.1."
            )
            self._new_level = 0.1

        self._period = int(self._sample_rate / self._new_speed_hz)

        depth_samples = int(self._new_depth_ms / 1000.0 * self._sample_rate)
        if depth_samples > MAX_SAMPLES:
            logger.warning("chorus: Too high depth. Setting it to max (%d).", MAX_SAMPLES)
            depth_samples = MAX_SAMPLES

        # The modulation shape follows the mode that was active before this update.
        if self._mode is ChorusMode.TRIANGLE:
            _modulate_triangle(self._lookup, self._period, depth_samples)
        else:
            _modulate_sine(self._lookup, self._period, depth_samples)

        blocks = self._number_blocks
        for i in range(blocks):
            self._phase[i] = int(self._period * i / blocks)

        self._counter = 0
        self._mode = self._new_mode
        self._depth_ms = self._new_depth_ms
        self._level = self._new_level
        self._speed_hz = self._new_speed_hz
        self._number_blocks = self._new_number_blocks

    def _tick(self, d_in: float) -> float:
        buf = self._buffer
        buf[self._counter] = d_in
        d_out = 0.0
        base = _INTERPOLATION_SUBSAMPLES * self._counter
        for block, phase in enumerate(self._phase[: self._number_blocks]):
            pos_subsamples = base - self._lookup[phase]
            pos_samples = pos_subsamples // _INTERPOLATION_SUBSAMPLES
            frac = pos_subsamples & _INTERPOLATION_SUBSAMPLES_ANDMASK
            for taps in self._sinc:
                d_out += buf[pos_samples & _MAX_SAMPLES_ANDMASK] * taps[frac]
                pos_samples -= 1
            self._phase[block] = (phase + 1) % self._period
        d_out *= self._level
        self._counter = (self._counter + 1) % MAX_SAMPLES
        return d_out

    def process_mix(
        self, samples: Sequence[float], left: Sequence[float], right: Sequence[float]
    ) -> tuple[list[float], list[float]]:
        """Run ``samples`` through the chorus and return ``left`` and ``right`` with it added."""
        if not len(samples) == len(left) == len(right):
            raise ValueError("input and output blocks must have the same length")
        wet = [self._tick(x) for x in samples]
        return (
            [l + w for l, w in zip(left, wet)],
            [r + w for r, w in zip(right, wet)],
        )

    def process_replace(self, samples: Sequence[float]) -> tuple[list[float], list[float]]:
        """Run ``samples`` through the chorus and return the wet left and right blocks."""
        wet = [self._tick(x) for x in samples]
        return wet, list(wet)

    def reset(self) -> None:
        """Clear the delay line and restore the default parameters."""
        self._init()

    def set_params(self, params: ChorusParams) -> None:
        """Apply new settings; out-of-range values are clamped with a warning."""
        self._new_number_blocks = params.nr
        self._new_level = params.level
        self._new_speed_hz = params.speed
        self._new_depth_ms = params.depth
        self._new_mode = ChorusMode(params.mode)
        self._update()

    def params(self) -> ChorusParams:
        """Return the settings currently in effect."""
        return ChorusParams(
            nr=self._number_blocks,
            level=self._level,
            speed=self._speed_hz,
            depth=self._depth_ms,
            mode=self._mode,
        )