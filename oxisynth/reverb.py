"""Stereo reverb built from parallel comb filters and serial all-pass filters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

DC_OFFSET = 1e-8
STEREO_SPREAD = 23

_COMB_TUNINGS = (1116, 1188, 1277, 1356, 1422, 1491, 1557, 1617)
_ALLPASS_TUNINGS = (556, 441, 341, 225)
_ALLPASS_FEEDBACK = 0.5

_ROOM_SCALE = 0.28
_ROOM_OFFSET = 0.7
_DAMP_SCALE = 1.0
_WET_SCALE = 3.0
_GAIN = 0.015


class _Comb:
    """Feedback comb filter with a one-pole low-pass in the loop."""

    def __init__(self, size: int) -> None:
        self.feedback = 0.0
        self.filterstore = 0.0
        self.damp1 = 0.0
        self.damp2 = 0.0
        self.buffer = [DC_OFFSET] * size
        self.bufidx = 0

    def set_damp(self, value: float) -> None:
        self.damp1 = value
        self.damp2 = 1.0 - value

    def process(self, sample: float) -> float:
        out = self.buffer[self.bufidx]
        self.filterstore = out * self.damp2 + self.filterstore * self.damp1
        self.buffer[self.bufidx] = sample + self.filterstore * self.feedback
        self.bufidx += 1
        if self.bufidx >= len(self.buffer):
            self.bufidx = 0
        return out


class _AllPass:
    """Schroeder all-pass filter."""

    def __init__(self, size: int, feedback: float) -> None:
        self.feedback = feedback
        self.buffer = [DC_OFFSET] * size
        self.bufidx = 0

    def process(self, sample: float) -> float:
        bufout = self.buffer[self.bufidx]
        output = bufout - sample
        self.buffer[self.bufidx] = sample + bufout * self.feedback
        self.bufidx += 1
        if self.bufidx >= len(self.buffer):
            self.bufidx = 0
        return output


def _new_combs() -> list[tuple[_Comb, _Comb]]:
    return [(_Comb(size), _Comb(size + STEREO_SPREAD)) for size in _COMB_TUNINGS]


def _new_allpasses() -> list[tuple[_AllPass, _AllPass]]:
    return [
        (_AllPass(size, _ALLPASS_FEEDBACK), _AllPass(size + STEREO_SPREAD, _ALLPASS_FEEDBACK))
        for size in _ALLPASS_TUNINGS
    ]


@dataclass(frozen=True)
class ReverbParams:
    """Reverb settings: room size, damping, stereo width and level."""

    roomsize: float = 0.2
    damp: float = 0.0
    width: float = 0.5
    level: float = 0.9


class Reverb:
    """Reverb effect working on mono input and producing stereo output."""

    def __init__(self) -> None:
        self._roomsize = 0.5 * _ROOM_SCALE + _ROOM_OFFSET
        self._damp = 0.2 * _DAMP_SCALE
        self._wet = 1.0 * _WET_SCALE
        self._wet1 = 0.0
        self._wet2 = 0.0
        self._width = 1.0
        self._gain = _GAIN
        self._combs = _new_combs()
        self._allpasses = _new_allpasses()
        self.set_params(ReverbParams())

    def reset(self) -> None:
        """Replace all filters with freshly initialised ones."""
        self._combs = _new_combs()
        self._allpasses = _new_allpasses()

    def _tick(self, sample: float) -> tuple[float, float]:
        inp = (2.0 * sample + DC_OFFSET) * self._gain
        out_l = 0.0
        out_r = 0.0
        for comb_l, comb_r in self._combs:
            out_l += comb_l.process(inp)
            out_r += comb_r.process(inp)
        for allpass_l, allpass_r in self._allpasses:
            out_l = allpass_l.process(out_l)
            out_r = allpass_r.process(out_r)
        out_l -= DC_OFFSET
        out_r -= DC_OFFSET
        return (
            out_l * self._wet1 + out_r * self._wet2,
            out_r * self._wet1 + out_l * self._wet2,
        )

    def process_replace(self, samples: Sequence[float]) -> tuple[list[float], list[float]]:
        """Run ``samples`` through the reverb and return the wet left and right blocks."""
        pairs = [self._tick(x) for x in samples]
        return [l for l, _ in pairs], [r for _, r in pairs]

    def process_mix(
        self, samples: Sequence[float], left: Sequence[float], right: Sequence[float]
    ) -> tuple[list[float], list[float]]:
        """Run ``samples`` through the reverb and return ``left`` and ``right`` with it added."""
        if not len(samples) == len(left) == len(right):
            raise ValueError("input and output blocks must have the same length")
        pairs = [self._tick(x) for x in samples]
        return (
            [l + wl for l, (wl, _) in zip(left, pairs)],
            [r + wr for r, (_, wr) in zip(right, pairs)],
        )

    def _update(self) -> None:
        self._wet1 = self._wet * (self._width / 2.0 + 0.5)
        self._wet2 = self._wet * ((1.0 - self._width) / 2.0)
        for pair in self._combs:
            for comb in pair:
                comb.feedback = self._roomsize
                comb.set_damp(self._damp)

    def set_params(self, params: ReverbParams) -> None:
        """Apply new settings; the level is clamped to 0..1."""
        self._roomsize = params.roomsize * _ROOM_SCALE + _ROOM_OFFSET
        self._damp = params.damp * _DAMP_SCALE
        self._width = params.width
        self._wet = min(max(params.level, 0.0), 1.0) * _WET_SCALE
        self._update()

    def params(self) -> ReverbParams:
        """Return the settings currently in effect."""
        return ReverbParams(
            roomsize=(self._roomsize - _ROOM_OFFSET) / _ROOM_SCALE,
            damp=self._damp / _DAMP_SCALE,
            width=self._width,
            level=self._wet / _WET_SCALE,
        )