"""Unit conversions used by the synthesizer: cents, centibels, timecents, pan."""

from __future__ import annotations

import math

_CT2HZ_TAB = tuple(2.0 ** (i / 1200.0) for i in range(1200))
_CB2AMP_TAB = tuple(10.0 ** (i / -200.0) for i in range(961))
_ATTEN2AMP_TAB = tuple(10.0 ** (i / -200.0) for i in range(1441))


def _curve_value(i: int) -> float:
    return -20.0 / 96.0 * math.log((i * i) / (127.0 * 127.0)) / math.log(10.0)


def _build_concave() -> tuple[float, ...]:
    table = [0.0] * 128
    table[127] = 1.0
    for i in range(1, 127):
        table[127 - i] = _curve_value(i)
    return tuple(table)


def _build_convex() -> tuple[float, ...]:
    table = [0.0] * 128
    table[127] = 1.0
    for i in range(1, 127):
        table[i] = 1.0 - _curve_value(i)
    return tuple(table)


_CONCAVE_TAB = _build_concave()
_CONVEX_TAB = _build_convex()

_PAN_STEP = math.pi / 2.0 / (1002.0 - 1.0)
_PAN_TAB = tuple(math.sin(i * _PAN_STEP) for i in range(1002))

# (upper limit in cents, base frequency, table offset) for each octave band.
_CT2HZ_BANDS = ((900.0, 6.875, -300),) + tuple(
    (2100.0 + 1200.0 * k, 13.75 * 2**k, 900 + 1200 * k) for k in range(11)
)


def ct2hz_real(cents: float) -> float:
    """Convert absolute cents to Hz without clamping."""
    if cents < 0.0:
        return 1.0
    for limit, base, offset in _CT2HZ_BANDS:
        if cents < limit:
            return base * _CT2HZ_TAB[int(cents) - offset]
    return 1.0


def ct2hz(cents: float) -> float:
    """Convert absolute cents to Hz, clamped to the filter cutoff range."""
    return ct2hz_real(min(max(cents, 1500.0), 13500.0))


def cb2amp(cb: float) -> float:
    """Convert centibels of attenuation to a linear amplitude."""
    if cb < 0.0:
        return 1.0
    if cb >= 961.0:
        return 0.0
    return _CB2AMP_TAB[int(cb)]


def atten2amp(atten: float) -> float:
    """Convert an attenuation in centibels (up to 144 dB) to a linear amplitude."""
    if atten < 0.0:
        return 1.0
    if atten >= 1441.0:
        return 0.0
    return _ATTEN2AMP_TAB[int(atten)]


def _tc2sec_clamped(tc: float, high: float) -> float:
    if tc <= -32768.0:
        return 0.0
    tc = min(max(tc, -12000.0), high)
    return 2.0 ** (tc / 1200.0)


def tc2sec_delay(tc: float) -> float:
    """Convert delay timecents to seconds."""
    return _tc2sec_clamped(tc, 5000.0)


def tc2sec_attack(tc: float) -> float:
    """Convert attack timecents to seconds."""
    return _tc2sec_clamped(tc, 8000.0)


def tc2sec(tc: float) -> float:
    """Convert timecents to seconds without clamping."""
    return 2.0 ** (tc / 1200.0)


def tc2sec_release(tc: float) -> float:
    """Convert release timecents to seconds."""
    return _tc2sec_clamped(tc, 8000.0)


def act2hz(c: float) -> float:
    """Convert absolute cents to Hz for LFO frequencies."""
    return 8.176 * 2.0 ** (c / 1200.0)


def pan(c: float, left: int) -> float:
    """Gain of one side for a pan position in -500..500; ``left`` selects the left side."""
    if left:
        c = -c
    if c < -500.0:
        return 0.0
    if c > 500.0:
        return 1.0
    return _PAN_TAB[int(c + 500.0)]


def concave(val: float) -> float:
    """Concave transfer curve over 0..127."""
    if val < 0.0:
        return 0.0
    if val > 127.0:
        return 1.0
    return _CONCAVE_TAB[int(val)]


def convex(val: float) -> float:
    """Convex transfer curve over 0..127."""
    if val < 0.0:
        return 0.0
    if val > 127.0:
        return 1.0
    return _CONVEX_TAB[int(val)]