"""State of one MIDI channel: program, controllers, pressure and generator offsets."""

from __future__ import annotations

from typing import Any, Optional, Union

from .arena import Index
from .generator import GENERATOR_COUNT, GeneratorType
from .settings import InterpolationMethod
from .tuning import Tuning

CC_COUNT = 128
KEY_COUNT = 128
PITCH_BEND_CENTER = 0x2000

_BANK_SELECT = 0
_CHANNEL_VOLUME = 7
_PAN = 10
_EXPRESSION = 11
_BANK_SELECT_LSB = 32
_CHANNEL_VOLUME_LSB = 39
_PAN_LSB = 42
_EXPRESSION_LSB = 43
_SOUND_CONTROLLERS = range(70, 80)
_EFFECTS_DEPTHS = range(91, 96)
_NRPN_LSB = 98
_NRPN_MSB = 99
_RPN_LSB = 100
_RPN_MSB = 101
_ALL_SOUND_OFF = 120

# Controllers left untouched by "reset all controllers".
_KEPT_ON_RESET = frozenset(
    {
        _BANK_SELECT,
        _BANK_SELECT_LSB,
        _CHANNEL_VOLUME,
        _CHANNEL_VOLUME_LSB,
        _PAN,
        _PAN_LSB,
        *_SOUND_CONTROLLERS,
        *_EFFECTS_DEPTHS,
    }
)


class Channel:
    """One MIDI channel of the synthesizer."""

    def __init__(self, id: int) -> None:
        self.id = id
        self.sfontnum: Optional[Index] = None
        self.banknum = 0
        self.prognum = 0
        self.preset: Optional[Any] = None
        self.channel_pressure = 0
        self.pitch_bend = 0
        self.pitch_wheel_sensitivity = 0
        self.bank_msb = 0
        self.interp_method = InterpolationMethod.FOURTH_ORDER
        self.tuning: Optional[Tuning] = None
        self.nrpn_select = 0
        self.nrpn_active = 0
        self._cc = [0] * CC_COUNT
        self._key_pressure = [0] * KEY_COUNT
        self._gen = [0.0] * GENERATOR_COUNT
        self._gen_abs = [0] * GENERATOR_COUNT
        self.init_ctrl(False)

    def init(self, preset: Optional[Any]) -> None:
        """Reset program selection, tuning and NRPN state, installing ``preset``."""
        self.prognum = 0
        self.banknum = 0
        self.sfontnum = None
        self.preset = preset
        self.interp_method = InterpolationMethod.FOURTH_ORDER
        self.tuning = None
        self.nrpn_select = 0
        self.nrpn_active = 0

    def init_ctrl(self, is_all_ctrl_off: bool) -> None:
        """Reset controllers; ``is_all_ctrl_off`` keeps volume, pan, bank and effect settings."""
        self.channel_pressure = 0
        self.pitch_bend = PITCH_BEND_CENTER
        self._gen = [0.0] * GENERATOR_COUNT
        self._gen_abs = [0] * GENERATOR_COUNT

        if is_all_ctrl_off:
            for num in range(_ALL_SOUND_OFF):
                if num not in _KEPT_ON_RESET:
                    self._cc[num] = 0
        else:
            self._cc = [0] * CC_COUNT

        self._key_pressure = [0] * KEY_COUNT

        for num in (_RPN_LSB, _RPN_MSB, _NRPN_LSB, _NRPN_MSB, _EXPRESSION, _EXPRESSION_LSB):
            self._cc[num] = 127

        if not is_all_ctrl_off:
            self.pitch_wheel_sensitivity = 2
            for num in _SOUND_CONTROLLERS:
                self._cc[num] = 64
            self._cc[_CHANNEL_VOLUME] = 100
            self._cc[_CHANNEL_VOLUME_LSB] = 0
            self._cc[_PAN] = 64
            self._cc[_PAN_LSB] = 0

    def cc(self, num: int) -> int:
        """Value of controller ``num``; unknown controller numbers read as 0."""
        if 0 <= num < CC_COUNT:
            return self._cc[num]
        return 0

    def set_cc(self, num: int, value: int) -> None:
        """Store ``value`` for controller ``num``."""
        if not 0 <= num < CC_COUNT:
            raise IndexError(f"controller number {num} is out of range")
        self._cc[num] = value

    def key_pressure(self, key: int) -> int:
        """Polyphonic pressure of ``key``."""
        return self._key_pressure[key]

    def set_key_pressure(self, key: int, value: int) -> None:
        """Store the polyphonic pressure of ``key``."""
        if not 0 <= key < KEY_COUNT:
            raise IndexError(f"key {key} is out of range")
        self._key_pressure[key] = value

    def gen(self, gen: Union[GeneratorType, int]) -> float:
        """Generator offset set through ``set_gen`` or an NRPN message."""
        return self._gen[GeneratorType(gen)]

    def set_gen(self, gen: Union[GeneratorType, int], value: float) -> None:
        self._gen[GeneratorType(gen)] = value

    def gen_abs(self, gen: Union[GeneratorType, int]) -> int:
        """Non-zero when the generator offset is absolute rather than additive."""
        return self._gen_abs[GeneratorType(gen)]

    def set_gen_abs(self, gen: Union[GeneratorType, int], value: int) -> None:
        self._gen_abs[GeneratorType(gen)] = value

    def __repr__(self) -> str:
        return f"Channel(id={self.id}, bank={self.banknum}, prog={self.prognum})"