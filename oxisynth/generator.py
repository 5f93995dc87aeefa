"""SoundFont generator numbers, per-generator defaults and generator lists."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, NamedTuple, Protocol, Union

GEN_UNUSED = 0
GEN_SET = 1
GEN_ABS_NRPN = 2


class GeneratorType(IntEnum):
    """Generator (effect) numbers as defined in SoundFont 2.01 section 8.1.3."""

    START_ADDR_OFS = 0
    END_ADDR_OFS = 1
    START_LOOP_ADDR_OFS = 2
    END_LOOP_ADDR_OFS = 3
    START_ADDR_COARSE_OFS = 4
    MOD_LFO_TO_PITCH = 5
    VIB_LFO_TO_PITCH = 6
    MOD_ENV_TO_PITCH = 7
    FILTER_FC = 8
    FILTER_Q = 9
    MOD_LFO_TO_FILTER_FC = 10
    MOD_ENV_TO_FILTER_FC = 11
    END_ADDR_COARSE_OFS = 12
    MOD_LFO_TO_VOL = 13
    UNUSED = 14
    CHORUS_SEND = 15
    REVERB_SEND = 16
    PAN = 17
    UNUSED2 = 18
    UNUSED3 = 19
    UNUSED4 = 20
    MOD_LFO_DELAY = 21
    MOD_LFO_FREQ = 22
    VIB_LFO_DELAY = 23
    VIB_LFO_FREQ = 24
    MOD_ENV_DELAY = 25
    MOD_ENV_ATTACK = 26
    MOD_ENV_HOLD = 27
    MOD_ENV_DECAY = 28
    MOD_ENV_SUSTAIN = 29
    MOD_ENV_RELEASE = 30
    KEY_TO_MOD_ENV_HOLD = 31
    KEY_TO_MOD_ENV_DECAY = 32
    VOL_ENV_DELAY = 33
    VOL_ENV_ATTACK = 34
    VOL_ENV_HOLD = 35
    VOL_ENV_DECAY = 36
    VOL_ENV_SUSTAIN = 37
    VOL_ENV_RELEASE = 38
    KEY_TO_VOL_ENV_HOLD = 39
    KEY_TO_VOL_ENV_DECAY = 40
    INSTRUMENT = 41
    RESERVED1 = 42
    KEY_RANGE = 43
    VEL_RANGE = 44
    START_LOOP_ADDR_COARSE_OFS = 45
    KEY_NUM = 46
    VELOCITY = 47
    ATTENUATION = 48
    RESERVED2 = 49
    END_LOOP_ADDR_COARSE_OFS = 50
    COARSE_TUNE = 51
    FINE_TUNE = 52
    SAMPLE_ID = 53
    SAMPLE_MODE = 54
    RESERVED3 = 55
    SCALE_TUNE = 56
    EXCLUSIVE_CLASS = 57
    OVERRIDE_ROOT_KEY = 58
    # Not a real SoundFont generator: destination of the default pitch wheel modulator.
    PITCH = 59


GENERATOR_COUNT = len(GeneratorType)


class _GenInfo(NamedTuple):
    nrpn_scale: int
    default: float


_GEN_INFO: tuple[_GenInfo, ...] = (
    _GenInfo(1, 0.0),  # START_ADDR_OFS
    _GenInfo(1, 0.0),  # END_ADDR_OFS
    _GenInfo(1, 0.0),  # START_LOOP_ADDR_OFS
    _GenInfo(1, 0.0),  # END_LOOP_ADDR_OFS
    _GenInfo(1, 0.0),  # START_ADDR_COARSE_OFS
    _GenInfo(2, 0.0),  # MOD_LFO_TO_PITCH
    _GenInfo(2, 0.0),  # VIB_LFO_TO_PITCH
    _GenInfo(2, 0.0),  # MOD_ENV_TO_PITCH
    _GenInfo(2, 13500.0),  # FILTER_FC
    _GenInfo(1, 0.0),  # FILTER_Q
    _GenInfo(2, 0.0),  # MOD_LFO_TO_FILTER_FC
    _GenInfo(2, 0.0),  # MOD_ENV_TO_FILTER_FC
    _GenInfo(1, 0.0),  # END_ADDR_COARSE_OFS
    _GenInfo(1, 0.0),  # MOD_LFO_TO_VOL
    _GenInfo(0, 0.0),  # UNUSED
    _GenInfo(1, 0.0),  # CHORUS_SEND
    _GenInfo(1, 0.0),  # REVERB_SEND
    _GenInfo(1, 0.0),  # PAN
    _GenInfo(0, 0.0),  # UNUSED2
    _GenInfo(0, 0.0),  # UNUSED3
    _GenInfo(0, 0.0),  # UNUSED4
    _GenInfo(2, -12000.0),  # MOD_LFO_DELAY
    _GenInfo(4, 0.0),  # MOD_LFO_FREQ
    _GenInfo(2, -12000.0),  # VIB_LFO_DELAY
    _GenInfo(4, 0.0),  # VIB_LFO_FREQ
    _GenInfo(2, -12000.0),  # MOD_ENV_DELAY
    _GenInfo(2, -12000.0),  # MOD_ENV_ATTACK
    _GenInfo(2, -12000.0),  # MOD_ENV_HOLD
    _GenInfo(2, -12000.0),  # MOD_ENV_DECAY
    _GenInfo(1, 0.0),  # MOD_ENV_SUSTAIN
    _GenInfo(2, -12000.0),  # MOD_ENV_RELEASE
    _GenInfo(1, 0.0),  # KEY_TO_MOD_ENV_HOLD
    _GenInfo(1, 0.0),  # KEY_TO_MOD_ENV_DECAY
    _GenInfo(2, -12000.0),  # VOL_ENV_DELAY
    _GenInfo(2, -12000.0),  # VOL_ENV_ATTACK
    _GenInfo(2, -12000.0),  # VOL_ENV_HOLD
    _GenInfo(2, -12000.0),  # VOL_ENV_DECAY
    _GenInfo(1, 0.0),  # VOL_ENV_SUSTAIN
    _GenInfo(2, -12000.0),  # VOL_ENV_RELEASE
    _GenInfo(1, 0.0),  # KEY_TO_VOL_ENV_HOLD
    _GenInfo(1, 0.0),  # KEY_TO_VOL_ENV_DECAY
    _GenInfo(0, 0.0),  # INSTRUMENT
    _GenInfo(0, 0.0),  # RESERVED1
    _GenInfo(0, 0.0),  # KEY_RANGE
    _GenInfo(0, 0.0),  # VEL_RANGE
    _GenInfo(1, 0.0),  # START_LOOP_ADDR_COARSE_OFS
    _GenInfo(0, -1.0),  # KEY_NUM
    _GenInfo(1, -1.0),  # VELOCITY
    _GenInfo(1, 0.0),  # ATTENUATION
    _GenInfo(0, 0.0),  # RESERVED2
    _GenInfo(1, 0.0),  # END_LOOP_ADDR_COARSE_OFS
    _GenInfo(1, 0.0),  # COARSE_TUNE
    _GenInfo(1, 0.0),  # FINE_TUNE
    _GenInfo(0, 0.0),  # SAMPLE_ID
    _GenInfo(0, 0.0),  # SAMPLE_MODE
    _GenInfo(0, 0.0),  # RESERVED3
    _GenInfo(1, 100.0),  # SCALE_TUNE
    _GenInfo(0, 0.0),  # EXCLUSIVE_CLASS
    _GenInfo(0, -1.0),  # OVERRIDE_ROOT_KEY
    _GenInfo(0, 0.0),  # PITCH
)


@dataclass
class Generator:
    """State of one generator: set flags, value, modulation and NRPN offset."""

    flags: int = GEN_UNUSED
    val: float = 0.0
    mod: float = 0.0
    nrpn: float = 0.0


class _ChannelGenerators(Protocol):
    def gen(self, gen: GeneratorType) -> float: ...

    def gen_abs(self, gen: GeneratorType) -> int: ...


def default_values() -> list[Generator]:
    """Return one unused generator per type, each holding its default value."""
    return [Generator(flags=GEN_UNUSED, val=info.default) for info in _GEN_INFO]


def gen_scale_nrpn(gen: Union[GeneratorType, int], data: int) -> float:
    """Scale 14-bit NRPN data (8192 is centre) for generator ``gen``."""
    if not 0 <= int(gen) < GENERATOR_COUNT:
        raise ValueError(f"generator number {int(gen)} is out of range")
    value = min(max(float(data) - 8192.0, -8192.0), 8192.0)
    return value * _GEN_INFO[int(gen)].nrpn_scale


class GeneratorList:
    """All generators of a zone or voice, indexed by :class:`GeneratorType`."""

    def __init__(self) -> None:
        self._gens = default_values()

    @classmethod
    def from_channel(cls, channel: _ChannelGenerators) -> "GeneratorList":
        """Defaults plus the NRPN offsets and absolute flags held by ``channel``."""
        out = cls()
        for ty, gen in zip(GeneratorType, out._gens):
            gen.nrpn = float(channel.gen(ty))
            if channel.gen_abs(ty) != 0:
                gen.flags = GEN_ABS_NRPN
        return out

    def __getitem__(self, gen: Union[GeneratorType, int]) -> Generator:
        return self._gens[GeneratorType(gen)]

    def __iter__(self) -> Iterator[Generator]:
        return iter(self._gens)

    def __len__(self) -> int:
        return len(self._gens)