import pytest

from oxisynth.generator import (
    GEN_ABS_NRPN,
    GEN_UNUSED,
    GENERATOR_COUNT,
    Generator,
    GeneratorList,
    GeneratorType,
    default_values,
    gen_scale_nrpn,
)


class _FakeChannel:
    def __init__(self, gens, abs_flags):
        self._gens = gens
        self._abs = abs_flags

    def gen(self, ty):
        return self._gens.get(ty, 0.0)

    def gen_abs(self, ty):
        return self._abs.get(ty, 0)


def test_generator_numbers_are_contiguous():
    assert [int(g) for g in GeneratorType] == list(range(GENERATOR_COUNT))
    assert GENERATOR_COUNT == 60
    assert GeneratorType.PITCH == 59
    gens = GeneratorList()
    assert len(gens) == GENERATOR_COUNT
    for ty in GeneratorType:
        assert gens[int(ty)] is gens[ty]


def test_unknown_generator_number_rejected():
    with pytest.raises(ValueError):
        GeneratorType(60)


def test_default_values():
    gens = default_values()
    assert len(gens) == GENERATOR_COUNT
    assert all(g.flags == GEN_UNUSED and g.mod == 0.0 and g.nrpn == 0.0 for g in gens)
    assert gens[GeneratorType.FILTER_FC].val == 13500.0
    assert gens[GeneratorType.VOL_ENV_DELAY].val == -12000.0
    assert gens[GeneratorType.SCALE_TUNE].val == 100.0
    assert gens[GeneratorType.KEY_NUM].val == -1.0
    assert gens[GeneratorType.ATTENUATION].val == 0.0


def test_default_values_are_independent():
    first = default_values()
    second = default_values()
    first[0].val = 42.0
    assert second[0].val == 0.0


def test_generator_list_indexing_shares_state():
    gens = GeneratorList()
    gens[GeneratorType.FILTER_Q].val = 5.0
    gens[GeneratorType.FILTER_Q].flags = 1
    assert gens[9] == Generator(flags=1, val=5.0)
    assert gens[GeneratorType.FILTER_Q] is gens[9]


def test_generator_list_iterates_in_order():
    gens = GeneratorList()
    values = [g.val for g in gens]
    assert len(gens) == GENERATOR_COUNT
    assert values == [g.val for g in default_values()]


def test_generator_list_rejects_unknown_index():
    with pytest.raises(ValueError):
        GeneratorList()[GENERATOR_COUNT]


def test_from_channel_copies_nrpn_and_abs_flags():
    channel = _FakeChannel(
        {GeneratorType.PAN: 25.0, GeneratorType.FINE_TUNE: -3.0},
        {GeneratorType.FINE_TUNE: 1},
    )
    gens = GeneratorList.from_channel(channel)
    assert gens[GeneratorType.PAN].nrpn == 25.0
    assert gens[GeneratorType.PAN].flags == GEN_UNUSED
    assert gens[GeneratorType.FINE_TUNE].nrpn == -3.0
    assert gens[GeneratorType.FINE_TUNE].flags == GEN_ABS_NRPN
    assert gens[GeneratorType.FILTER_FC].val == 13500.0


def test_gen_scale_nrpn_centre_is_zero():
    for ty in GeneratorType:
        assert gen_scale_nrpn(ty, 8192) == 0.0


def test_gen_scale_nrpn_unit_scale():
    assert gen_scale_nrpn(GeneratorType.START_ADDR_OFS, 8192 + 100) == 100.0
    assert gen_scale_nrpn(GeneratorType.PAN, 8192 - 100) == -100.0


def test_gen_scale_nrpn_scales_relative_to_unit():
    unit = gen_scale_nrpn(GeneratorType.START_ADDR_OFS, 8192 + 100)
    assert gen_scale_nrpn(GeneratorType.FILTER_FC, 8192 + 100) == 2 * unit
    assert gen_scale_nrpn(GeneratorType.MOD_LFO_FREQ, 8192 + 100) == 4 * unit
    assert gen_scale_nrpn(GeneratorType.UNUSED, 8192 + 100) == 0.0


def test_gen_scale_nrpn_clamps():
    ty = GeneratorType.PAN
    assert gen_scale_nrpn(ty, 100000) == gen_scale_nrpn(ty, 8192 * 2)
    assert gen_scale_nrpn(ty, -5000) == gen_scale_nrpn(ty, 0)


def test_gen_scale_nrpn_rejects_out_of_range_generator():
    with pytest.raises(ValueError):
        gen_scale_nrpn(GENERATOR_COUNT, 8192)
    with pytest.raises(ValueError):
        gen_scale_nrpn(-1, 8192)