import pytest

from oxisynth.channel_pool import ChannelOutOfRangeError, ChannelPool
from oxisynth.settings import InterpolationMethod


def test_pool_size_and_ids():
    pool = ChannelPool(16, InterpolationMethod.LINEAR)
    assert len(pool) == 16
    assert [ch.id for ch in pool] == list(range(16))


def test_interpolation_applied_to_all():
    pool = ChannelPool(16, InterpolationMethod.SEVENTH_ORDER)
    assert all(ch.interp_method is InterpolationMethod.SEVENTH_ORDER for ch in pool)


def test_get_and_index_return_same_channel():
    pool = ChannelPool(16, InterpolationMethod.NONE)
    assert pool.get(9) is pool[9]
    assert pool[9].id == 9


@pytest.mark.parametrize("bad", [16, 100, -1])
def test_out_of_range(bad):
    pool = ChannelPool(16, InterpolationMethod.NONE)
    with pytest.raises(ChannelOutOfRangeError):
        pool.get(bad)
    with pytest.raises(IndexError):
        pool[bad]


def test_channels_are_independent():
    pool = ChannelPool(16, InterpolationMethod.NONE)
    pool[0].set_cc(1, 77)
    assert pool[0].cc(1) == 77
    assert pool[1].cc(1) == 0