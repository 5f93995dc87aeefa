import pytest

from oxisynth.tuning import Tuning


def test_default_is_equal_temperament():
    tuning = Tuning()
    assert len(tuning.pitch) == 128
    assert tuning.pitch[0] == 0.0
    assert tuning.pitch[1] == 100.0
    steps = {b - a for a, b in zip(tuning.pitch, tuning.pitch[1:])}
    assert steps == {100.0}


def test_key_tuning_round_trip():
    pitches = [float(i * 37 % 1000) for i in range(128)]
    assert Tuning.new_key_tuning(pitches).pitch == pitches


def test_key_tuning_copies_input():
    pitches = [0.0] * 128
    tuning = Tuning.new_key_tuning(pitches)
    pitches[5] = 999.0
    assert tuning.pitch[5] == 0.0


@pytest.mark.parametrize("count", [0, 12, 127, 129])
def test_key_tuning_wrong_length(count):
    with pytest.raises(ValueError):
        Tuning.new_key_tuning([0.0] * count)


def test_octave_tuning_applies_offsets_per_pitch_class():
    offsets = [-33.0, 5.0, 0.0, 12.5, -7.0, 0.0, 3.0, 0.0, -1.0, 0.0, 20.0, -20.0]
    tuning = Tuning.new_octave_tuning(offsets)
    default = Tuning()
    for key, (tuned, base) in enumerate(zip(tuning.pitch, default.pitch)):
        assert tuned - base == pytest.approx(offsets[key % 12])


def test_zero_octave_tuning_equals_default():
    assert Tuning.new_octave_tuning([0.0] * 12) == Tuning()


@pytest.mark.parametrize("count", [0, 11, 13, 128])
def test_octave_tuning_wrong_length(count):
    with pytest.raises(ValueError):
        Tuning.new_octave_tuning([0.0] * count)


def test_pitch_is_mutable_per_instance():
    a = Tuning()
    b = Tuning()
    a.pitch[60] = 1.0
    assert b.pitch[60] != a.pitch[60]
    assert a != b