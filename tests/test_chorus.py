import pytest

from oxisynth.chorus import Chorus, ChorusMode, ChorusParams


@pytest.fixture
def chorus():
    return Chorus(44100.0)


def test_default_params(chorus):
    assert chorus.params() == ChorusParams()
    assert chorus.params().nr == 3
    assert chorus.params().mode is ChorusMode.SINE


def test_set_params_round_trip(chorus):
    params = ChorusParams(nr=5, level=0.5, speed=1.0, depth=4.0, mode=ChorusMode.TRIANGLE)
    chorus.set_params(params)
    assert chorus.params() == params


def test_number_blocks_clamped(chorus):
    chorus.set_params(ChorusParams(nr=200))
    assert chorus.params().nr == 99


@pytest.mark.parametrize("speed, expected", [(0.1, 0.29), (10.0, 5.0)])
def test_speed_clamped(chorus, speed, expected):
    chorus.set_params(ChorusParams(speed=speed))
    assert chorus.params().speed == pytest.approx(expected)


def test_depth_negative_clamped(chorus):
    chorus.set_params(ChorusParams(depth=-1.0))
    assert chorus.params().depth == 0.0


@pytest.mark.parametrize("level, expected", [(-1.0, 0.0), (11.0, 0.1)])
def test_level_clamped(chorus, level, expected):
    chorus.set_params(ChorusParams(level=level))
    assert chorus.params().level == pytest.approx(expected)


def test_silence_in_silence_out(chorus):
    left, right = chorus.process_replace([0.0] * 64)
    assert left == [0.0] * 64
    assert right == [0.0] * 64


def test_process_mix_with_silence_keeps_outputs(chorus):
    base_left = [float(i) for i in range(64)]
    base_right = [float(-i) for i in range(64)]
    left, right = chorus.process_mix([0.0] * 64, base_left, base_right)
    assert left == base_left
    assert right == base_right


def test_process_mix_length_mismatch(chorus):
    with pytest.raises(ValueError):
        chorus.process_mix([0.0] * 64, [0.0] * 63, [0.0] * 64)


def test_signal_produces_equal_stereo_output(chorus):
    outputs = []
    for _ in range(20):
        left, right = chorus.process_replace([1.0] * 64)
        assert left == right
        outputs.extend(left)
    assert any(abs(v) > 0.0 for v in outputs)


def test_zero_level_is_silent(chorus):
    chorus.set_params(ChorusParams(level=0.0))
    for _ in range(20):
        left, _ = chorus.process_replace([1.0] * 64)
        assert all(v == 0.0 for v in left)


def test_zero_blocks_is_silent(chorus):
    chorus.set_params(ChorusParams(nr=0))
    for _ in range(20):
        left, _ = chorus.process_replace([1.0] * 64)
        assert all(v == 0.0 for v in left)


def test_mix_adds_same_as_replace():
    a = Chorus(44100.0)
    b = Chorus(44100.0)
    block = [0.5] * 64
    for _ in range(15):
        wet, _ = a.process_replace(block)
        left, right = b.process_mix(block, [1.0] * 64, [2.0] * 64)
        assert left == pytest.approx([1.0 + w for w in wet])
        assert right == pytest.approx([2.0 + w for w in wet])


def test_deterministic_between_instances():
    a = Chorus(44100.0)
    b = Chorus(44100.0)
    block = [((i % 7) - 3) / 3.0 for i in range(64)]
    for _ in range(10):
        assert a.process_replace(block) == b.process_replace(block)


def test_reset_clears_state(chorus):
    for _ in range(10):
        chorus.process_replace([1.0] * 64)
    chorus.set_params(ChorusParams(nr=7))
    chorus.reset()
    assert chorus.params() == ChorusParams()
    left, _ = chorus.process_replace([0.0] * 64)
    assert left == [0.0] * 64


def test_triangle_mode_produces_output(chorus):
    chorus.set_params(ChorusParams(mode=ChorusMode.TRIANGLE))
    chorus.set_params(ChorusParams(mode=ChorusMode.TRIANGLE))
    assert chorus.params().mode is ChorusMode.TRIANGLE
    outputs = []
    for _ in range(20):
        left, _ = chorus.process_replace([1.0] * 64)
        outputs.extend(left)
    assert any(abs(v) > 0.0 for v in outputs)