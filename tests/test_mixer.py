import pytest

from tinylove.mixer import INT16_MAX, INT16_MIN, PresaturateBuffer, to_int16


def test_to_int16_rounds_half_away_from_zero():
    assert to_int16(0.5) == 1
    assert to_int16(-0.5) == -1


def test_to_int16_rounds_below_half_down():
    assert to_int16(0.4) == 0
    assert to_int16(-0.4) == 0


def test_to_int16_keeps_whole_numbers():
    for v in (0, 17, -17, INT16_MAX, INT16_MIN):
        assert to_int16(float(v)) == v


def test_to_int16_saturates():
    assert to_int16(1e9) == INT16_MAX
    assert to_int16(-1e9) == INT16_MIN


def test_buffer_default_is_silence_of_right_size():
    buf = PresaturateBuffer(channels=2, samplelen=10)
    assert len(buf.data) == 2 * 10
    assert all(s == 0.0 for s in buf.data)


def test_buffer_keeps_given_data():
    data = [0.25, -0.25, 0.5, -0.5]
    buf = PresaturateBuffer(2, 2, data)
    assert buf.data == data


def test_buffer_rejects_short_data():
    with pytest.raises(ValueError):
        PresaturateBuffer(2, 4, [0.1, 0.2])


def test_buffer_rejects_negative_sizes():
    with pytest.raises(ValueError):
        PresaturateBuffer(-1, 4)