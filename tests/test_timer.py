import pytest

from tinylove.settings import Settings
from tinylove.timer import Timer


def test_get_time_converts_microseconds_to_seconds():
    timer = Timer(Settings(), clock=lambda: 2_500_000)
    assert timer.get_time() == pytest.approx(2.5)


def test_default_clock_does_not_go_backwards():
    timer = Timer(Settings())
    first = timer.get_time()
    second = timer.get_time()
    assert second >= first


def test_delta_and_fps_follow_settings():
    settings = Settings()
    timer = Timer(settings)
    settings.update_timing(0.5)
    assert timer.get_delta() == 0.5
    assert timer.get_fps() == 2


def test_initial_delta_is_zero():
    timer = Timer(Settings())
    assert timer.get_delta() == 0.0
    assert timer.get_fps() == 0