import pytest

from tinylove.system import System


def test_os_name():
    assert System().get_os() == "Lutro"


def test_processor_count_is_one():
    assert System().get_processor_count() == 1


def test_clipboard_starts_empty():
    assert System().get_clipboard_text() == ""


def test_clipboard_round_trip():
    s = System()
    s.set_clipboard_text("hello world")
    assert s.get_clipboard_text() == "hello world"


def test_clipboard_accepts_numbers_as_text():
    s = System()
    s.set_clipboard_text(12)
    assert s.get_clipboard_text() == "12"


def test_clipboard_is_per_instance():
    a, b = System(), System()
    a.set_clipboard_text("only a")
    assert b.get_clipboard_text() == ""


def test_set_clipboard_requires_argument():
    with pytest.raises(TypeError, match="requires 1 argument, 0 given"):
        System().set_clipboard_text()


def test_set_clipboard_rejects_table_like_values():
    with pytest.raises(TypeError):
        System().set_clipboard_text({"a": 1})


def test_get_clipboard_rejects_arguments():
    with pytest.raises(TypeError, match="requires 0 argument, 1 given"):
        System().get_clipboard_text("x")


def test_power_url_and_vibrate():
    s = System()
    assert s.get_power_info() == "unknown"
    assert s.open_url("https://example.com") is False
    assert s.vibrate(0.5) is None