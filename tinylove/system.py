"""The ``system`` engine module: OS facts and a private clipboard."""

from __future__ import annotations

OS_NAME = "Lutro"


def _check_string(value: object, position: int) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise TypeError(f"bad argument #{position} (string expected, got boolean)")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return "%.14g" % value
    raise TypeError(
        f"bad argument #{position} (string expected, got {type(value).__name__})"
    )


class System:
    """System queries; the clipboard lives only inside the engine."""

    def __init__(self) -> None:
        self._clipboard = ""
        self.last_url: object | None = None
        self.last_vibration: tuple[object, ...] | None = None

    def get_os(self) -> str:
        return OS_NAME

    def get_processor_count(self) -> int:
        # Threads are not available, so a single processor is reported.
        return 1

    def set_clipboard_text(self, *args: object) -> None:
        if len(args) < 1:
            raise TypeError(
                f"lutro.system.setClipboardText requires 1 argument, {len(args)} given."
            )
        self._clipboard = _check_string(args[0], 1)

    def get_clipboard_text(self, *args: object) -> str:
        if args:
            raise TypeError(
                f"lutro.system.getClipboardText requires 0 argument, {len(args)} given."
            )
        return self._clipboard

    def get_power_info(self) -> str:
        return "unknown"

    def open_url(self, *args: object) -> bool:
        """Record the requested URL; opening URLs is never possible."""
        self.last_url = args[0] if args else None
        return False

    def vibrate(self, *args: object) -> None:
        """Record the vibration request; there is no device to vibrate."""
        self.last_vibration = tuple(args)