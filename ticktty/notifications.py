"""Notification support for finished timers."""

import logging
import platform
import subprocess
import sys

logger = logging.getLogger(__name__)

APP_TITLE = "TickTTY"


def _send_bell() -> None:
    """Send terminal bell."""
    sys.stdout.write("\a")
    sys.stdout.flush()


def _run(command: list) -> bool:
    try:
        subprocess.run(command, capture_output=True, timeout=5)
        return True
    except (subprocess.SubprocessError, FileNotFoundError, OSError) as exc:
        logger.debug("Notification command %s failed: %s", command[0], exc)
        return False


def _applescript_string(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _send_macos_notification(title: str, message: str) -> bool:
    """Send macOS notification via osascript.

    Returns:
        True if successful, False otherwise.
    """
    script = (
        f"display notification {_applescript_string(message)} "
        f"with title {_applescript_string(title)} sound name \"default\""
    )
    return _run(["osascript", "-e", script])



def _send_linux_notification(title: str, message: str) -> bool:
    """Send Linux notification via notify-send.

    Returns:
        True if successful, False otherwise.
    """
    return _run(["notify-send", title, message])


def notify(title: str, message: str, bell: bool = True) -> None:
    """Send a notification.

    Attempts to send both a terminal bell and a native notification.
    Fails silently if native notifications are not available.

    Args:
        title: Notification title.
        message: Notification message.
        bell: Whether to ring terminal bell.
    """
    if bell:
        _send_bell()

    system = platform.system()
    if system == "Darwin":
        _send_macos_notification(title, message)
    elif system == "Linux":
        _send_linux_notification(title, message)
    # Windows and other platforms: bell only


def notify_finished(label: str) -> None:
    notify(APP_TITLE, f"{label} finished!")
