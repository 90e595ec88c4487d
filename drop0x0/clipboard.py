import threading

import pyperclip

from drop0x0.errors import ClipboardError


class Clipboard:
    """System clipboard via pyperclip. Each copy replaces the previous contents."""

    def __init__(self):
        self._lock = threading.Lock()

    def copy(self, text):
        with self._lock:
            try:
                pyperclip.copy(text)
            except pyperclip.PyperclipException as e:
                raise ClipboardError(f"Clipboard unavailable: {e}") from e
