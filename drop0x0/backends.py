import json
import os
import threading

from drop0x0.config import PREFS_FILE, PREFS_KEY
from drop0x0.errors import UnknownBackendError
from drop0x0.models import Backend

BACKENDS = (
    Backend(name="0x0", endpoint="https://0x0.st"),
)


def load_preference(path, key=PREFS_KEY):
    """Stored backend name, or None when nothing usable was saved"""
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r") as f:
            value = json.load(f).get(key)
    except (OSError, ValueError, AttributeError):
        return None
    return value if isinstance(value, str) else None


def save_preference(path, name, key=PREFS_KEY):
    tmp_path = f"{path}.tmp"
    with open(tmp_path, "w") as f:
        json.dump({key: name}, f)
    os.replace(tmp_path, path)


class BackendSelection:
    """Selected upload backend, persisted across restarts.

    The stored name is only trusted if it is still registered; anything else
    falls back to the first registered backend.
    """

    def __init__(self, path=PREFS_FILE, registry=BACKENDS):
        if not registry:
            raise ValueError("At least one backend must be registered")
        self.path = path
        self.registry = {b.name: b for b in registry}
        self.default = registry[0]
        self._lock = threading.Lock()

        stored = load_preference(path)
        self._current = self.registry.get(stored, self.default)

    @property
    def names(self):
        return list(self.registry)

    @property
    def current(self):
        with self._lock:
            return self._current

    def select(self, name):
        backend = self.registry.get(name)
        if backend is None:
            raise UnknownBackendError(name, self.names)
        with self._lock:
            save_preference(self.path, backend.name)
            self._current = backend
        return backend
