"""Single-slot hand-off for files the OS asks the editor to open."""

import threading
from pathlib import Path


class PendingFileSlot:
    """
    Take-once channel holding at most one path waiting to be opened.

    A launcher or second-instance handler offers a path; the editor takes it
    once it is ready. Taking clears the slot so the same path is never opened
    twice. A newer offer replaces an unclaimed one.
    """

    def __init__(self) -> None:
        self._path: Path | None = None
        self._lock = threading.Lock()

    def offer(self, path: str | Path) -> None:
        """Store a path, replacing any path not yet taken."""
        with self._lock:
            self._path = Path(path)

    def take(self) -> Path | None:
        """Return the pending path and clear the slot."""
        with self._lock:
            path, self._path = self._path, None
            return path

    def peek(self) -> Path | None:
        """Return the pending path without clearing it."""
        with self._lock:
            return self._path
