"""In-memory object storage for tests and development."""

import threading
from typing import Dict, List, Optional


class MemoryObjectStorage:
    """Dictionary-backed storage.

    Safe to share between threads. Data is lost when the process exits.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._objects: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[bytes]:
        with self._lock:
            return self._objects.get(path)

    def write(self, path: str, data: bytes) -> None:
        with self._lock:
            self._objects[path] = bytes(data)

    def exists(self, path: str) -> bool:
        with self._lock:
            return path in self._objects

    def delete(self, path: str) -> None:
        with self._lock:
            self._objects.pop(path, None)

    def paths(self) -> List[str]:
        """List stored paths in sorted order."""
        with self._lock:
            return sorted(self._objects)

    def size(self) -> int:
        """Number of stored objects."""
        with self._lock:
            return len(self._objects)

    def total_bytes(self) -> int:
        """Total size of stored data."""
        with self._lock:
            return sum(len(data) for data in self._objects.values())

    def clear(self) -> None:
        """Remove everything. Useful for testing."""
        with self._lock:
            self._objects.clear()
