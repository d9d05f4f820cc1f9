"""Base protocol for object storage backends."""

from typing import Optional, Protocol


class ObjectStorage(Protocol):
    """
    Protocol for key -> bytes storage backends.

    Keys are opaque path strings such as ``objects/aa/f4c6...``.
    Hashing, compression and integrity checks are the caller's
    responsibility, not the backend's. Errors raised by a backend are
    propagated to callers unchanged.
    """

    def get(self, path: str) -> Optional[bytes]:
        """
        Read the bytes stored at path.

        Args:
            path: Storage path

        Returns:
            Stored bytes, or None if nothing is stored at path
        """
        ...

    def write(self, path: str, data: bytes) -> None:
        """
        Store data at path, replacing any previous value.

        Args:
            path: Storage path
            data: Bytes to store
        """
        ...

    def exists(self, path: str) -> bool:
        """
        Check if anything is stored at path.

        Args:
            path: Storage path

        Returns:
            True if path holds data
        """
        ...

    def delete(self, path: str) -> None:
        """
        Remove the data at path. Deleting a missing path is not an error.

        Args:
            path: Storage path
        """
        ...
