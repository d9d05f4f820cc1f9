"""Filesystem object storage.

Objects are written the way git writes loose objects: into a temporary file
in the destination directory, made read-only, then renamed into place.
Readers therefore see either nothing or a complete object, and concurrent
writers of the same object converge on identical bytes.
"""

import contextlib
import logging
import os
import tempfile
from pathlib import Path, PurePosixPath
from typing import Optional

logger = logging.getLogger(__name__)


def _sync_directory(directory: Path) -> None:
    """Flush the entry of a just-renamed object in its fan-out directory."""
    try:
        fd = os.open(directory, os.O_RDONLY | getattr(os, "O_DIRECTORY", 0))
    except OSError:
        # Windows cannot open directories
        logger.debug("Skipping fsync of %s", directory)
        return
    try:
        os.fsync(fd)
    except OSError:
        logger.debug("Filesystem refused fsync of %s", directory)
    finally:
        os.close(fd)


class FilesystemObjectStorage:
    """
    Local filesystem storage rooted at a directory.

    Storage paths map directly below the root: ``objects/aa/f4c6...`` is
    stored at ``<root>/objects/aa/f4c6...``.
    """

    def __init__(self, root: Path):
        """
        Initialize filesystem storage.

        Args:
            root: Base directory, created if missing
        """
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def get(self, path: str) -> Optional[bytes]:
        try:
            return self._resolve(path).read_bytes()
        except FileNotFoundError:
            return None

    def write(self, path: str, data: bytes) -> None:
        """
        Atomically write data at path.

        Args:
            path: Storage path
            data: Bytes to store
        """
        dest = self._resolve(path)
        dest.parent.mkdir(parents=True, exist_ok=True)

        tmp = tempfile.NamedTemporaryFile(
            prefix=".tmp-obj-",
            dir=str(dest.parent),
            delete=False,
        )
        tmppath = Path(tmp.name)

        try:
            with tmp:
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            # Loose objects are immutable once visible
            os.chmod(tmppath, 0o444)
            os.replace(str(tmppath), str(dest))
            _sync_directory(dest.parent)
            logger.debug("Wrote %d bytes to %s", len(data), dest)
        except Exception:
            with contextlib.suppress(OSError):
                tmppath.unlink()
            raise

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def delete(self, path: str) -> None:
        target = self._resolve(path)
        target.unlink(missing_ok=True)
        logger.debug("Deleted %s", target)

    def _resolve(self, path: str) -> Path:
        """
        Map a storage path to a file below the root.

        Raises:
            ValueError: If the path is empty, absolute or contains '..'
        """
        if not path:
            raise ValueError("Storage path cannot be empty")
        rel = PurePosixPath(path)
        if rel.is_absolute() or ".." in rel.parts:
            raise ValueError(f"Storage path must be relative and inside the store: {path!r}")
        return self.root.joinpath(*rel.parts)
