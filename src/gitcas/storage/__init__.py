"""Storage backends for loose objects."""

from .base import ObjectStorage
from .factory import make_object_storage
from .fs import FilesystemObjectStorage
from .memory import MemoryObjectStorage

__all__ = [
    "ObjectStorage",
    "make_object_storage",
    "FilesystemObjectStorage",
    "MemoryObjectStorage",
]
