"""Content-addressable object store compatible with git loose objects."""

from .compression import compress, decompress
from .errors import (
    CASError,
    ConfigError,
    DecompressionError,
    InvalidAlgorithmError,
    ENOENT,
    InvalidHashCharactersError,
    InvalidHashError,
    InvalidHashLengthError,
    InvalidObjectPathError,
    InvalidSizeError,
    InvalidTypeError,
    MalformedHeaderError,
    MissingSeparatorError,
    MissingTerminatorError,
    ObjectNotFoundError,
    SizeMismatchError,
)
from .git_object import (
    GitObject,
    ObjectHeader,
    ObjectType,
    create_git_object,
    create_header,
    parse_git_object,
    parse_header,
)
from .hashing import HashAlgorithm, sha1, sha256
from .path_mapping import hash_to_path, path_to_hash, validate_hash
from .storage import FilesystemObjectStorage, MemoryObjectStorage, ObjectStorage
from .store import get_object, has_object, hash_object, put_object

__version__ = "0.1.0"

__all__ = [
    # Operations
    "put_object",
    "get_object",
    "has_object",
    "hash_object",
    # Leaves
    "sha1",
    "sha256",
    "HashAlgorithm",
    "compress",
    "decompress",
    "create_header",
    "parse_header",
    "create_git_object",
    "parse_git_object",
    "hash_to_path",
    "path_to_hash",
    "validate_hash",
    # Types
    "ObjectType",
    "ObjectHeader",
    "GitObject",
    "ObjectStorage",
    "MemoryObjectStorage",
    "FilesystemObjectStorage",
    # Errors
    "CASError",
    "ConfigError",
    "DecompressionError",
    "InvalidAlgorithmError",
    "ENOENT",
    "InvalidHashCharactersError",
    "InvalidHashError",
    "InvalidHashLengthError",
    "InvalidObjectPathError",
    "InvalidSizeError",
    "InvalidTypeError",
    "MalformedHeaderError",
    "MissingSeparatorError",
    "MissingTerminatorError",
    "ObjectNotFoundError",
    "SizeMismatchError",
]
