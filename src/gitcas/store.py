"""Object store operations.

Composes framing, hashing, compression and path mapping over an injected
storage backend:

    write: content -> frame -> hash(frame) -> compress(frame) -> path -> storage.write
    read:  hash -> path -> storage.get -> decompress -> parse -> GitObject

Each operation makes exactly one backend call. All validation happens
before that call; any failure aborts the whole operation, so callers never
see a partial result. Backend errors are propagated unchanged and nothing
is retried.
"""

import logging
from typing import Union

from .compression import compress, decompress
from .constants import DEFAULT_COMPRESSION_LEVEL
from .errors import ObjectNotFoundError
from .git_object import GitObject, ObjectType, create_git_object, parse_git_object, validate_object_type
from .hashing import HashAlgorithm, hash_bytes
from .path_mapping import hash_to_path
from .storage.base import ObjectStorage

logger = logging.getLogger(__name__)

Content = Union[bytes, bytearray, memoryview, str]


def _as_bytes(content: Content) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


def hash_object(
    obj_type: Union[str, ObjectType],
    content: Content,
    *,
    algorithm: HashAlgorithm = HashAlgorithm.SHA1,
) -> str:
    """Compute the hash an object would be stored under, without storing it.

    Args:
        obj_type: blob, tree, commit or tag
        content: Raw content; str is encoded as UTF-8
        algorithm: Digest used for the object name

    Returns:
        Lowercase hex hash of the framed object

    Raises:
        InvalidTypeError: If obj_type is not a valid object type
        InvalidAlgorithmError: If algorithm is not sha1 or sha256
    """
    object_type = validate_object_type(obj_type)
    return hash_bytes(create_git_object(object_type, _as_bytes(content)), algorithm)


def put_object(
    storage: ObjectStorage,
    obj_type: Union[str, ObjectType],
    content: Content,
    *,
    algorithm: HashAlgorithm = HashAlgorithm.SHA1,
    level: int = DEFAULT_COMPRESSION_LEVEL,
) -> str:
    """Store an object and return its hash.

    Storing the same (type, content) twice returns the same hash and
    rewrites identical bytes at the same path.

    Args:
        storage: Backend to write to
        obj_type: blob, tree, commit or tag
        content: Raw content; str is encoded as UTF-8
        algorithm: Digest used for the object name (SHA-1 like git by default)
        level: zlib compression level

    Returns:
        Lowercase hex hash of the framed object

    Raises:
        InvalidTypeError: If obj_type is not a valid object type
        InvalidAlgorithmError: If algorithm is not sha1 or sha256
        ValueError: If level is outside -1..9
        Any exception raised by storage.write, unchanged
    """
    object_type = validate_object_type(obj_type)
    framed = create_git_object(object_type, _as_bytes(content))
    hash_value = hash_bytes(framed, algorithm)
    compressed = compress(framed, level)
    path = hash_to_path(hash_value)

    storage.write(path, compressed)
    logger.debug(
        "Stored %s %s (%d bytes, %d compressed)",
        object_type.value, hash_value[:12], len(framed), len(compressed),
    )
    return hash_value


def get_object(hash_value: str, storage: ObjectStorage) -> GitObject:
    """Read and decode an object.

    Args:
        hash_value: 40 or 64 hex characters, any case
        storage: Backend to read from

    Returns:
        GitObject with the stored type and content

    Raises:
        InvalidHashError: Before any I/O, if the hash is malformed
        ObjectNotFoundError: If nothing is stored at the derived path
        DecompressionError: If the stored bytes are corrupt or truncated
        MalformedHeaderError, InvalidTypeError, SizeMismatchError: If the
            decompressed object is not correctly framed
    """
    path = hash_to_path(hash_value)
    data = storage.get(path)
    if data is None:
        raise ObjectNotFoundError(path)

    obj = parse_git_object(decompress(data))
    logger.debug("Read %s %s (%d bytes)", obj.type.value, path, len(obj.content))
    return obj


def has_object(hash_value: str, storage: ObjectStorage) -> bool:
    """Check whether an object is stored.

    Only probes for existence: the object is not read, decompressed or
    parsed, so a present but corrupt object still reports True.

    Raises:
        InvalidHashError: If the hash is malformed (never returns False for it)
    """
    return storage.exists(hash_to_path(hash_value))


__all__ = ["hash_object", "put_object", "get_object", "has_object"]
