"""Hashing utilities for object identifiers.

Objects are identified by the SHA-1 (git default) or SHA-256 digest of their
framed bytes. The algorithm is never stored alongside an object: a 40
character hash is SHA-1, a 64 character hash is SHA-256.
"""

from enum import Enum
import hashlib

from .constants import SHA1_HEX_LENGTH, SHA256_HEX_LENGTH
from .errors import InvalidAlgorithmError, InvalidHashLengthError


class HashAlgorithm(str, Enum):
    """Digest used to name objects."""
    SHA1 = "sha1"
    SHA256 = "sha256"

    @property
    def hex_length(self) -> int:
        """Number of hex characters in a digest of this algorithm."""
        return SHA1_HEX_LENGTH if self is HashAlgorithm.SHA1 else SHA256_HEX_LENGTH


def sha1(data: bytes) -> str:
    """Compute SHA-1 hex digest of data."""
    return hashlib.sha1(data).hexdigest()


def sha256(data: bytes) -> str:
    """Compute SHA-256 hex digest of data."""
    return hashlib.sha256(data).hexdigest()


_HASHERS = {
    HashAlgorithm.SHA1: sha1,
    HashAlgorithm.SHA256: sha256,
}


def hash_bytes(data: bytes, algorithm: HashAlgorithm = HashAlgorithm.SHA1) -> str:
    """Hash data with the given algorithm.

    Args:
        data: Bytes to hash
        algorithm: HashAlgorithm or its string value

    Returns:
        Lowercase hex digest

    Raises:
        InvalidAlgorithmError: If algorithm is not sha1 or sha256
    """
    try:
        algorithm = HashAlgorithm(algorithm)
    except ValueError:
        raise InvalidAlgorithmError(algorithm) from None
    return _HASHERS[algorithm](data)


def algorithm_for_hash(hash_value: str) -> HashAlgorithm:
    """Infer the algorithm that produced a hash from its length.

    Raises:
        InvalidHashLengthError: If the length matches no supported algorithm
    """
    if isinstance(hash_value, str):
        for algorithm in HashAlgorithm:
            if len(hash_value) == algorithm.hex_length:
                return algorithm
    raise InvalidHashLengthError(hash_value)


__all__ = [
    "HashAlgorithm",
    "sha1",
    "sha256",
    "hash_bytes",
    "algorithm_for_hash",
]
