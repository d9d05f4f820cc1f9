"""Mapping between object hashes and fan-out storage paths.

    aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d
        <-> objects/aa/f4c61ddcc5e8a2dabede0f3b482cd9aea9434d

Hashes are validated before they are used in a path, so a caller-supplied
hash can never escape the objects directory.
"""

import re

from .constants import FANOUT_PREFIX_LENGTH, OBJECTS_DIR, SHA1_HEX_LENGTH, SHA256_HEX_LENGTH
from .errors import InvalidHashCharactersError, InvalidHashLengthError, InvalidObjectPathError

_HEX = re.compile(r"[0-9a-fA-F]+")
_VALID_LENGTHS = (SHA1_HEX_LENGTH, SHA256_HEX_LENGTH)


def validate_hash(hash_value: str) -> str:
    """Validate hash shape and return it lowercased.

    Raises:
        InvalidHashLengthError: Not a string, or not 40/64 characters long
        InvalidHashCharactersError: Contains non-hex characters
    """
    if not isinstance(hash_value, str) or len(hash_value) not in _VALID_LENGTHS:
        raise InvalidHashLengthError(hash_value)
    if not _HEX.fullmatch(hash_value):
        raise InvalidHashCharactersError(hash_value)
    return hash_value.lower()


def hash_to_path(hash_value: str) -> str:
    """Get storage path for a hash."""
    h = validate_hash(hash_value)
    return f"{OBJECTS_DIR}/{h[:FANOUT_PREFIX_LENGTH]}/{h[FANOUT_PREFIX_LENGTH:]}"


def path_to_hash(path: str) -> str:
    """Recover the lowercase hash from a storage path.

    Raises:
        InvalidObjectPathError: If the path is not objects/<2 hex>/<hex> or
            the recombined hash is not 40 or 64 characters
    """
    if not isinstance(path, str) or not path.startswith(f"{OBJECTS_DIR}/"):
        raise InvalidObjectPathError(path, f"must start with '{OBJECTS_DIR}/'")

    parts = path.split("/")
    if len(parts) != 3:
        raise InvalidObjectPathError(path, f"expected {OBJECTS_DIR}/<dir>/<file>")

    _, directory, filename = parts
    if len(directory) != FANOUT_PREFIX_LENGTH or not _HEX.fullmatch(directory):
        raise InvalidObjectPathError(path, "directory must be exactly 2 hex characters")
    if not _HEX.fullmatch(filename):
        raise InvalidObjectPathError(path, "filename must be hex characters")

    hash_value = (directory + filename).lower()
    if len(hash_value) not in _VALID_LENGTHS:
        raise InvalidObjectPathError(
            path, f"hash length {len(hash_value)} is not 40 or 64"
        )
    return hash_value


__all__ = ["validate_hash", "hash_to_path", "path_to_hash"]
