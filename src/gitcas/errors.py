"""Custom exceptions for gitcas.

This module defines typed exceptions for every way an object can fail to be
stored or read. Backend failures are not wrapped: whatever the storage
backend raises reaches the caller unchanged.
"""

import errno as _errno


class CASError(RuntimeError):
    """Base class for all gitcas errors."""
    pass


# Hash Errors
class InvalidHashError(CASError):
    """Hash is not 40 or 64 hexadecimal characters."""

    def __init__(self, hash_value, reason: str):
        self.hash = hash_value
        self.reason = reason
        super().__init__(f"Invalid hash {hash_value!r}: {reason}")


class InvalidHashLengthError(InvalidHashError):
    """Hash has the wrong number of characters."""

    def __init__(self, hash_value):
        length = len(hash_value) if isinstance(hash_value, str) else None
        super().__init__(
            hash_value,
            f"expected 40 or 64 hex characters, got {length if length is not None else type(hash_value).__name__}",
        )


class InvalidHashCharactersError(InvalidHashError):
    """Hash contains characters outside [0-9a-fA-F]."""

    def __init__(self, hash_value: str):
        super().__init__(hash_value, "contains non-hexadecimal characters")


class InvalidAlgorithmError(CASError):
    """Hash algorithm other than sha1 or sha256."""

    def __init__(self, algorithm):
        self.algorithm = algorithm
        super().__init__(f"Unsupported hash algorithm {algorithm!r}: must be one of sha1, sha256")


class InvalidObjectPathError(CASError):
    """Storage path is not of the form objects/xx/yyyy..."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid object path {path!r}: {reason}")


# Framing Errors
class InvalidTypeError(CASError):
    """Object type outside blob/tree/commit/tag."""

    def __init__(self, object_type, reason: str = "must be one of blob, tree, commit, tag"):
        self.object_type = object_type
        self.reason = reason
        super().__init__(f"Invalid object type {object_type!r}: {reason}")


class MalformedHeaderError(CASError):
    """Base class for unparseable object headers."""
    pass


class MissingTerminatorError(MalformedHeaderError):
    """Header has no NUL byte."""

    def __init__(self):
        super().__init__("Malformed object header: missing null byte terminator")


class MissingSeparatorError(MalformedHeaderError):
    """Header has no space between type and size."""

    def __init__(self):
        super().__init__("Malformed object header: missing space between type and size")


class InvalidSizeError(MalformedHeaderError):
    """Size field is empty, negative or not a decimal number."""

    def __init__(self, size):
        self.size = size
        super().__init__(f"Malformed object header: invalid size {size!r}")


class SizeMismatchError(CASError):
    """Declared size does not match the number of content bytes."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Object size mismatch: header declares {expected} bytes, "
            f"found {actual} bytes of content"
        )


# Integrity Errors
class DecompressionError(CASError):
    """Stored bytes are not a valid, complete zlib stream."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Decompression failed: {reason}")


# Storage Errors
class ObjectNotFoundError(CASError):
    """No object is stored at the derived path."""

    code = "ENOENT"
    errno = _errno.ENOENT

    def __init__(self, path: str, syscall: str = "read"):
        self.path = path
        self.syscall = syscall
        super().__init__(f"ENOENT: no such file or directory, {syscall} '{path}'")


ENOENT = ObjectNotFoundError


# Configuration Errors
class ConfigError(CASError):
    """Configuration file could not be loaded or is invalid."""
    pass
