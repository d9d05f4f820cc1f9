"""Git object framing.

Every stored object is prefixed with a self-describing header::

    <type> SP <decimal size> NUL <content>

The framed bytes, not the raw content, are what gets hashed and compressed.
The declared size must equal the content length exactly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union
import re

from .errors import (
    InvalidSizeError,
    InvalidTypeError,
    MissingSeparatorError,
    MissingTerminatorError,
    SizeMismatchError,
)

_SIZE = re.compile(rb"[0-9]+")


class ObjectType(str, Enum):
    """Closed set of git object types."""
    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"
    TAG = "tag"


class ObjectHeader(NamedTuple):
    """Parsed object header."""
    type: ObjectType
    size: int
    content_offset: int


@dataclass(frozen=True)
class GitObject:
    """A decoded object: its type and raw content."""
    type: ObjectType
    content: bytes


def validate_object_type(obj_type: Union[str, ObjectType]) -> ObjectType:
    """Check that obj_type names one of the four object types.

    Raises:
        InvalidTypeError: For non-strings, empty strings, strings containing
            a space or NUL, and unknown types
    """
    if isinstance(obj_type, ObjectType):
        return obj_type
    if not isinstance(obj_type, str):
        raise InvalidTypeError(obj_type, "must be a string")
    if not obj_type:
        raise InvalidTypeError(obj_type, "type cannot be empty")
    if " " in obj_type or "\0" in obj_type:
        raise InvalidTypeError(obj_type, "type cannot contain spaces or null bytes")
    try:
        return ObjectType(obj_type)
    except ValueError:
        raise InvalidTypeError(obj_type) from None


def create_header(obj_type: Union[str, ObjectType], size: int) -> bytes:
    """Build the ``"<type> <size>\\0"`` header.

    Python ints are unbounded, so sizes beyond 32 bits are written in full.

    Raises:
        InvalidTypeError: Unknown type
        InvalidSizeError: Size is negative, not an int, or too large to
            format as a decimal string
    """
    object_type = validate_object_type(obj_type)
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise InvalidSizeError(size)
    try:
        digits = str(size)
    except ValueError:
        # int -> str conversion is capped by sys.get_int_max_str_digits()
        raise InvalidSizeError(f"<{size.bit_length()}-bit integer>") from None
    return f"{object_type.value} {digits}".encode("ascii") + b"\0"


def parse_header(data: bytes) -> ObjectHeader:
    """Parse the header at the start of a framed object.

    Args:
        data: Framed object bytes (at least the header)

    Returns:
        ObjectHeader with type, declared size and the offset of the content

    Raises:
        MissingTerminatorError: No NUL byte
        MissingSeparatorError: No space before the NUL byte
        InvalidTypeError: Unknown type
        InvalidSizeError: Size field is not a non-negative decimal number
    """
    data = bytes(data)
    nul = data.find(b"\0")
    if nul < 0:
        raise MissingTerminatorError()

    header = data[:nul]
    space = header.find(b" ")
    if space < 0:
        raise MissingSeparatorError()

    raw_type, raw_size = header[:space], header[space + 1:]
    try:
        type_name = raw_type.decode("ascii")
    except UnicodeDecodeError:
        raise InvalidTypeError(raw_type) from None
    object_type = validate_object_type(type_name)

    if not _SIZE.fullmatch(raw_size):
        raise InvalidSizeError(raw_size.decode("ascii", errors="replace"))
    try:
        size = int(raw_size)
    except ValueError:
        raise InvalidSizeError(f"<{len(raw_size)}-digit number>") from None

    return ObjectHeader(object_type, size, nul + 1)


def create_git_object(obj_type: Union[str, ObjectType], content: bytes) -> bytes:
    """Frame content with its header."""
    content = bytes(content)
    return create_header(obj_type, len(content)) + content


def parse_git_object(data: bytes) -> GitObject:
    """Split a framed object into type and content.

    Raises:
        SizeMismatchError: If the content is shorter or longer than declared
        MalformedHeaderError, InvalidTypeError: From parse_header
    """
    data = bytes(data)
    header = parse_header(data)
    content = data[header.content_offset:]
    if len(content) != header.size:
        raise SizeMismatchError(header.size, len(content))
    return GitObject(header.type, content)


__all__ = [
    "ObjectType",
    "ObjectHeader",
    "GitObject",
    "validate_object_type",
    "create_header",
    "parse_header",
    "create_git_object",
    "parse_git_object",
]
