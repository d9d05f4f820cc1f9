"""zlib compression for stored objects.

Objects are stored in the zlib container (RFC 1950): a two byte CMF/FLG
header, a deflate stream and a big-endian Adler-32 trailer. This is the
format git uses for loose objects, so stores are byte compatible with it.
"""

import zlib

from .constants import DEFAULT_COMPRESSION_LEVEL
from .errors import DecompressionError


def compress(data: bytes, level: int = DEFAULT_COMPRESSION_LEVEL) -> bytes:
    """Compress data into a zlib stream.

    Output is deterministic for a given input and level.

    Args:
        data: Bytes to compress (may be empty)
        level: zlib level, -1 (default) or 0-9

    Raises:
        ValueError: If level is out of range
    """
    if not -1 <= level <= 9:
        raise ValueError(f"Compression level must be between -1 and 9, got {level}")
    return zlib.compress(bytes(data), level)


def decompress(data: bytes) -> bytes:
    """Inflate a zlib stream.

    Never returns partial data: the stream must be complete, carry a valid
    Adler-32 checksum and end exactly at the end of the input.

    Raises:
        DecompressionError: On a bad header, corrupt deflate data, checksum
            mismatch, truncation or trailing bytes
    """
    inflater = zlib.decompressobj()
    try:
        result = inflater.decompress(bytes(data))
        result += inflater.flush()
    except zlib.error as e:
        raise DecompressionError(str(e)) from e

    if not inflater.eof:
        raise DecompressionError("truncated zlib stream")
    if inflater.unused_data:
        raise DecompressionError(
            f"{len(inflater.unused_data)} unexpected bytes after end of zlib stream"
        )
    return result


__all__ = ["compress", "decompress"]
