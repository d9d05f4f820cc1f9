"""Test helpers shared across modules."""

# Well-known git blob hashes (git hash-object)
EMPTY_BLOB = "e69de29bb2d1d6434b8b29ae775ad8c2e48c5391"
HELLO_BLOB = "b6fc4c620b67d95f953a5c1c1230aaab5db5a1b0"
DOC_BLOB = "bd9dbf5aae1a3862dd1526723246b20206e5fc37"


def corrupt_middle_byte(data: bytes) -> bytes:
    """Flip every bit of the byte in the middle of data."""
    mid = len(data) // 2
    return data[:mid] + bytes([data[mid] ^ 0xFF]) + data[mid + 1:]
