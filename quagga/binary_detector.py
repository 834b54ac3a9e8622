"""Heuristics telling UTF-8 text files from binary files."""

from __future__ import annotations

import os

__all__ = [
    "is_valid_text",
    "is_valid_text_file",
    "is_valid_utf8",
    "number_of_null_bytes",
]

_SAMPLE_SIZE = 1024
_MAX_CHAR_LEN = 4


def is_valid_text_file(file_path: str | os.PathLike[str]) -> bool:
    """Return True if the first kilobyte of the file looks like UTF-8 text.

    Raises OSError if the file cannot be opened or read.
    """
    with open(file_path, "rb") as handle:
        sample = handle.read(_SAMPLE_SIZE)
    return is_valid_text(sample)


def number_of_null_bytes(buffer: bytes) -> int:
    """Count the zero bytes in the buffer."""
    return bytes(buffer).count(0)


def _decodes(buffer: bytes) -> bool:
    try:
        bytes(buffer).decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def _is_lead_byte(byte: int) -> bool:
    return (
        (byte & 0b1110_0000) == 0b1100_0000
        or (byte & 0b1111_0000) == 0b1110_0000
        or (byte & 0b1111_1000) == 0b1111_0000
    )


def is_valid_utf8(buffer: bytes) -> bool:
    """Check the buffer is UTF-8, tolerating a truncated character at its end."""
    data = bytes(buffer)
    start = max(len(data) - _MAX_CHAR_LEN, 0)

    for i in reversed(range(start, len(data))):
        byte = data[i]
        if (byte & 0b1100_0000) != 0b1000_0000:
            trim_to = i if _is_lead_byte(byte) else i + 1
            return _decodes(data[:trim_to])

    return _decodes(data)


def is_valid_text(buffer: bytes) -> bool:
    """Return True if the buffer is likely UTF-8 text such as source code."""
    if number_of_null_bytes(buffer) > 0:
        return False
    return is_valid_utf8(buffer)