"""Reading the markdown source from a byte stream"""

from typing import BinaryIO

from idbdoc.errors import InputReadError


def read_source(stream: BinaryIO) -> str:
    """Read stream to end-of-stream and decode it as UTF-8.

    A leading byte-order mark is dropped. Any read failure or invalid byte
    sequence raises InputReadError; nothing is returned for partial input.
    """
    try:
        data = stream.read()
    except (OSError, ValueError) as e:
        raise InputReadError(f"Failed to read input: {e}") from e
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise InputReadError(f"Input is not valid UTF-8: {e}") from e


def read_path(path: str) -> str:
    """Read a markdown file from disk with the same guarantees as read_source."""
    try:
        with open(path, "rb") as f:
            return read_source(f)
    except OSError as e:
        raise InputReadError(f"Failed to read {path}: {e}") from e
