"""Walking UTF-8 encoded bytes one sequence at a time."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["utf8_next", "utf8_codepoints"]


def _sequence_length(lead: int) -> int:
    if lead & 0xF8 == 0xF0:
        return 4
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xE0 == 0xC0:
        return 2
    return 1


def utf8_next(data: bytes, pos: int = 0) -> tuple[int, int]:
    """Read the UTF-8 sequence starting at ``pos``.

    Returns the bytes of the sequence packed big-endian into one integer,
    and the position just past it. Raises ``IndexError`` if ``pos`` is past
    the end and ``ValueError`` if the sequence is cut short.
    """
    if not 0 <= pos < len(data):
        raise IndexError(f"position {pos} is outside data of length {len(data)}")
    length = _sequence_length(data[pos])
    end = pos + length
    if end > len(data):
        raise ValueError(f"truncated UTF-8 sequence at position {pos}")
    value = 0
    for byte in data[pos:end]:
        value = value << 8 | byte
    return value, end


def utf8_codepoints(data: bytes) -> Iterator[int]:
    """Yield the packed value of every UTF-8 sequence in ``data``."""
    pos = 0
    while pos < len(data):
        value, pos = utf8_next(data, pos)
        yield value