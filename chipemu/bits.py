"""Conversions between bytes and runs of booleans."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def _index(arr: Sequence[bool], position: int) -> int:
    if not 0 <= position < len(arr):
        raise IndexError(f"index {position} out of range for length {len(arr)}")
    return position


def bool_array_to_byte(arr: Sequence[bool], offset: int, wrap: bool, limit: int) -> int:
    """Pack up to eight booleans starting at *offset* into a byte, LSB first.

    When a position reaches *limit* the packing stops, unless *wrap* is set,
    in which case the offset is reset to zero for the remaining bits.
    """
    result = 0
    for i in range(8):
        if offset + i >= limit:
            if not wrap:
                return result
            offset = 0
        if arr[_index(arr, offset + i)]:
            result |= 1 << i
    return result


def change_bits(
    arr: MutableSequence[bool], offset: int, b: int, wrap: bool, limit: int
) -> None:
    """Write the eight bits of *b*, LSB first, into *arr* starting at *offset*.

    Positions at or past *limit* stop the write, unless *wrap* is set,
    in which case the offset is reset to zero for the remaining bits.
    """
    for i in range(8):
        if offset + i >= limit:
            if not wrap:
                return
            offset = 0
        arr[_index(arr, offset + i)] = bool(b & 1)
        b >>= 1