"""Byte-buffer operations over bytes, bytearray and memoryview objects."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_length(length: int, *buffers: Buffer) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(f"length {length} exceeds buffer size {len(buffer)}")


def memset(buffer: WritableBuffer, value: int, length: int) -> WritableBuffer:
    """Fill the first *length* bytes of *buffer* with the low byte of *value*."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: WritableBuffer, length: int) -> WritableBuffer:
    """Zero the first *length* bytes of *buffer*."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of *count* blocks of *size* bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Buffer, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to *value* in the first *length* bytes, or None."""
    _check_length(length, data)
    target = value & 0xFF
    index = bytes(data[:length]).find(bytes([target]))
    return None if index < 0 else index


def memcmp(first: Buffer, second: Buffer, length: int) -> int:
    """Compare *length* bytes as unsigned values; return the first difference or 0."""
    _check_length(length, first, second)
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: WritableBuffer | None, src: Buffer | None, length: int) -> WritableBuffer | None:
    """Copy *length* bytes from *src* into *dest* and return *dest*.

    When both buffers are None, nothing is copied and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("dest and src must both be buffers")
    _check_length(length, dest, src)
    dest[:length] = bytes(src[:length])
    return dest


def memmove(dest: WritableBuffer, src: Buffer, length: int) -> WritableBuffer:
    """Copy *length* bytes from *src* into *dest*, safe when the two overlap."""
    _check_length(length, dest, src)
    dest[:length] = bytes(src[:length])
    return dest