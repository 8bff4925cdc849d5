#! /usr/bin/env python3

from typing import (
    NamedTuple,
    Optional,
    Tuple,
)

from ._cursor import ByteCursor
from ._errors import TruncatedVarInt


# Compact size prefix byte -> number of continuation bytes
_PREFIX_WIDTHS = {
    0xFD: 2,
    0xFE: 4,
    0xFF: 8,
}


class CompactSize(NamedTuple):
    """A decoded compact size: its value and the number of bytes it occupied"""

    value: int
    width: int

    def serialize(self) -> bytes:
        return ser_compact_size(self.value, self.width)


def deser_compact_size(f: ByteCursor) -> CompactSize:
    """
    Deserialize a compact size unsigned integer from the current position of the cursor.

    :param f: The byte cursor
    :returns: The integer that was serialized, along with its encoded width
    :raises InsufficientData: If the prefix byte itself is missing
    :raises TruncatedVarInt: If the prefix announces more bytes than remain
    """
    offset = f.tell()
    nit: int = f.take(1)[0]
    extra = _PREFIX_WIDTHS.get(nit)
    if extra is None:
        return CompactSize(nit, 1)
    if f.remaining() < extra:
        raise TruncatedVarInt(offset, 1 + extra, f.remaining())
    nit = int.from_bytes(f.take(extra), byteorder="little")
    return CompactSize(nit, 1 + extra)


def ser_compact_size(n: int, width: Optional[int] = None) -> bytes:
    """
    Serialize an unsigned integer as a compact size.

    :param n: The integer to serialize
    :param width: Total encoded width (1, 3, 5 or 9). The smallest width that fits ``n`` if omitted.
    :returns: The serialized bytes
    """
    if n < 0:
        raise ValueError(f"Compact size cannot be negative: {n}")
    if width is None:
        if n < 253:
            width = 1
        elif n <= 0xFFFF:
            width = 3
        elif n <= 0xFFFFFFFF:
            width = 5
        else:
            width = 9

    if width == 1:
        if n >= 253:
            raise ValueError(f"Compact size {n} does not fit in 1 byte")
        return bytes([n])
    for prefix, extra in _PREFIX_WIDTHS.items():
        if width == 1 + extra:
            if n >= 1 << (8 * extra):
                raise ValueError(f"Compact size {n} does not fit in {width} bytes")
            return bytes([prefix]) + n.to_bytes(extra, byteorder="little")
    raise ValueError(f"Invalid compact size width: {width}")


def deser_string(f: ByteCursor) -> Tuple[CompactSize, bytes]:
    length = deser_compact_size(f)
    return length, f.take(length.value)


def ser_string(s: bytes, width: Optional[int] = None) -> bytes:
    return ser_compact_size(len(s), width) + s


def deser_uint32(f: ByteCursor) -> int:
    return int.from_bytes(f.take(4), byteorder="little")


def deser_int32(f: ByteCursor) -> int:
    return int.from_bytes(f.take(4), byteorder="little", signed=True)


def deser_uint64(f: ByteCursor) -> int:
    return int.from_bytes(f.take(8), byteorder="little")


def ser_uint32(n: int) -> bytes:
    return n.to_bytes(4, byteorder="little")


def ser_int32(n: int) -> bytes:
    return n.to_bytes(4, byteorder="little", signed=True)


def ser_uint64(n: int) -> bytes:
    return n.to_bytes(8, byteorder="little")
