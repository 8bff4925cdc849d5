#! /usr/bin/env python3

from io import BytesIO

from ._errors import InsufficientData


class ByteCursor:
    """
    Bounds-checked sequential reader over an immutable byte buffer.

    Unlike a bare ``BytesIO``, a short read never silently returns fewer bytes
    than asked for; it raises :class:`InsufficientData` instead and leaves the
    offset where it was.
    """

    def __init__(self, data: bytes) -> None:
        self._size = len(data)
        self._stream = BytesIO(bytes(data))

    def tell(self) -> int:
        return self._stream.tell()

    def remaining(self) -> int:
        return self._size - self._stream.tell()

    def at_end(self) -> bool:
        return self.remaining() == 0

    def require(self, n: int) -> None:
        """
        Check that at least ``n`` bytes remain from the current offset.

        :param n: Number of bytes the caller is about to read
        :raises InsufficientData: If fewer than ``n`` bytes remain
        """
        if n < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {n}")
        remaining = self.remaining()
        if n > remaining:
            raise InsufficientData(self.tell(), n, remaining)

    def take(self, n: int) -> bytes:
        """
        Read the next ``n`` bytes and advance past them.

        :param n: Number of bytes to read
        :returns: Exactly ``n`` bytes
        :raises InsufficientData: If fewer than ``n`` bytes remain
        """
        self.require(n)
        return self._stream.read(n)

    def peek(self, n: int) -> bytes:
        """Return up to ``n`` bytes from the current offset without advancing"""
        if n < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {n}")
        offset = self._stream.tell()
        data = self._stream.read(n)
        self._stream.seek(offset)
        return data
