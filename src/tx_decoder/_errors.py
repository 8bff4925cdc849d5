#! /usr/bin/env python3


class DecodeError(ValueError):
    """Base class for every failure to decode a serialized transaction"""


class InsufficientData(DecodeError):
    def __init__(self, offset: int, needed: int, remaining: int) -> None:
        self.offset = offset
        self.needed = needed
        self.remaining = remaining
        super().__init__(
            f"Insufficient data: need {needed} bytes at offset {offset}, {remaining} remaining"
        )


class TruncatedVarInt(DecodeError):
    def __init__(self, offset: int, width: int, remaining: int) -> None:
        self.offset = offset
        self.width = width
        self.remaining = remaining
        super().__init__(
            f"Truncated compact size at offset {offset}: prefix announces {width} bytes, {remaining} remaining"
        )


class TrailingData(DecodeError):
    def __init__(self, offset: int, remaining: int) -> None:
        self.offset = offset
        self.remaining = remaining
        super().__init__(
            f"Trailing data: {remaining} bytes left after locktime at offset {offset}"
        )


class InvalidEncoding(DecodeError):
    pass
