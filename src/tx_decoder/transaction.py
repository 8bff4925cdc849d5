#! /usr/bin/env python3

import logging

from dataclasses import dataclass
from functools import cached_property
from typing import (
    Iterator,
    Optional,
    Tuple,
)

from ._cursor import ByteCursor
from ._errors import (
    InvalidEncoding,
    TrailingData,
)
from ._hash import (
    hash_to_hex,
    sha256d,
)
from ._serialize import (
    CompactSize,
    deser_compact_size,
    deser_int32,
    deser_string,
    deser_uint32,
    deser_uint64,
    ser_int32,
    ser_uint32,
    ser_uint64,
)

logger = logging.getLogger(__name__)

# Largest serialized transaction a block can carry (the block weight limit)
MAX_TX_SIZE = 4_000_000

SEGWIT_MARKER = 0x00
NULL_HASH = b"\x00" * 32
NULL_INDEX = 0xFFFFFFFF


@dataclass(frozen=True)
class TxIn:
    prev_hash: bytes
    prev_index: int
    script_sig_size: CompactSize
    script_sig: bytes
    sequence: int

    @property
    def prev_txid(self) -> str:
        return hash_to_hex(self.prev_hash)

    @property
    def is_coinbase(self) -> bool:
        return self.prev_hash == NULL_HASH and self.prev_index == NULL_INDEX

    def serialize(self) -> bytes:
        return b"".join(
            (
                self.prev_hash,
                ser_uint32(self.prev_index),
                self.script_sig_size.serialize(),
                self.script_sig,
                ser_uint32(self.sequence),
            )
        )


@dataclass(frozen=True)
class TxOut:
    amount: int
    script_pubkey_size: CompactSize
    script_pubkey: bytes

    def serialize(self) -> bytes:
        return (
            ser_uint64(self.amount)
            + self.script_pubkey_size.serialize()
            + self.script_pubkey
        )


@dataclass(frozen=True)
class WitnessItem:
    size: CompactSize
    data: bytes

    def serialize(self) -> bytes:
        return self.size.serialize() + self.data


@dataclass(frozen=True)
class WitnessStack:
    item_count: CompactSize
    items: Tuple[WitnessItem, ...]

    def __len__(self) -> int:
        return len(self.items)

    def serialize(self) -> bytes:
        return self.item_count.serialize() + b"".join(
            item.serialize() for item in self.items
        )


@dataclass(frozen=True)
class Transaction:
    """
    A fully decoded transaction.

    ``flag`` and ``witnesses`` are both None for a legacy transaction. For a
    witness-carrying one, ``witnesses[i]`` is the witness stack of ``inputs[i]``.
    """

    version: int
    flag: Optional[int]
    input_count: CompactSize
    inputs: Tuple[TxIn, ...]
    output_count: CompactSize
    outputs: Tuple[TxOut, ...]
    witnesses: Optional[Tuple[WitnessStack, ...]]
    locktime: int

    @property
    def is_segwit(self) -> bool:
        return self.flag is not None

    @property
    def marker(self) -> Optional[int]:
        return SEGWIT_MARKER if self.is_segwit else None

    def serialize(self, include_witness: bool = True) -> bytes:
        """
        Re-encode the transaction, using the same compact size widths that were decoded.

        :param include_witness: Whether to include the marker, flag and witness section
        :return: The serialized transaction
        """
        if include_witness and self.is_segwit:
            return self._serialized
        return self._serialized_base

    def _parts(self, with_witness: bool) -> Iterator[bytes]:
        yield ser_int32(self.version)
        if with_witness:
            yield bytes([SEGWIT_MARKER, self.flag])
        yield self.input_count.serialize()
        for txin in self.inputs:
            yield txin.serialize()
        yield self.output_count.serialize()
        for txout in self.outputs:
            yield txout.serialize()
        if with_witness:
            for stack in self.witnesses:
                yield stack.serialize()
        yield ser_uint32(self.locktime)

    @cached_property
    def _serialized(self) -> bytes:
        if not self.is_segwit:
            return self._serialized_base
        return b"".join(self._parts(True))

    @cached_property
    def _serialized_base(self) -> bytes:
        return b"".join(self._parts(False))

    @cached_property
    def txid(self) -> str:
        return hash_to_hex(sha256d(self._serialized_base))

    @cached_property
    def wtxid(self) -> str:
        return hash_to_hex(sha256d(self._serialized))

    @property
    def size(self) -> int:
        return len(self._serialized)

    @property
    def base_size(self) -> int:
        return len(self._serialized_base)

    @property
    def weight(self) -> int:
        return self.base_size * 3 + self.size

    @property
    def vsize(self) -> int:
        return (self.weight + 3) // 4

    @property
    def total_output_amount(self) -> int:
        return sum(txout.amount for txout in self.outputs)


def read_segwit_marker(f: ByteCursor) -> Optional[int]:
    """
    Detect the segwit marker and flag that may follow the version field.

    The two bytes are consumed only when the marker is 0x00 and the flag is
    non-zero. Otherwise the cursor is left untouched and the bytes are read
    again as the input count.

    :param f: The byte cursor, positioned right after the version
    :returns: The flag byte, or None for a legacy transaction
    """
    sniff = f.peek(2)
    if len(sniff) < 2:
        return None
    marker, flag = sniff[0], sniff[1]
    if marker != SEGWIT_MARKER or flag == 0x00:
        return None
    f.take(2)
    return flag


def decode_input(f: ByteCursor) -> TxIn:
    prev_hash = f.take(32)
    prev_index = deser_uint32(f)
    script_sig_size, script_sig = deser_string(f)
    sequence = deser_uint32(f)
    return TxIn(prev_hash, prev_index, script_sig_size, script_sig, sequence)


def decode_output(f: ByteCursor) -> TxOut:
    amount = deser_uint64(f)
    script_pubkey_size, script_pubkey = deser_string(f)
    return TxOut(amount, script_pubkey_size, script_pubkey)


def decode_witness(f: ByteCursor) -> WitnessStack:
    item_count = deser_compact_size(f)
    items = []
    for _ in range(item_count.value):
        size, data = deser_string(f)
        items.append(WitnessItem(size, data))
    return WitnessStack(item_count, tuple(items))


def decode_witnesses(f: ByteCursor, input_count: int) -> Tuple[WitnessStack, ...]:
    witnesses = tuple(decode_witness(f) for _ in range(input_count))
    assert len(witnesses) == input_count
    return witnesses


def _check_size(data: bytes, max_size: Optional[int]) -> None:
    if len(data) < 4:
        raise InvalidEncoding(
            f"Transaction is {len(data)} bytes, too short to hold a version"
        )
    if max_size is not None and len(data) > max_size:
        raise InvalidEncoding(
            f"Transaction is {len(data)} bytes, larger than the maximum of {max_size}"
        )


def decode_transaction(data: bytes, max_size: Optional[int] = MAX_TX_SIZE) -> Transaction:
    """
    Decode a serialized legacy or segwit transaction.

    The whole buffer must be consumed by exactly one transaction.

    :param data: The serialized transaction
    :param max_size: Refuse buffers larger than this many bytes. No limit if None.
    :returns: The decoded transaction
    :raises DecodeError: If ``data`` is not a well-formed transaction
    """
    _check_size(data, max_size)
    f = ByteCursor(data)

    version = deser_int32(f)
    flag = read_segwit_marker(f)
    logger.debug(
        "Decoding %s transaction, version %d",
        "segwit" if flag is not None else "legacy",
        version,
    )

    input_count = deser_compact_size(f)
    inputs = tuple(decode_input(f) for _ in range(input_count.value))

    output_count = deser_compact_size(f)
    outputs = tuple(decode_output(f) for _ in range(output_count.value))

    witnesses = None
    if flag is not None:
        witnesses = decode_witnesses(f, len(inputs))

    locktime = deser_uint32(f)
    if not f.at_end():
        raise TrailingData(f.tell(), f.remaining())

    logger.debug(
        "Decoded %d inputs and %d outputs from %d bytes",
        len(inputs),
        len(outputs),
        f.tell(),
    )
    return Transaction(
        version,
        flag,
        input_count,
        inputs,
        output_count,
        outputs,
        witnesses,
        locktime,
    )


def decode_hex(hex_string: str, max_size: Optional[int] = MAX_TX_SIZE) -> Transaction:
    """
    Decode a transaction given as a hex string.

    Surrounding and embedded whitespace is ignored, as is letter case.

    :param hex_string: The serialized transaction, hex encoded
    :param max_size: Refuse transactions larger than this many bytes. No limit if None.
    :returns: The decoded transaction
    :raises DecodeError: If the string is not hex or not a well-formed transaction
    """
    clean_hex = "".join(hex_string.split()).lower()
    try:
        data = bytes.fromhex(clean_hex)
    except ValueError as e:
        raise InvalidEncoding(f"Invalid hex: {e}") from e
    return decode_transaction(data, max_size=max_size)
