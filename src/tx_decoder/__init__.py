#! /usr/bin/env python3

import argparse
import json
import logging
import sys

from typing import (
    List,
    Optional,
)

from ._errors import (
    DecodeError,
    InsufficientData,
    InvalidEncoding,
    TrailingData,
    TruncatedVarInt,
)
from .dump import (
    dump,
    tx_to_dict,
)
from .transaction import (
    MAX_TX_SIZE,
    Transaction,
    TxIn,
    TxOut,
    WitnessItem,
    WitnessStack,
    decode_hex,
    decode_transaction,
)

__all__ = [
    "DecodeError",
    "InsufficientData",
    "InvalidEncoding",
    "MAX_TX_SIZE",
    "TrailingData",
    "Transaction",
    "TruncatedVarInt",
    "TxIn",
    "TxOut",
    "WitnessItem",
    "WitnessStack",
    "decode_hex",
    "decode_transaction",
    "dump",
    "main",
    "tx_to_dict",
]


def read_tx_hex(args) -> str:
    if args.tx == "-":
        return sys.stdin.read()
    if args.file:
        with open(args.tx, "r") as f:
            return f.read()
    return args.tx


def _decode(args) -> Transaction:
    return decode_hex(read_tx_hex(args), max_size=args.max_size)


def _dump(args):
    dump(_decode(args))


def _json(args):
    print(json.dumps(tx_to_dict(_decode(args)), indent=2))


def _txid(args):
    print(_decode(args).txid)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Decode a raw Bitcoin transaction into its wire format components"
    )
    parser.add_argument(
        "tx",
        help="Raw transaction hex, a path to a file containing it with --file, or - to read stdin",
    )
    parser.add_argument(
        "-f",
        "--file",
        help="Treat the tx argument as a path to a file containing the hex",
        action="store_true",
    )
    parser.add_argument(
        "--max-size",
        help=f"Refuse transactions larger than this many bytes (default {MAX_TX_SIZE})",
        type=int,
        default=MAX_TX_SIZE,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        help="Log debug messages about the decoding",
        action="store_true",
    )

    subparsers = parser.add_subparsers(required=True)

    decode_parser = subparsers.add_parser("decode")
    decode_parser.set_defaults(func=_dump)

    json_parser = subparsers.add_parser("json")
    json_parser.set_defaults(func=_json)

    txid_parser = subparsers.add_parser("txid")
    txid_parser.set_defaults(func=_txid)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except (DecodeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
