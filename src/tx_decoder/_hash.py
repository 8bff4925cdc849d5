#! /usr/bin/env python3

import hashlib


def sha256d(b: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(b).digest()).digest()


def hash_to_hex(h: bytes) -> str:
    """
    Render a 32 byte hash the way block explorers and RPCs display it

    :param h: Hash in internal (wire) byte order
    :return: Hex string of ``h`` with its bytes reversed
    """
    return h[::-1].hex()
