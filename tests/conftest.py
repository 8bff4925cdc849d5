"""
Pytest configuration and shared raw transaction fixtures
"""

import pytest

# Bitcoin genesis block coinbase, legacy serialization
GENESIS_TX_HEX = (
    "01000000010000000000000000000000000000000000000000000000000000000000000000"
    "ffffffff4d04ffff001d0104455468652054696d65732030332f4a616e2f32303039204368"
    "616e63656c6c6f72206f6e206272696e6b206f66207365636f6e64206261696c6f757420"
    "666f722062616e6b73ffffffff0100f2052a01000000434104678afdb0fe5548271967f1a6"
    "7130b7105cd6a828e03909a67962e0ea1f61deb649f6bc3f4cef38c4f35504e51ec112de5c"
    "384df7ba0b8d578a4c702b6bf11d5fac00000000"
)
GENESIS_TXID = "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"

# P2WPKH spend with one input and two outputs
SEGWIT_TX_HEX = (
    "01000000000101d7fc103aeb1e32e125959328597717f83c6de279da205de2cd52472f7261"
    "71040100000000ffffffff02180114000000000017a914aeb0efc1da63629651dc3322c092"
    "c6607937c87c87e8af4d7a000000001600141ce75726e812b2fcaf36d6a178ccbfd58a5efc"
    "d602483045022100d91d64b5b0326b83d1cfca891a6df291ba975c43c51abfa0f021d9733f"
    "e69d6a02206061089696fb44643c4e6e4311304d6d4c41309c10eba835c2835ced06537e96"
    "0121021b7f2cb05643404c57d0587b48c8d882a454f1040c47cbd31c73d29b599d04010000"
    "0000"
)
SEGWIT_TXID = "37fa7c3fb3732e45317a94dcfae4f1223ab9e3a571c3308b058c96a2b38b0bb5"
SEGWIT_WTXID = "1e2371b0d4a51a03fd365eda470289d3792050bfd190cb5e97f1066e9a1e8879"

# Single input with an empty scriptsig, single P2WPKH output
SIMPLE_INPUT_HEX = "11" * 32 + "00000000" + "00" + "feffffff"
SIMPLE_OUTPUT_HEX = "e803000000000000" + "16" + "0014" + "22" * 20
SIMPLE_LEGACY_TX_HEX = (
    "02000000" + "01" + SIMPLE_INPUT_HEX + "01" + SIMPLE_OUTPUT_HEX + "00000000"
)
# Same transaction with a marker, flag and an empty witness stack
SIMPLE_SEGWIT_TX_HEX = (
    "02000000"
    + "0001"
    + "01"
    + SIMPLE_INPUT_HEX
    + "01"
    + SIMPLE_OUTPUT_HEX
    + "00"
    + "00000000"
)


@pytest.fixture
def genesis_tx_bytes():
    return bytes.fromhex(GENESIS_TX_HEX)


@pytest.fixture
def segwit_tx_bytes():
    return bytes.fromhex(SEGWIT_TX_HEX)


@pytest.fixture(
    params=[GENESIS_TX_HEX, SEGWIT_TX_HEX, SIMPLE_LEGACY_TX_HEX, SIMPLE_SEGWIT_TX_HEX],
    ids=["genesis", "p2wpkh", "simple-legacy", "simple-segwit"],
)
def raw_tx(request):
    """Every well-formed transaction vector, as bytes."""
    return bytes.fromhex(request.param)
