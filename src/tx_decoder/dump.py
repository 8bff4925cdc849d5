#! /usr/bin/env python3

from typing import (
    Any,
    Dict,
)

from .transaction import Transaction


def tx_to_dict(tx: Transaction) -> Dict[str, Any]:
    """
    Convert a decoded transaction to a JSON serializable dict.

    Compact size fields are given as their wire encoding in hex so that the
    encoded width stays visible.

    :param tx: The decoded transaction
    :return: Dict mirroring the transaction's fields in wire order
    """
    result: Dict[str, Any] = {
        "txid": tx.txid,
        "wtxid": tx.wtxid,
        "version": tx.version,
    }
    if tx.is_segwit:
        result["marker"] = f"{tx.marker:02x}"
        result["flag"] = f"{tx.flag:02x}"
    result["inputcount"] = tx.input_count.serialize().hex()
    result["inputs"] = [
        {
            "txid": txin.prev_txid,
            "vout": txin.prev_index,
            "scriptsigsize": txin.script_sig_size.serialize().hex(),
            "scriptsig": txin.script_sig.hex(),
            "sequence": txin.sequence,
        }
        for txin in tx.inputs
    ]
    result["outputcount"] = tx.output_count.serialize().hex()
    result["outputs"] = [
        {
            "amount": txout.amount,
            "scriptpubkeysize": txout.script_pubkey_size.serialize().hex(),
            "scriptpubkey": txout.script_pubkey.hex(),
        }
        for txout in tx.outputs
    ]
    if tx.is_segwit:
        result["witness"] = [
            {
                "stackitems": stack.item_count.serialize().hex(),
                "items": [
                    {"size": item.size.serialize().hex(), "item": item.data.hex()}
                    for item in stack.items
                ],
            }
            for stack in tx.witnesses
        ]
    result["locktime"] = tx.locktime
    result["size"] = tx.size
    result["vsize"] = tx.vsize
    result["weight"] = tx.weight
    return result


def dump(tx: Transaction) -> None:
    print(
        f"Transaction: txid={tx.txid}, wtxid={tx.wtxid}, size={tx.size}, vsize={tx.vsize}, weight={tx.weight}"
    )
    print(f"Version: version={tx.version}")
    if tx.is_segwit:
        print(f"Segwit: marker={tx.marker:02x}, flag={tx.flag:02x}")

    print(f"Input count: count={tx.input_count.value}, width={tx.input_count.width}")
    for i, txin in enumerate(tx.inputs):
        print(
            f"Input {i}: txid={txin.prev_txid}, vout={txin.prev_index}, scriptsig size={txin.script_sig_size.value}, scriptsig={txin.script_sig.hex() if txin.script_sig else 'N/A'}, sequence=0x{txin.sequence:08x}{' (coinbase)' if txin.is_coinbase else ''}"
        )

    print(f"Output count: count={tx.output_count.value}, width={tx.output_count.width}")
    for i, txout in enumerate(tx.outputs):
        print(
            f"Output {i}: amount={txout.amount} ({txout.amount / 100_000_000:.8f} BTC), scriptpubkey size={txout.script_pubkey_size.value}, scriptpubkey={txout.script_pubkey.hex()}"
        )

    if tx.is_segwit:
        for i, stack in enumerate(tx.witnesses):
            print(f"Witness {i}: stack items={stack.item_count.value}")
            for j, item in enumerate(stack.items):
                print(f"    Item {j}: size={item.size.value}, item={item.data.hex()}")

    print(f"Locktime: locktime={tx.locktime}")
