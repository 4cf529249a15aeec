# scrooge/tests/unit/test_transaction_model.py
'''
Test Suite para el modelo Transaction y su serialización canónica:
    Verifica que el hash sea determinista, que el payload de firma excluya
    las firmas e incluya todos los outputs, y la reconstrucción desde dict.
'''

import sys
import os

import pytest

# --- AJUSTE DE RUTA PARA EJECUCIÓN DIRECTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '../../..'))
if root_dir not in sys.path:
    sys.path.append(root_dir)

from scrooge.core.models.transaction import Transaction
from scrooge.core.models.tx_input import TxInput
from scrooge.core.models.tx_output import TxOutput
from scrooge.core.models.utxo import UTXO
from scrooge.core.services.transaction_hasher import TransactionHasher

# --- CONFIGURACIÓN DE DATOS DETERMINISTAS (SETUP) ---
PREV_HASH = bytes(range(32))
ALICE = b"ALICE_PUB_KEY"
BOB = b"BOB_PUB_KEY"

def build_tx() -> Transaction:
    tx = Transaction()
    tx.add_input(PREV_HASH, 0)
    tx.add_input(PREV_HASH, 1)
    tx.add_output(70, BOB)
    tx.add_output(30, ALICE)
    return tx

def test_hash_is_deterministic():
    tx_1 = build_tx()
    tx_2 = build_tx()

    assert tx_1.finalize() == tx_2.finalize()
    assert len(tx_1.hash) == 32
    assert tx_1 == tx_2

def test_hash_covers_signatures_and_outputs():
    base = build_tx()
    base_hash = base.finalize()

    signed = build_tx()
    signed.add_signature(b"\x01\x02", 0)
    assert signed.finalize() != base_hash

    richer = build_tx()
    richer.add_output(1, ALICE)
    assert richer.finalize() != base_hash

def test_raw_data_to_sign_excludes_signatures():
    tx = build_tx()
    payload_before = tx.get_raw_data_to_sign(0)

    tx.add_signature(b"FIRMA", 0)
    tx.add_signature(b"OTRA_FIRMA", 1)

    assert tx.get_raw_data_to_sign(0) == payload_before
    # Cada input firma su propia referencia
    assert tx.get_raw_data_to_sign(0) != tx.get_raw_data_to_sign(1)

def test_raw_data_to_sign_binds_outputs():
    tx = build_tx()
    payload = tx.get_raw_data_to_sign(0)

    other = Transaction()
    other.add_input(PREV_HASH, 0)
    other.add_input(PREV_HASH, 1)
    other.add_output(100, BOB)

    assert other.get_raw_data_to_sign(0) != payload

def test_raw_data_to_sign_out_of_range():
    tx = build_tx()
    with pytest.raises(IndexError):
        tx.get_raw_data_to_sign(2)

def test_negative_output_is_representable():
    tx = Transaction()
    tx.add_input(PREV_HASH, 0)
    tx.add_output(-5, BOB)

    assert tx.get_output(0).value == -5
    assert len(TransactionHasher.raw_data_to_sign(tx, 0)) > 0
    assert tx.total_output_value == -5

def test_remove_input_by_index_and_utxo():
    tx = build_tx()
    tx.remove_input(UTXO(PREV_HASH, 1))
    assert tx.num_inputs() == 1
    assert tx.get_input(0).output_index == 0

    # Referencia inexistente: sin efecto
    tx.remove_input(UTXO(PREV_HASH, 9))
    assert tx.num_inputs() == 1

    tx.remove_input(0)
    assert tx.num_inputs() == 0

def test_accessors_return_copies():
    tx = build_tx()
    tx.inputs.clear()
    tx.outputs.clear()
    assert tx.num_inputs() == 2
    assert tx.num_outputs() == 2

def test_to_dict_and_back_preserves_hash():
    tx = build_tx()
    tx.add_signature(b"\xde\xad", 0)
    tx.finalize()

    rebuilt = Transaction.from_dict(tx.to_dict())

    assert rebuilt.hash == tx.hash
    assert rebuilt.get_input(0).signature == b"\xde\xad"
    assert rebuilt.get_input(1).signature is None
    assert rebuilt.outputs == tx.outputs

def test_from_dict_without_hash_is_finalized():
    data = build_tx().to_dict()
    data["tx_hash"] = None

    rebuilt = Transaction.from_dict(data)
    assert rebuilt.hash == TransactionHasher.calculate(rebuilt)

def test_invalid_input_and_output_data():
    with pytest.raises(ValueError):
        TxInput(b"", 0)
    with pytest.raises(ValueError):
        TxInput(PREV_HASH, -1)
    with pytest.raises(TypeError):
        TxOutput(1.5, BOB) # type: ignore
    with pytest.raises(TypeError):
        TxOutput(1, 12345) # type: ignore

def test_from_dict_rejects_mismatched_hash():
    victim_hash = b"\xee" * 32
    tx = build_tx()
    tx.add_signature(b"\x01", 0)
    tx.finalize()

    data = tx.to_dict()
    data["tx_hash"] = victim_hash.hex()

    # Un hash declarado ajeno al contenido no se acepta
    with pytest.raises(ValueError):
        Transaction.from_dict(data)

def test_hash_only_comes_from_content():
    with pytest.raises(TypeError):
        Transaction(tx_hash=b"\xee" * 32) # type: ignore

def test_builders_reset_stale_hash():
    tx = build_tx()
    tx.finalize()
    tx.add_signature(b"\x02", 0)
    assert tx.hash is None

    tx.finalize()
    tx.add_output(1, ALICE)
    assert tx.hash is None

    tx.finalize()
    tx.add_input(PREV_HASH, 2)
    assert tx.hash is None

    tx.finalize()
    tx.remove_input(UTXO(PREV_HASH, 2))
    assert tx.hash is None

    tx.finalize()
    tx.remove_input(0)
    assert tx.hash is None

    # Quitar una referencia que no está no cambia el contenido
    sealed = tx.finalize()
    tx.remove_input(UTXO(PREV_HASH, 9))
    assert tx.hash == sealed
