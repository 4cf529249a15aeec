# scrooge/core/services/transaction_hasher.py

import struct
import logging
from typing import TYPE_CHECKING, Any, Optional

from scrooge.core.utils.crypto_utility import CryptoUtility

# Importamos solo para chequeo de tipos estáticos
if TYPE_CHECKING:
    from scrooge.core.models.transaction import Transaction # type: ignore

logger = logging.getLogger(__name__)

class TransactionHasher:
    """
    Serialización canónica de transacciones.

    Todos los campos de longitud variable van prefijados con su longitud
    (4 bytes, Little Endian) para que dos transacciones distintas nunca
    produzcan el mismo payload.
    """

    @staticmethod
    def _var_bytes(data: Optional[bytes]) -> bytes:
        payload = data if data is not None else b''
        return struct.pack('<I', len(payload)) + payload

    @staticmethod
    def _serialize_outputs(outputs: Any) -> bytes:
        payload = bytearray()
        payload.extend(struct.pack('<I', len(outputs)))
        for out in outputs:
            # Valor con signo (8 bytes): un output negativo debe poder firmarse y rechazarse
            payload.extend(struct.pack('<q', int(out.value)))
            payload.extend(TransactionHasher._var_bytes(out.address))
        return bytes(payload)

    @staticmethod
    def raw_data_to_sign(transaction: Any, input_index: int) -> bytes:
        """
        Mensaje que firma el dueño del input `input_index`:
        referencia del input + todos los outputs. Las firmas no forman parte.
        """
        inputs = transaction.inputs
        if input_index < 0 or input_index >= len(inputs):
            raise IndexError(f"Input {input_index} fuera de rango ({len(inputs)} inputs).")

        inp = inputs[input_index]
        payload = bytearray()
        payload.extend(TransactionHasher._var_bytes(inp.prev_tx_hash))
        payload.extend(struct.pack('<I', inp.output_index))
        payload.extend(TransactionHasher._serialize_outputs(transaction.outputs))
        return bytes(payload)

    @staticmethod
    def raw_tx(transaction: Any) -> bytes:
        """Serialización completa (inputs con firmas + outputs)."""
        payload = bytearray()

        # 1. Inputs
        payload.extend(struct.pack('<I', len(transaction.inputs)))
        for inp in transaction.inputs:
            payload.extend(TransactionHasher._var_bytes(inp.prev_tx_hash))
            payload.extend(struct.pack('<I', inp.output_index))
            payload.extend(TransactionHasher._var_bytes(inp.signature))

        # 2. Outputs
        payload.extend(TransactionHasher._serialize_outputs(transaction.outputs))
        return bytes(payload)

    @staticmethod
    def calculate(transaction: Any) -> bytes:
        """Hash SHA-256 (32 bytes) de la transacción serializada."""
        return CryptoUtility.sha256(TransactionHasher.raw_tx(transaction))
