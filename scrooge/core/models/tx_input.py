# scrooge/core/models/tx_input.py

import logging
from typing import Dict, Any, Optional

from scrooge.core.models.utxo import UTXO

logger = logging.getLogger(__name__)

class TxInput:

    def __init__(self, prev_tx_hash: bytes, output_index: int, signature: Optional[bytes] = None) -> None:
        if not prev_tx_hash:
            raise ValueError("Referencia a hash previo vacía.")
        if output_index < 0:
            raise ValueError("Índice de output negativo.")

        self._prev_tx_hash: bytes = bytes(prev_tx_hash)
        self._output_index: int = output_index
        self._signature: Optional[bytes] = bytes(signature) if signature is not None else None

    # --- Getters ---
    @property
    def prev_tx_hash(self) -> bytes: return self._prev_tx_hash
    @property
    def output_index(self) -> int: return self._output_index
    @property
    def signature(self) -> Optional[bytes]: return self._signature

    def add_signature(self, signature: Optional[bytes]) -> None:
        """Adjunta (o borra, con None) la firma que autoriza el gasto."""
        self._signature = bytes(signature) if signature is not None else None

    def to_utxo(self) -> UTXO:
        """Referencia que este input reclama dentro del pool."""
        return UTXO(self._prev_tx_hash, self._output_index)

    def to_dict(self) -> Dict[str, Any]:
        """Serializa hash y firma como HEX string."""
        return {
            "prev_tx_hash": self._prev_tx_hash.hex(),
            "output_index": self._output_index,
            "signature": self._signature.hex() if self._signature is not None else None
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'TxInput':
        """Reconstruye el Input (Soporta Hex String o Bytes directos)."""
        raw_hash = data.get("prev_tx_hash", "")
        raw_sig = data.get("signature")

        hash_bytes = raw_hash if isinstance(raw_hash, bytes) else bytes.fromhex(raw_hash)

        sig_bytes: Optional[bytes] = None
        if isinstance(raw_sig, bytes):
            sig_bytes = raw_sig
        elif isinstance(raw_sig, str):
            try:
                sig_bytes = bytes.fromhex(raw_sig)
            except ValueError:
                # Firma ilegible: la dejamos vacía y el validador la rechazará
                logger.warning(f"⚠️ Firma inválida en input: {raw_sig[:10]}...")
                sig_bytes = b""

        return TxInput(
            prev_tx_hash=hash_bytes,
            output_index=int(data.get("output_index", -1)),
            signature=sig_bytes
        )

    def __repr__(self) -> str:
        return f"<TxInput {self._prev_tx_hash.hex()[:8]}:{self._output_index}>"
