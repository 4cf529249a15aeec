# scrooge/core/models/utxo.py

from typing import Any, Dict


class UTXO:
    """
    Referencia a una salida no gastada: (hash de la TX origen, índice del output).
    Objeto de valor inmutable; se usa únicamente como clave del UTXOPool.
    """

    __slots__ = ("_tx_hash", "_index")

    def __init__(self, tx_hash: bytes, index: int) -> None:
        if not isinstance(tx_hash, (bytes, bytearray)):
            raise TypeError(f"tx_hash debe ser bytes. Recibido: {type(tx_hash)}")
        if index < 0:
            raise ValueError("Índice de output negativo.")

        # Copia inmutable: un bytearray externo no puede alterar la clave
        self._tx_hash: bytes = bytes(tx_hash)
        self._index: int = int(index)

    # --- Getters ---
    @property
    def tx_hash(self) -> bytes: return self._tx_hash
    @property
    def index(self) -> int: return self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UTXO):
            return NotImplemented
        return self._tx_hash == other._tx_hash and self._index == other._index

    def __hash__(self) -> int:
        return hash((self._tx_hash, self._index))

    def __lt__(self, other: "UTXO") -> bool:
        # Orden total: primero por hash, luego por índice
        return (self._tx_hash, self._index) < (other._tx_hash, other._index)

    def to_dict(self) -> Dict[str, Any]:
        return {"tx_hash": self._tx_hash.hex(), "index": self._index}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "UTXO":
        return UTXO(bytes.fromhex(data.get("tx_hash", "")), int(data.get("index", -1)))

    def __repr__(self) -> str:
        return f"<UTXO {self._tx_hash.hex()[:8]}:{self._index}>"
