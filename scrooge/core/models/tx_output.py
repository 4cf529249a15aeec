# scrooge/core/models/tx_output.py

import logging
from typing import Dict, Any, Union

logger = logging.getLogger(__name__)

class TxOutput:
    """
    Representa una salida de transacción: un monto y la identidad pública
    (clave pública) que puede gastarlo.

    Nota: el modelo NO rechaza valores negativos. Esa regla pertenece al
    validador, que debe poder ver (y rechazar) un output negativo.
    """

    __slots__ = ("_value", "_address")

    def __init__(self, value: int, address: Union[str, bytes]):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value debe ser int (unidades mínimas). Recibido: {type(value)}")

        self._value: int = value

        # Normalización estricta
        if isinstance(address, (bytes, bytearray)):
            self._address: bytes = bytes(address)
        elif isinstance(address, str):
            try:
                self._address = bytes.fromhex(address)
            except ValueError:
                self._address = address.encode('utf-8')
        else:
            raise TypeError(f"address debe ser str (hex) o bytes. Recibido: {type(address)}")

    @property
    def value(self) -> int:
        return self._value

    @property
    def address(self) -> bytes:
        return self._address

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TxOutput):
            return NotImplemented
        return self._value == other._value and self._address == other._address

    def __hash__(self) -> int:
        return hash((self._value, self._address))

    def to_dict(self) -> Dict[str, Any]:
        """Serializa usando HEXADECIMAL."""
        return {
            "value": self._value,
            "address": self._address.hex()
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'TxOutput':
        raw_address = data.get("address", "")

        # Si ya viene como bytes (uso interno), lo usamos directo.
        if isinstance(raw_address, bytes):
            address_bytes = raw_address
        else:
            try:
                address_bytes = bytes.fromhex(raw_address)
            except ValueError:
                logger.warning(f"⚠️ Address no hexadecimal en output: {str(raw_address)[:10]}...")
                address_bytes = raw_address.encode('utf-8')

        return TxOutput(
            value=int(data.get("value", 0)),
            address=address_bytes
        )

    def __repr__(self) -> str:
        return f"<TxOutput val={self._value} addr={self._address.hex()[:8]}...>"
