# scrooge/core/utils/crypto_utility.py

import hashlib
import logging
from typing import Union

logger = logging.getLogger(__name__)

class CryptoUtility:
    @staticmethod
    def sha256(data: Union[str, bytes]) -> bytes:
        """Retorna el digest SHA-256 (32 bytes)."""
        data_bytes = CryptoUtility._to_bytes(data)
        return hashlib.sha256(data_bytes).digest()

    @staticmethod
    def _to_bytes(data: Union[str, bytes]) -> bytes:
        """Normaliza entrada a bytes de forma segura."""
        if isinstance(data, str):
            return data.encode('utf-8')
        if isinstance(data, (bytes, bytearray)):
            return bytes(data)
        raise TypeError(f"Tipo no soportado para hashing: {type(data)}")
