# scrooge/infra/crypto/software_signer.py
import hashlib
import logging
import binascii
from typing import Any, Optional

from ecdsa import SigningKey, util # type: ignore
from ecdsa.curves import curve_by_name # type: ignore

# Importación del contrato
from scrooge.core.config.config_manager import ConfigManager
from scrooge.core.interfaces.i_signer import ISigner

logger = logging.getLogger(__name__)

class SoftwareSigner(ISigner):

    def __init__(self, private_key_hex: str, curve_name: Optional[str] = None) -> None:
        self._sk: Any = None
        try:
            curve = curve_by_name(curve_name or ConfigManager().curve_name)
            priv_key_bytes = binascii.unhexlify(private_key_hex)
            self._sk = SigningKey.from_string(priv_key_bytes, curve=curve) # type: ignore

            logger.info("Firmante de software inicializado.")
        except Exception:
            logger.exception("Fallo al cargar la clave privada en SoftwareSigner")
            raise ValueError("Formato de clave privada inválido.")

    @staticmethod
    def generate(curve_name: Optional[str] = None) -> "SoftwareSigner":
        """Crea un firmante con una clave privada aleatoria nueva."""
        curve = curve_by_name(curve_name or ConfigManager().curve_name)
        sk = SigningKey.generate(curve=curve) # type: ignore
        return SoftwareSigner(sk.to_string().hex(), curve_name=curve.name)

    def sign(self, message: bytes) -> bytes:
        try:
            # Firma determinista (RFC 6979) en formato DER
            signature: bytes = self._sk.sign_deterministic(
                message,
                hashfunc=hashlib.sha256,
                sigencode=util.sigencode_der # type: ignore
            )
            logger.debug(f"Firma generada para mensaje de {len(message)} bytes.")
            return signature

        except Exception:
            logger.exception("Error criptográfico durante el proceso de firma")
            raise ValueError("Error al firmar con ecdsa.")

    def get_public_key(self) -> bytes:
        try:
            vk = self._sk.verifying_key
            return vk.to_string(encoding="compressed") # type: ignore
        except Exception:
            logger.exception("Error exportando clave pública")
            raise ValueError("No se pudo obtener la identidad pública.")
