# scrooge/core/services/signature_verifier_service.py

import hashlib
import logging
from typing import Optional

# Librería criptográfica (silenciando errores de tipado legacy)
from ecdsa import VerifyingKey, BadSignatureError, util # type: ignore
from ecdsa.curves import Curve, UnknownCurveError, curve_by_name # type: ignore
from ecdsa.der import UnexpectedDER # type: ignore
from ecdsa.errors import MalformedPointError # type: ignore

from scrooge.core.config.config_manager import ConfigManager
from scrooge.core.interfaces.i_signature_verifier import ISignatureVerifier

logger = logging.getLogger(__name__)

class EcdsaSignatureVerifier(ISignatureVerifier):
    """
    Verificador ECDSA (por defecto SECP256k1, mensaje hasheado con SHA-256,
    firma DER). Es el colaborador criptográfico por defecto del TxHandler.
    """

    def __init__(self, curve_name: Optional[str] = None) -> None:
        name = curve_name or ConfigManager().curve_name
        try:
            self._curve: Curve = curve_by_name(name)
        except UnknownCurveError:
            logger.error(f"Curva ECDSA desconocida: {name}")
            raise ValueError(f"Curva ECDSA no soportada: {name}")

    @property
    def curve_name(self) -> str:
        return self._curve.name

    def verify(self, public_key: bytes, message: bytes, signature: bytes) -> bool:
        if not public_key or not signature:
            return False

        # 1. Decodificar Clave Pública (raw, comprimida o sin comprimir)
        try:
            vk = VerifyingKey.from_string(public_key, curve=self._curve) # type: ignore
        except (MalformedPointError, ValueError):
            logger.warning(f"Clave pública inválida: {public_key.hex()[:16]}...")
            return False

        # 2. Verificar Firma
        try:
            return bool(vk.verify(signature, message, hashfunc=hashlib.sha256, sigdecode=util.sigdecode_der)) # type: ignore
        except BadSignatureError:
            return False # Firma incorrecta
        except (UnexpectedDER, ValueError):
            logger.info("Firma con codificación DER corrupta.")
            return False
        except Exception:
            logger.exception("Error técnico en motor ECDSA")
            return False
