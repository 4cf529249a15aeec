# scrooge/core/interfaces/i_signature_verifier.py

from abc import ABC, abstractmethod

class ISignatureVerifier(ABC):
    """
    [Colaborador Criptográfico]
    Contrato de verificación de firmas que consume el TxHandler.

    El handler solo exige que la verificación tenga éxito para cada input;
    el algoritmo concreto (curva, hash, codificación) vive en la implementación.
    """

    @abstractmethod
    def verify(self, public_key: bytes, message: bytes, signature: bytes) -> bool:
        """
        Args:
            public_key: Identidad del dueño del output gastado.
            message: Payload canónico del input (get_raw_data_to_sign).
            signature: Firma adjunta al input.

        Returns:
            bool: True solo si la firma es válida. Nunca lanza por datos corruptos.
        """
        pass
