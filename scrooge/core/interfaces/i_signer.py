# scrooge/core/interfaces/i_signer.py

from abc import ABC, abstractmethod

class ISigner(ABC):
    """
    [Abstracción de Seguridad]
    Contrato que define la capacidad de firmar digitalmente.

    Permite desacoplar la construcción de transacciones
    del almacenamiento sensible de las claves privadas.
    """

    @abstractmethod
    def sign(self, message: bytes) -> bytes:
        """
        Firma criptográficamente un mensaje.

        Args:
            message: Payload canónico de un input (get_raw_data_to_sign).

        Returns:
            bytes: La firma en formato DER.
        """
        pass

    @abstractmethod
    def get_public_key(self) -> bytes:
        """
        Expone la identidad pública del firmante (se usa como address de los outputs).
        """
        pass
