# scrooge/tests/mocks/mock_signer.py
'''
class MockSigner / MockSignatureVerifier:
    Firmas simuladas y predecibles para verificar la lógica del libro mayor
    sin criptografía real.

    La "firma" es SHA-256(public_key || message): el verificador la recalcula,
    así que una firma hecha por otra identidad o sobre otro mensaje falla.

    Methods::
        MockSigner.sign(message) -> bytes
        MockSigner.get_public_key() -> bytes
        MockSignatureVerifier.verify(public_key, message, signature) -> bool
'''

import hashlib

from scrooge.core.interfaces.i_signer import ISigner
from scrooge.core.interfaces.i_signature_verifier import ISignatureVerifier

def _mock_signature(public_key: bytes, message: bytes) -> bytes:
    return hashlib.sha256(public_key + message).digest()

class MockSigner(ISigner):

    # Constantes públicas para validación en tests
    MOCK_PUBLIC_KEY: bytes = b"MOCK_PUB_KEY_02ABCDEF"

    def __init__(self, public_key: bytes = MOCK_PUBLIC_KEY) -> None:
        self._public_key = public_key

    def sign(self, message: bytes) -> bytes:
        return _mock_signature(self._public_key, message)

    def get_public_key(self) -> bytes:
        return self._public_key

class MockSignatureVerifier(ISignatureVerifier):

    def __init__(self) -> None:
        self.calls = 0

    def verify(self, public_key: bytes, message: bytes, signature: bytes) -> bool:
        self.calls += 1
        return signature == _mock_signature(public_key, message)
