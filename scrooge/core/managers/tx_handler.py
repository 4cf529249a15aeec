# scrooge/core/managers/tx_handler.py

import logging
from typing import Iterable, List, Optional

from scrooge.core.models.transaction import Transaction
from scrooge.core.models.utxo import UTXO
from scrooge.core.models.validation_result import TxValidationResult
from scrooge.core.managers.utxo_pool import UTXOPool
from scrooge.core.interfaces.i_signature_verifier import ISignatureVerifier
from scrooge.core.services.signature_verifier_service import EcdsaSignatureVerifier
from scrooge.core.services.transaction_hasher import TransactionHasher
from scrooge.core.validators.transaction_rules_validator import TransactionRulesValidator

logger = logging.getLogger(__name__)

class TxHandler:
    """
    Libro mayor público sobre un UTXOPool propio.

    El pool recibido se COPIA al construir: las mutaciones del handler nunca
    alcanzan al pool del llamador. Sin candados; quien comparta un handler
    entre hilos debe serializar las llamadas.
    """

    def __init__(self, utxo_pool: UTXOPool, verifier: Optional[ISignatureVerifier] = None) -> None:
        self._utxo_pool = utxo_pool.copy()
        self._verifier = verifier if verifier is not None else EcdsaSignatureVerifier()
        # El validador lee siempre el pool vivo, no una foto
        self._rules = TransactionRulesValidator(self._utxo_pool, self._verifier)
        logger.info(f"TxHandler iniciado con {len(self._utxo_pool)} UTXOs.")

    def get_utxo_pool(self) -> UTXOPool:
        """Copia del estado actual (el pool interno no se expone)."""
        return self._utxo_pool.copy()

    def check_tx(self, tx: Transaction) -> TxValidationResult:
        """Como is_valid_tx, pero con el motivo del rechazo."""
        return self._rules.evaluate(tx)

    def is_valid_tx(self, tx: Transaction) -> bool:
        """
        True si:
        (1) todas las salidas reclamadas están en el pool actual,
        (2) las firmas de cada input son válidas,
        (3) ninguna UTXO se reclama más de una vez,
        (4) ningún output es negativo, y
        (5) la suma de entradas es >= la suma de salidas.
        """
        return self.check_tx(tx).is_valid

    def handle_txs(self, possible_txs: Iterable[Transaction]) -> List[Transaction]:
        """
        Procesa una época: recorre las candidatas UNA vez en el orden dado,
        acepta cada TX válida contra el pool actual y aplica su efecto antes
        de evaluar la siguiente. La primera TX que gasta una UTXO gana.
        """
        accepted: List[Transaction] = []
        rejected = 0

        for tx in possible_txs:
            if not self.is_valid_tx(tx):
                rejected += 1
                continue

            accepted.append(tx)
            self._apply(tx)

        logger.info(f"Época procesada: {len(accepted)} aceptadas, {rejected} descartadas. Pool: {len(self._utxo_pool)} UTXOs.")
        return accepted

    def _apply(self, tx: Transaction) -> None:
        # 1. Consumir lo gastado
        for inp in tx.inputs:
            self._utxo_pool.remove_utxo(inp.to_utxo())

        # 2. Registrar lo creado, indexado por el hash de CONTENIDO de esta TX
        # (se recalcula: un hash desactualizado no puede pisar UTXOs ajenas)
        tx_hash = TransactionHasher.calculate(tx)
        for index, output in enumerate(tx.outputs):
            self._utxo_pool.add_utxo(UTXO(tx_hash, index), output)

        logger.info(f"TX {tx_hash.hex()[:8]} aceptada: -{tx.num_inputs()} / +{tx.num_outputs()} UTXOs.")
