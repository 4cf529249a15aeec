# scrooge/core/validators/transaction_rules_validator.py

import logging
from typing import Set

from scrooge.core.models.transaction import Transaction
from scrooge.core.models.utxo import UTXO
from scrooge.core.models.validation_result import RejectionReason, TxValidationResult
from scrooge.core.managers.utxo_pool import UTXOPool
from scrooge.core.interfaces.i_signature_verifier import ISignatureVerifier
from scrooge.core.validators.transaction_validator import TransactionValidator

logger = logging.getLogger(__name__)

class TransactionRulesValidator:
    """
    Evalúa las cinco reglas de una transacción contra el estado ACTUAL del pool.

    Por cada input, en orden: (1) existe en el pool, (2) firma válida,
    (3) no reclamado dos veces dentro de la misma TX.
    Luego: (4) outputs no negativos y (5) entradas >= salidas.
    Se detiene en el primer fallo y nunca modifica el pool.
    """

    def __init__(self, utxo_pool: UTXOPool, verifier: ISignatureVerifier):
        self._utxo_pool = utxo_pool
        self._verifier = verifier

    def evaluate(self, tx: Transaction) -> TxValidationResult:
        input_sum = 0
        claimed: Set[UTXO] = set()

        for i, inp in enumerate(tx.inputs):
            utxo = inp.to_utxo()

            # 1. Existencia
            if not self._utxo_pool.contains(utxo):
                logger.info(f"Rechazo TX {tx.short_hash}: input {i} referencia {utxo!r} inexistente o gastada.")
                return TxValidationResult(RejectionReason.MISSING_UTXO, index=i, input_sum=input_sum)

            # 2. Autorización
            spent_output = self._utxo_pool.get_tx_output(utxo)
            if not TransactionValidator.verify_input_signature(self._verifier, tx, i, spent_output):
                logger.info(f"Rechazo TX {tx.short_hash}: firma inválida en input {i}.")
                return TxValidationResult(RejectionReason.INVALID_SIGNATURE, index=i, input_sum=input_sum)

            # 3. Doble reclamo dentro de la misma TX
            if utxo in claimed:
                logger.info(f"Rechazo TX {tx.short_hash}: {utxo!r} reclamada dos veces.")
                return TxValidationResult(RejectionReason.DOUBLE_CLAIM, index=i, input_sum=input_sum)
            claimed.add(utxo)

            # El valor sale del pool, nunca de la TX
            input_sum += spent_output.value

        # 4. Outputs no negativos
        negative_index = TransactionValidator.find_negative_output(tx)
        if negative_index is not None:
            logger.info(f"Rechazo TX {tx.short_hash}: output {negative_index} negativo.")
            return TxValidationResult(RejectionReason.NEGATIVE_OUTPUT, index=negative_index, input_sum=input_sum)

        # 5. Conservación del valor
        output_sum = tx.total_output_value
        if not TransactionValidator.validate_monetary_balance(tx, input_sum, output_sum):
            return TxValidationResult(RejectionReason.INSUFFICIENT_INPUTS, input_sum=input_sum, output_sum=output_sum)

        logger.debug(f"TX {tx.short_hash} validada correctamente.")
        return TxValidationResult(RejectionReason.NONE, input_sum=input_sum, output_sum=output_sum)
