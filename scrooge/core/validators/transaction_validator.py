# scrooge/core/validators/transaction_validator.py

import logging
from typing import Optional

from scrooge.core.models.transaction import Transaction
from scrooge.core.models.tx_output import TxOutput
from scrooge.core.interfaces.i_signature_verifier import ISignatureVerifier

logger = logging.getLogger(__name__)

class TransactionValidator:
    """Chequeos puntuales y sin estado. El orden lo impone TransactionRulesValidator."""

    @staticmethod
    def verify_input_signature(
        verifier: ISignatureVerifier,
        transaction: Transaction,
        input_index: int,
        spent_output: TxOutput
    ) -> bool:
        signature = transaction.get_input(input_index).signature
        if not signature:
            logger.info(f"TX {transaction.short_hash}: input {input_index} sin firma.")
            return False

        try:
            message = transaction.get_raw_data_to_sign(input_index)
            return verifier.verify(spent_output.address, message, signature)
        except Exception:
            logger.exception(f"Bug verificando firma del input {input_index} en TX {transaction.short_hash}")
            return False

    @staticmethod
    def find_negative_output(transaction: Transaction) -> Optional[int]:
        """Índice del primer output con valor negativo, o None."""
        for i, out in enumerate(transaction.outputs):
            if out.value < 0:
                return i
        return None

    @staticmethod
    def validate_monetary_balance(transaction: Transaction, total_input: int, total_output: int) -> bool:
        # El excedente es la comisión implícita; no se contabiliza aparte
        if total_input < total_output:
            logger.info(
                f"TX {transaction.short_hash} rechazada: Fondos insuficientes "
                f"({total_input} < {total_output})."
            )
            return False
        return True
