# scrooge/tests/unit/test_transaction_rules_validator.py
'''
Test Suite para TransactionRulesValidator:
    Verifica el orden de evaluación (corte en el primer fallo) y la delegación
    al colaborador criptográfico, simulado con MagicMock.
'''

import sys
import os
import unittest
from unittest.mock import MagicMock

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from scrooge.core.interfaces.i_signature_verifier import ISignatureVerifier
from scrooge.core.managers.utxo_pool import UTXOPool
from scrooge.core.models.transaction import Transaction
from scrooge.core.models.tx_output import TxOutput
from scrooge.core.models.utxo import UTXO
from scrooge.core.models.validation_result import RejectionReason
from scrooge.core.validators.transaction_rules_validator import TransactionRulesValidator
from scrooge.core.validators.transaction_validator import TransactionValidator

OWNER_KEY = b"OWNER_PUB_KEY"
PREV_HASH = b"\x11" * 32

class TestTransactionRulesValidator(unittest.TestCase):

    def setUp(self):
        self.pool = UTXOPool()
        self.pool.add_utxo(UTXO(PREV_HASH, 0), TxOutput(50, OWNER_KEY))
        self.pool.add_utxo(UTXO(PREV_HASH, 1), TxOutput(20, OWNER_KEY))

        self.mock_verifier = MagicMock(spec=ISignatureVerifier)
        self.mock_verifier.verify.return_value = True

        self.validator = TransactionRulesValidator(self.pool, self.mock_verifier)

    def build_tx(self, indexes, values) -> Transaction:
        tx = Transaction()
        for idx in indexes:
            tx.add_input(PREV_HASH, idx)
        for value in values:
            tx.add_output(value, b"DEST")
        for i in range(tx.num_inputs()):
            tx.add_signature(b"SIG_%d" % i, i)
        tx.finalize()
        return tx

    def test_verifier_receives_owner_key_payload_and_signature(self):
        tx = self.build_tx([1], [20])

        assert self.validator.evaluate(tx).is_valid is True
        self.mock_verifier.verify.assert_called_once_with(
            OWNER_KEY, tx.get_raw_data_to_sign(0), b"SIG_0"
        )

    def test_missing_reference_stops_before_signature_check(self):
        tx = self.build_tx([7], [1])
        result = self.validator.evaluate(tx)

        assert result.reason is RejectionReason.MISSING_UTXO
        self.mock_verifier.verify.assert_not_called()

    def test_first_failing_input_decides(self):
        # Input 0 existe, input 1 no: la firma solo se consulta una vez
        tx = self.build_tx([0, 9], [1])
        result = self.validator.evaluate(tx)

        assert result.reason is RejectionReason.MISSING_UTXO
        assert result.index == 1
        assert self.mock_verifier.verify.call_count == 1

    def test_rejected_signature(self):
        self.mock_verifier.verify.return_value = False
        tx = self.build_tx([0], [10])

        assert self.validator.evaluate(tx).reason is RejectionReason.INVALID_SIGNATURE

    def test_verifier_exception_counts_as_invalid(self):
        self.mock_verifier.verify.side_effect = RuntimeError("motor caído")
        tx = self.build_tx([0], [10])

        assert self.validator.evaluate(tx).reason is RejectionReason.INVALID_SIGNATURE

    def test_double_claim_checked_after_signature(self):
        tx = self.build_tx([0, 0], [10])
        result = self.validator.evaluate(tx)

        assert result.reason is RejectionReason.DOUBLE_CLAIM
        assert self.mock_verifier.verify.call_count == 2

    def test_negative_output_checked_before_balance(self):
        # Entradas insuficientes Y output negativo: manda la regla 4
        tx = self.build_tx([1], [100, -1])
        assert self.validator.evaluate(tx).reason is RejectionReason.NEGATIVE_OUTPUT

    def test_balance_uses_all_inputs(self):
        tx = self.build_tx([0, 1], [70])
        result = self.validator.evaluate(tx)

        assert result.is_valid is True
        assert result.input_sum == 70

        tx_over = self.build_tx([0, 1], [70, 1])
        assert self.validator.evaluate(tx_over).reason is RejectionReason.INSUFFICIENT_INPUTS

    def test_validator_reads_live_pool(self):
        tx = self.build_tx([0], [50])
        assert self.validator.evaluate(tx).is_valid is True

        self.pool.remove_utxo(UTXO(PREV_HASH, 0))
        assert self.validator.evaluate(tx).reason is RejectionReason.MISSING_UTXO

class TestTransactionValidatorHelpers(unittest.TestCase):

    def test_find_negative_output(self):
        tx = Transaction()
        tx.add_output(3, b"A")
        tx.add_output(0, b"B")
        assert TransactionValidator.find_negative_output(tx) is None

        tx.add_output(-1, b"C")
        assert TransactionValidator.find_negative_output(tx) == 2

    def test_validate_monetary_balance(self):
        tx = Transaction()
        assert TransactionValidator.validate_monetary_balance(tx, 10, 10) is True
        assert TransactionValidator.validate_monetary_balance(tx, 11, 10) is True
        assert TransactionValidator.validate_monetary_balance(tx, 9, 10) is False

if __name__ == '__main__':
    unittest.main()
