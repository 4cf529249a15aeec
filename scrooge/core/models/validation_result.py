# scrooge/core/models/validation_result.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RejectionReason(Enum):
    """Motivo del primer chequeo fallido, en el orden en que se evalúan."""
    NONE = "none"
    MISSING_UTXO = "missing_utxo"
    INVALID_SIGNATURE = "invalid_signature"
    DOUBLE_CLAIM = "double_claim"
    NEGATIVE_OUTPUT = "negative_output"
    INSUFFICIENT_INPUTS = "insufficient_inputs"


@dataclass(frozen=True)
class TxValidationResult:
    reason: RejectionReason
    # Posición del input/output culpable (None si el fallo es global)
    index: Optional[int] = None
    input_sum: int = 0
    output_sum: int = 0

    @property
    def is_valid(self) -> bool:
        return self.reason is RejectionReason.NONE
