# scrooge/core/models/transaction.py

import logging
from typing import List, Dict, Any, Optional, Union

from scrooge.core.models.tx_input import TxInput
from scrooge.core.models.tx_output import TxOutput
from scrooge.core.models.utxo import UTXO
from scrooge.core.services.transaction_hasher import TransactionHasher

logger = logging.getLogger(__name__)

class Transaction:
    """
    Secuencia ordenada de inputs y outputs más su hash de contenido.

    Ciclo de vida: se construye (add_input / add_output), cada dueño firma su
    input sobre get_raw_data_to_sign(i), y finalize() sella el hash.
    Una vez entregada al TxHandler se trata como inmutable.
    """

    def __init__(
        self,
        inputs: Optional[List[TxInput]] = None,
        outputs: Optional[List[TxOutput]] = None
    ) -> None:
        self._inputs: List[TxInput] = list(inputs) if inputs is not None else []
        self._outputs: List[TxOutput] = list(outputs) if outputs is not None else []
        # El hash solo lo fija finalize(); nunca viene de fuera
        self._hash: Optional[bytes] = None

    # --- Getters ---
    @property
    def hash(self) -> Optional[bytes]: return self._hash
    @property
    def inputs(self) -> List[TxInput]: return self._inputs[:]
    @property
    def outputs(self) -> List[TxOutput]: return self._outputs[:]

    def num_inputs(self) -> int:
        return len(self._inputs)

    def num_outputs(self) -> int:
        return len(self._outputs)

    def get_input(self, index: int) -> TxInput:
        return self._inputs[index]

    def get_output(self, index: int) -> TxOutput:
        return self._outputs[index]

    @property
    def total_output_value(self) -> int:
        return sum(out.value for out in self._outputs)

    @property
    def short_hash(self) -> str:
        """Prefijo legible del hash para logs."""
        return self._hash.hex()[:8] if self._hash else "<sin-hash>"

    # --- Construcción ---
    def add_input(self, prev_tx_hash: bytes, output_index: int) -> None:
        self._inputs.append(TxInput(prev_tx_hash, output_index))
        self._hash = None

    def add_output(self, value: int, address: Union[str, bytes]) -> None:
        self._outputs.append(TxOutput(value, address))
        self._hash = None

    def remove_input(self, target: Union[int, UTXO]) -> None:
        """Elimina un input por posición o por la UTXO que reclama."""
        if isinstance(target, UTXO):
            for i, inp in enumerate(self._inputs):
                if inp.to_utxo() == target:
                    del self._inputs[i]
                    self._hash = None
                    return
            return
        del self._inputs[target]
        self._hash = None

    def add_signature(self, signature: bytes, input_index: int) -> None:
        self._inputs[input_index].add_signature(signature)
        self._hash = None

    def get_raw_data_to_sign(self, input_index: int) -> bytes:
        return TransactionHasher.raw_data_to_sign(self, input_index)

    def get_raw_tx(self) -> bytes:
        return TransactionHasher.raw_tx(self)

    def finalize(self) -> bytes:
        """Calcula y fija el hash de la transacción (debe llamarse tras firmar)."""
        self._hash = TransactionHasher.calculate(self)
        logger.debug(f"TX {self._hash.hex()[:8]}... sellada.")
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return self._hash == other._hash and self.get_raw_tx() == other.get_raw_tx()

    def __hash__(self) -> int:
        return hash(self._hash)

    def to_dict(self) -> Dict[str, Any]:
        """Serializa la transacción (bytes como HEX)."""
        return {
            "tx_hash": self._hash.hex() if self._hash is not None else None,
            "inputs": [inp.to_dict() for inp in self._inputs],
            "outputs": [out.to_dict() for out in self._outputs]
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Transaction':
        """
        Reconstruye la Transacción y la sella con finalize(). Un 'tx_hash'
        declarado que no coincide con el contenido se rechaza.
        """
        inputs_list = [TxInput.from_dict(d) for d in data.get('inputs', [])]
        outputs_list = [TxOutput.from_dict(d) for d in data.get('outputs', [])]

        tx = Transaction(inputs=inputs_list, outputs=outputs_list)
        computed = tx.finalize()

        raw_hash = data.get('tx_hash')
        if raw_hash and bytes.fromhex(raw_hash) != computed:
            logger.warning(f"⚠️ Hash declarado {raw_hash[:8]}... no coincide con el contenido ({computed.hex()[:8]}...).")
            raise ValueError(f"tx_hash no coincide con el contenido de la transacción: {raw_hash}")
        return tx

    def __repr__(self) -> str:
        return f"<Transaction {self.short_hash} in={len(self._inputs)} out={len(self._outputs)}>"
