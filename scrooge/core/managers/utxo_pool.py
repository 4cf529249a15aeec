# scrooge/core/managers/utxo_pool.py

import logging
from typing import Dict, List, Mapping, Optional, Union

from scrooge.core.models.utxo import UTXO
from scrooge.core.models.tx_output import TxOutput

logger = logging.getLogger(__name__)

class UTXONotFoundError(KeyError):
    """La referencia consultada no está (o ya no está) en el pool."""
    pass

class UTXOPool:
    """
    Conjunto autoritativo de salidas gastables: UTXO -> TxOutput.

    Sin lógica de negocio ni candados: lo posee en exclusiva un único TxHandler.
    """

    def __init__(self, source: Optional[Union["UTXOPool", Mapping[UTXO, TxOutput]]] = None) -> None:
        # Constructor de copia: nunca compartimos el dict de otro pool
        if isinstance(source, UTXOPool):
            self._utxos: Dict[UTXO, TxOutput] = dict(source._utxos)
        elif source is not None:
            self._utxos = dict(source)
        else:
            self._utxos = {}

    def contains(self, utxo: UTXO) -> bool:
        return utxo in self._utxos

    def __contains__(self, utxo: object) -> bool:
        return utxo in self._utxos

    def get_tx_output(self, utxo: UTXO) -> TxOutput:
        try:
            return self._utxos[utxo]
        except KeyError:
            raise UTXONotFoundError(utxo) from None

    def add_utxo(self, utxo: UTXO, output: TxOutput) -> None:
        self._utxos[utxo] = output

    def remove_utxo(self, utxo: UTXO) -> None:
        # Ausente = no-op
        self._utxos.pop(utxo, None)

    def copy(self) -> "UTXOPool":
        # UTXO y TxOutput son inmutables: basta con copiar el mapeo
        return UTXOPool(self)

    def get_all_utxos(self) -> List[UTXO]:
        return sorted(self._utxos)

    def total_value(self) -> int:
        return sum(out.value for out in self._utxos.values())

    def __len__(self) -> int:
        return len(self._utxos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UTXOPool):
            return NotImplemented
        return self._utxos == other._utxos

    def __repr__(self) -> str:
        return f"<UTXOPool size={len(self._utxos)} total={self.total_value()}>"
