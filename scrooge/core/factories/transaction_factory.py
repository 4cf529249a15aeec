# scrooge/core/factories/transaction_factory.py

import logging
from typing import List, Sequence, Tuple, Union

from scrooge.core.interfaces.i_signer import ISigner
from scrooge.core.models.transaction import Transaction
from scrooge.core.models.utxo import UTXO

logger = logging.getLogger(__name__)

# (valor, address) de cada output a crear
OutputSpec = Tuple[int, Union[str, bytes]]

class TransactionFactory:

    @staticmethod
    def create_genesis(address: Union[str, bytes], value: int) -> Transaction:
        """
        TX sin inputs que origina valor. Sirve para sembrar pools iniciales;
        el TxHandler no la aceptaría sin más (no tiene entradas que la respalden)
        salvo que su valor sea cero.
        """
        try:
            tx = Transaction()
            tx.add_output(value, address)
            tx.finalize()

            logger.info(f"Génesis preparada: {value} unidades | ID: {tx.short_hash}...")
            return tx

        except Exception:
            logger.exception("Error fatal creando transacción génesis")
            raise

    @staticmethod
    def create_transfer(spends: Sequence[Tuple[UTXO, ISigner]], outputs: List[OutputSpec]) -> Transaction:
        """
        Construye, firma y sella una transferencia.

        Args:
            spends: Pares (UTXO a gastar, firmante dueño de esa UTXO).
            outputs: Pares (valor, address) de las nuevas salidas.
        """
        try:
            tx = Transaction()

            # A. Ensamblaje (los outputs deben existir antes de firmar)
            for utxo, _ in spends:
                tx.add_input(utxo.tx_hash, utxo.index)
            for value, address in outputs:
                tx.add_output(value, address)

            # B. Firmas, una por input
            for i, (_, signer) in enumerate(spends):
                tx.add_signature(signer.sign(tx.get_raw_data_to_sign(i)), i)

            # C. Sellado
            tx.finalize()

            logger.info(f"Transferencia preparada: {len(spends)} inputs -> {len(outputs)} outputs | ID: {tx.short_hash}...")
            return tx

        except Exception:
            logger.exception("Error fatal creando transacción de transferencia")
            raise
