# scrooge/core/utils/monetary.py
import logging
from decimal import Decimal, InvalidOperation, getcontext
from typing import Union
from scrooge.core.config.ledger_config import LedgerConfig

# Precisión para cálculos financieros de alta fidelidad
getcontext().prec = 28

# Tipado de entrada
MonetaryInput = Union[str, int, Decimal]

logger = logging.getLogger(__name__)

class Monetary:
    """Conversión entre monedas (decimal) y unidades mínimas (int) del libro mayor."""

    @staticmethod
    def to_units(amount_coins: MonetaryInput) -> int:
        try:
            # str protege contra la imprecisión de floats
            d_units = Decimal(str(amount_coins)) * LedgerConfig.COIN_FACTOR
        except (InvalidOperation, ValueError, TypeError):
            logger.exception(f"Error convirtiendo monedas a unidades: {amount_coins}")
            raise ValueError("Monto inválido.")

        # No se permiten fracciones de unidad ("polvo")
        if d_units % 1 != 0:
            raise ValueError(f"Monto con más de {LedgerConfig.DECIMALS} decimales: {amount_coins}")

        return int(d_units)

    @staticmethod
    def to_coins(amount_units: int) -> Decimal:
        if isinstance(amount_units, bool) or not isinstance(amount_units, int):
            raise TypeError(f"Tipo no soportado: {type(amount_units)}")

        # Se admiten negativos: se usan para mostrar outputs inválidos tal cual
        return Decimal(amount_units) / Decimal(LedgerConfig.COIN_FACTOR)
