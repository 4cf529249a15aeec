# scrooge/core/config/ledger_config.py

import os
from typing import Dict, Any

class LedgerConfig:
    """
    Configuración de las reglas del libro mayor.
    """
    # --- CONSTANTES ESTÁTICAS ---
    DECIMALS = 8
    COIN_FACTOR = 10 ** DECIMALS

    DEFAULT_CURVE = "SECP256k1"

    def __init__(self):
        self._coin_factor = LedgerConfig.COIN_FACTOR

        # Valores por defecto (Env Vars)
        self._curve_name = os.getenv("SCROOGE_CURVE", LedgerConfig.DEFAULT_CURVE)

    # --- Getters ---
    @property
    def coin_factor(self) -> int: return self._coin_factor
    @property
    def curve_name(self) -> str: return self._curve_name

    # --- Actualización desde JSON ---
    def update_from_dict(self, crypto_data: Dict[str, Any]) -> None:
        if crypto_data and "curve" in crypto_data:
            self._curve_name = str(crypto_data["curve"])
