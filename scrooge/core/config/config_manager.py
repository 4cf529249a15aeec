# scrooge/core/config/config_manager.py
'''
class ConfigManager:
    Centraliza el acceso a la configuración (reglas del libro mayor y logs),
    cargando valores desde el entorno (.env) o desde un JSON.

    Methods:
        __new__(cls): Singleton; una única vista de la configuración por proceso.
        _initialize(self): Carga las configuraciones especializadas con valores por defecto/entorno.
        load_from_json_dict(self, json_data): Actualiza las sub-configuraciones desde un dict JSON.
        reset(cls): Descarta la instancia (útil en tests).

    Nota: aquí solo vive configuración. El estado del UTXOPool nunca es global.
'''

from dotenv import load_dotenv
from typing import Dict, Any, Optional

# Cargar variables de entorno si existen
load_dotenv()

from scrooge.core.config.ledger_config import LedgerConfig
from scrooge.core.config.logging_config import LoggingConfig

class ConfigManager:

    _instance: Optional["ConfigManager"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._ledger = LedgerConfig()     # Reglas y criptografía
        self._logging = LoggingConfig()   # Niveles de log

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def load_from_json_dict(self, json_data: Dict[str, Any]) -> None:
        self._ledger.update_from_dict(json_data.get("crypto", {}))
        self._logging.update_from_dict(json_data.get("logging", {}))

    # --- ACCESORES ---

    @property
    def ledger(self) -> LedgerConfig:
        return self._ledger

    @property
    def logging(self) -> LoggingConfig:
        return self._logging

    # --- DELEGACIÓN (Atajos) ---

    @property
    def curve_name(self) -> str: return self._ledger.curve_name
    @property
    def coin_factor(self) -> int: return self._ledger.coin_factor
