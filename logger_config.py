# logger_config.py
import logging
import os
import glob
import sys
from typing import List, Optional

from scrooge.core.config.config_manager import ConfigManager
from scrooge.core.config.paths import Paths

def setup_logging(log_dir: Optional[str] = None) -> str:
    # 1. Ruta: por defecto 'data/logs' (o SCROOGE_DATA_DIR/logs)
    if log_dir is None:
        log_dir = Paths.ensure_directories_exist()["logs"]
    else:
        os.makedirs(log_dir, exist_ok=True)

    # 2. Un archivo por sesión: buscar el siguiente número (scrooge_0.log, scrooge_1.log...)
    existentes: List[str] = glob.glob(os.path.join(log_dir, "scrooge_*.log"))
    indices: List[int] = []
    for archivo in existentes:
        try:
            num = int(archivo.split('_')[-1].split('.')[0])
            indices.append(num)
        except (ValueError, IndexError): continue

    siguiente: int = max(indices) + 1 if indices else 0
    nombre_archivo: str = os.path.join(log_dir, f"scrooge_{siguiente}.log")

    levels = ConfigManager().logging

    # 3. Configurar el Root Logger
    root_logger = logging.getLogger()
    root_logger.setLevel(min(levels.file_level, levels.console_level))

    # Limpiamos handlers anteriores para evitar duplicados si se llama dos veces
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # --- CANAL 1: ARCHIVO (historial detallado) ---
    fh = logging.FileHandler(nombre_archivo, encoding='utf-8')
    fh.setLevel(levels.file_level)
    fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] [%(name)s]: %(message)s'))

    # --- CANAL 2: TERMINAL (por defecto solo ERRORES o CRÍTICOS) ---
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(levels.console_level)
    ch.setFormatter(logging.Formatter('\n❌ %(levelname)s EN: %(name)s | Línea: %(lineno)d\nDetalle: %(message)s\n'))

    root_logger.addHandler(fh)
    root_logger.addHandler(ch)

    return nombre_archivo
