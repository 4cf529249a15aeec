import os
import sys
import json
import argparse
import logging
from typing import Any, Dict, List, Optional

import logger_config

from scrooge.core.config.config_manager import ConfigManager
from scrooge.core.managers.tx_handler import TxHandler
from scrooge.core.managers.utxo_pool import UTXOPool
from scrooge.core.models.transaction import Transaction
from scrooge.core.models.tx_output import TxOutput
from scrooge.core.models.utxo import UTXO
from scrooge.core.utils.monetary import Monetary

logger = logging.getLogger(__name__)

# =========================================================
# 🛠️ FUNCIONES DE UTILIDAD
# =========================================================

def load_json(path: str) -> Dict[str, Any]:
    """Carga un archivo JSON cuyo nivel superior debe ser un objeto."""
    if not os.path.exists(path):
        logger.critical(f"❌ No existe el archivo: {path}")
        sys.exit(1)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.critical(f"❌ JSON Corrupto en {path}: {e}")
        sys.exit(1)

    if not isinstance(data, dict):
        logger.critical(f"❌ {path}: se esperaba un objeto JSON, no {type(data).__name__}")
        sys.exit(1)
    return data

def build_pool(entries: List[Dict[str, Any]]) -> UTXOPool:
    pool = UTXOPool()
    for entry in entries:
        pool.add_utxo(UTXO.from_dict(entry), TxOutput.from_dict(entry))
    return pool

def print_pool(pool: UTXOPool) -> None:
    for utxo in pool.get_all_utxos():
        out = pool.get_tx_output(utxo)
        print(f"   ➤ {utxo.tx_hash.hex()[:16]}:{utxo.index}  {Monetary.to_coins(out.value)}  -> {out.address.hex()[:16]}...")

def run_scenario(scenario: Dict[str, Any], show_pool: bool = False) -> List[Transaction]:
    if not isinstance(scenario, dict):
        raise TypeError(f"El escenario debe ser un objeto JSON, no {type(scenario).__name__}")

    pool = build_pool(scenario.get("utxo_pool", []))
    candidates = [Transaction.from_dict(d) for d in scenario.get("transactions", [])]

    handler = TxHandler(pool)
    accepted = handler.handle_txs(candidates)
    final_pool = handler.get_utxo_pool()

    print("\n" + "="*60)
    print(f"📊 ÉPOCA: {len(accepted)}/{len(candidates)} transacciones aceptadas")
    print("="*60)
    for tx in accepted:
        print(f"   ✅ {tx.hash.hex() if tx.hash else '<sin-hash>'}")
    print(f"\n💰 Pool final: {len(final_pool)} UTXOs | {Monetary.to_coins(final_pool.total_value())} monedas")
    if show_pool:
        print_pool(final_pool)

    return accepted

# =========================================================
# 🚀 ENTRY POINT PRINCIPAL
# =========================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Validador de épocas Scrooge (UTXO)")

    parser.add_argument("scenario", help="Archivo JSON con 'utxo_pool' y 'transactions'")
    parser.add_argument("--config", help="JSON de configuración (secciones 'crypto' y 'logging')")
    parser.add_argument("--show-pool", action="store_true", help="Listar el pool resultante")

    args = parser.parse_args(argv)

    if args.config:
        ConfigManager().load_from_json_dict(load_json(args.config))

    log_file = logger_config.setup_logging()
    print(f"📝 Log de sesión guardado en: {log_file}")

    scenario = load_json(args.scenario)
    try:
        run_scenario(scenario, show_pool=args.show_pool)
    except (ValueError, TypeError) as e:
        logger.critical(f"❌ Escenario inválido: {e}", exc_info=True)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
