import sys
import os
import json
from typing import Any, Dict

# --- AJUSTE DE RUTAS ---
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '..'))
sys.path.insert(0, root_dir)

# --- IMPORTACIONES ---
from scrooge.core.factories.transaction_factory import TransactionFactory
from scrooge.core.models.utxo import UTXO
from scrooge.core.utils.monetary import Monetary
from scrooge.infra.crypto.software_signer import SoftwareSigner

def build_demo_scenario() -> Dict[str, Any]:
    """
    Genera identidades nuevas y una época de ejemplo para main.py:
    un pago válido, un doble gasto del mismo UTXO, un gasto encadenado
    y un intento de crear dinero.
    """
    print("🔑 Generando identidades (SECP256k1)...")
    alice = SoftwareSigner.generate()
    bob = SoftwareSigner.generate()
    carol = SoftwareSigner.generate()

    genesis = TransactionFactory.create_genesis(alice.get_public_key(), Monetary.to_units("25"))
    seed = UTXO(genesis.hash, 0)

    pay_bob = TransactionFactory.create_transfer(
        [(seed, alice)],
        [(Monetary.to_units("10"), bob.get_public_key()), (Monetary.to_units("14.9"), alice.get_public_key())]
    )
    double_spend = TransactionFactory.create_transfer(
        [(seed, alice)],
        [(Monetary.to_units("25"), carol.get_public_key())]
    )
    bob_to_carol = TransactionFactory.create_transfer(
        [(UTXO(pay_bob.hash, 0), bob)],
        [(Monetary.to_units("10"), carol.get_public_key())]
    )
    inflation = TransactionFactory.create_transfer(
        [(UTXO(pay_bob.hash, 1), alice)],
        [(Monetary.to_units("100"), alice.get_public_key())]
    )

    return {
        "utxo_pool": [{**seed.to_dict(), **genesis.get_output(0).to_dict()}],
        "transactions": [tx.to_dict() for tx in (pay_bob, double_spend, bob_to_carol, inflation)]
    }

if __name__ == "__main__":
    target_file = sys.argv[1] if len(sys.argv) > 1 else "scenario_demo.json"

    with open(target_file, 'w', encoding='utf-8') as f:
        json.dump(build_demo_scenario(), f, indent=4)

    print("\n✅ ¡ESCENARIO GENERADO!")
    print(f"   📄 {target_file}")
    print(f"   ▶  python main.py {target_file} --show-pool")
