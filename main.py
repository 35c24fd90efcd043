import os
import sys
import json
import argparse
import logging

from typing import Any, List

# =========================================================
# ⚡ CONFIGURACIÓN INICIAL DEL SISTEMA
# =========================================================

import logger_config

logger = logging.getLogger()

# --- IMPORTS DEL CORE ---
from cra.core.builders.chain_builder import ChainBuilder
from cra.core.config.config_manager import ConfigManager
from cra.core.services.prefix_finder import PrefixFinder
from cra.core.services.relatedness_classifier import RelatednessClassifier

# =========================================================
# 🛠️ FUNCIONES DE UTILIDAD
# =========================================================

def load_config(config_path: str) -> dict[str, Any]:
    """Carga el archivo JSON de configuración."""
    if not os.path.exists(config_path):
        logger.critical(f"❌ No existe el archivo de configuración: {config_path}")
        sys.exit(1)

    try:
        with open(config_path, 'r') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.critical(f"❌ JSON Corrupto en {config_path}: {e}")
        sys.exit(1)

def parse_ids(raw: str) -> List[int]:
    """'1,2,3' -> [1, 2, 3]. Cadena vacía = Origen."""
    raw = raw.strip()
    if not raw:
        return []
    try:
        return [int(part) for part in raw.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Lista de ids inválida: '{raw}'")

def run_compare(left_ids: List[int], right_ids: List[int]) -> int:
    try:
        left = ChainBuilder.from_ids(left_ids)
        right = ChainBuilder.from_ids(right_ids)
    except ValueError as e:
        logger.error(f"Cadena inválida: {e}")
        print(f"⛔ {e}")
        return 2

    result = RelatednessClassifier.classify(left, right)
    fork = PrefixFinder.common_ancestor(left, right)

    print(f"Izquierda: altura {left.height} | Derecha: altura {right.height}")
    print(f"Relación: {result.relation.value}")
    print(f"Ancestro común: altura {fork.height}")
    if result.links_to_replay:
        print(f"Bloques a reproducir: {list(result.links_to_replay)}")
    return 0

def run_server(host: str, port: int) -> None:
    import uvicorn

    print("\n" + "="*60)
    print(f"⛓️ API de relaciones de cadenas")
    print(f"🌐 Disponible en: http://{host}:{port}")
    print("="*60 + "\n")

    uvicorn.run(
        "cra.interface.api.server:app",
        host=host,
        port=port,
        log_level="info"
    )

# =========================================================
# 🚀 ENTRY POINT PRINCIPAL
# =========================================================

def main():
    parser = argparse.ArgumentParser(description="Lanzador Chain Relations")
    parser.add_argument("--config", help="Archivo JSON de configuración")

    sub = parser.add_subparsers(dest="command", required=True)

    compare = sub.add_parser("compare", help="Clasifica dos cadenas dadas como listas de ids")
    compare.add_argument("--left", type=parse_ids, default=[], help="Ids de la cadena izquierda (ej: 1,2,3)")
    compare.add_argument("--right", type=parse_ids, default=[], help="Ids de la cadena derecha")

    serve = sub.add_parser("serve", help="Levanta la API HTTP")
    serve.add_argument("--host", default=os.getenv("CRA_API_HOST", "0.0.0.0"))
    serve.add_argument("--port", type=int, default=int(os.getenv("CRA_API_PORT", 8080)))

    args = parser.parse_args()

    logger_config.setup_logging()

    if args.config:
        ConfigManager().load_from_json_dict(load_config(args.config))

    if args.command == "compare":
        sys.exit(run_compare(args.left, args.right))
    else:
        run_server(args.host, args.port)

if __name__ == "__main__":
    main()
