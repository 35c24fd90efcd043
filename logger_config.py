# logger_config.py
import logging
import os
import glob
import sys
from typing import List

from cra.core.config.paths import Paths

LOG_PREFIX = "chain_relations"

def _next_log_path(log_dir: str) -> str:
    """chain_relations_<n>.log con n = mayor índice existente + 1."""
    indices: List[int] = []
    for path in glob.glob(os.path.join(log_dir, f"{LOG_PREFIX}_*.log")):
        suffix = os.path.basename(path)[len(LOG_PREFIX) + 1:-len(".log")]
        if suffix.isdigit():
            indices.append(int(suffix))

    index = max(indices) + 1 if indices else 0
    return os.path.join(log_dir, f"{LOG_PREFIX}_{index}.log")

def setup_logging(level: int = logging.INFO) -> str:
    Paths.ensure_directories_exist()
    log_path = _next_log_path(str(Paths.LOGS_DIR))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    # Archivo de sesión: historial completo
    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] [%(name)s]: %(message)s'))

    # Consola: solo errores, la salida de `compare` queda limpia
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.ERROR)
    console_handler.setFormatter(logging.Formatter('❌ %(name)s:%(lineno)d | %(message)s'))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    print(f"📝 Log de sesión: {log_path}")
    return log_path
