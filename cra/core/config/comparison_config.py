# cra/core/config/comparison_config.py

import os
from typing import Dict, Any

class ComparisonConfig:
    """
    Configuración de las reglas de comparación de cadenas.
    Limita lo que aceptamos desde afuera (API / CLI) y cómo decide el gestor canónico.
    """
    # --- CONSTANTES ESTÁTICAS ---
    DEFAULT_MAX_CHAIN_HEIGHT = 100_000

    def __init__(self):
        # Valores por defecto (Env Vars)
        self._max_chain_height = int(os.getenv("CRA_MAX_CHAIN_HEIGHT", ComparisonConfig.DEFAULT_MAX_CHAIN_HEIGHT))
        self._allow_reorg = os.getenv("CRA_ALLOW_REORG", "True").lower() == "true"

    # --- Getters ---
    @property
    def max_chain_height(self) -> int: return self._max_chain_height
    @property
    def allow_reorg(self) -> bool: return self._allow_reorg

    # --- Actualización desde JSON ---
    def update_from_dict(self, data: Dict[str, Any]) -> None:
        """
        Actualiza los límites de comparación desde un diccionario externo.
        """
        if not data: return

        if "max_chain_height" in data:
            value = int(data["max_chain_height"])
            if value < 0:
                raise ValueError("max_chain_height no puede ser negativo.")
            self._max_chain_height = value

        if "allow_reorg" in data:
            self._allow_reorg = str(data["allow_reorg"]).lower() == "true"
