# cra/core/config/config_manager.py
'''
class ConfigManager:
    Centraliza el acceso a la configuración del núcleo de comparación, cargando valores desde el entorno o JSON.

    Methods:
        __new__(cls): Implementa el patrón Singleton para asegurar una única instancia.
        _initialize(self): Inicializa las configuraciones especializadas con valores por defecto/entorno.
        load_from_json_dict(self, json_data: Dict[str, Any]) -> None: Actualiza las sub-configuraciones a partir de un diccionario JSON completo.

'''

from dotenv import load_dotenv
from typing import Dict, Any

# Cargar variables de entorno si existen
load_dotenv()

from cra.core.config.comparison_config import ComparisonConfig

class ConfigManager:
    
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._comparison = ComparisonConfig()    # Límites de comparación
        self._instance_name = "default"

    def load_from_json_dict(self, json_data: Dict[str, Any]) -> None:

        if "instance_name" in json_data:
            self._instance_name = str(json_data["instance_name"])

        if "comparison" in json_data:
            self._comparison.update_from_dict(json_data["comparison"])

    # --- ACCESORES ---

    @property
    def instance_name(self) -> str:
        return self._instance_name

    @property
    def comparison(self) -> ComparisonConfig:
        return self._comparison

    # --- DELEGACIÓN (Atajos) ---

    @property
    def max_chain_height(self) -> int: return self._comparison.max_chain_height
    @property
    def allow_reorg(self) -> bool: return self._comparison.allow_reorg
