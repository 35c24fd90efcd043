# cra/interface/api/config.py

import os
import logging 
from dataclasses import dataclass

from cra.core.config.config_manager import ConfigManager 

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ApiConfig:
    host: str
    port: int
    title: str
    version: str
    debug_mode: bool
    max_chain_height: int

    @classmethod
    def load(cls) -> 'ApiConfig':

        # 1. Leemos del entorno (Infraestructura)
        host = os.getenv("CRA_API_HOST", "0.0.0.0")
        port = int(os.getenv("CRA_API_PORT", 8080))
        title = os.getenv("CRA_API_TITLE", "Chain Relations API")
        version = "0.1.0"
        debug = os.getenv("CRA_DEBUG", "False").lower() == "true"

        # 2. Leemos del Núcleo (Dominio)
        max_height = ConfigManager().max_chain_height
            
        config = cls(
            host=host,
            port=port,
            title=title,
            version=version,
            debug_mode=debug,
            max_chain_height=max_height
        )
        
        logger.info("⚙️  Configuración de la API cargada:")
        logger.info(f"   URL: http://{config.host}:{config.port}")
        logger.info(f"   Título: {config.title} v{config.version}")
        logger.debug(f"   Debug: {config.debug_mode} | Altura máxima: {config.max_chain_height}")
        
        return config

# Instancia Singleton inmutable
settings = ApiConfig.load()
