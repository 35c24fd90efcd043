# cra/interface/api/dependencies.py
import logging
from typing import Optional

from cra.core.managers.canonical_chain_manager import CanonicalChainManager

logger = logging.getLogger(__name__)

class ManagerContainer:
    _instance: Optional[CanonicalChainManager] = None 

    @classmethod
    def get_instance(cls) -> CanonicalChainManager:
        if cls._instance is None:
            logger.critical("🚨 ERROR DE ARRANQUE: El gestor canónico no ha sido inicializado. Ejecute set_instance() primero.")
            raise RuntimeError("El gestor canónico no ha sido inicializado. Ejecute set_instance() primero.")
        return cls._instance

    @classmethod
    def set_instance(cls, manager: CanonicalChainManager):
        if cls._instance is not None: 
            logger.debug("Gestor ya inyectado. Ignorando set_instance.")
            return
            
        cls._instance = manager
        logger.info("✅ [API-DI] Gestor de cadena canónica inyectado correctamente.")

    @classmethod
    def shutdown(cls):
        if cls._instance:
            logger.info("🛑 [API] Liberando el gestor canónico...")
            cls._instance = None
        else:
            logger.debug("El gestor ya estaba liberado.")

def get_manager_dependency() -> CanonicalChainManager:
    return ManagerContainer.get_instance()
