# cra/core/config/protocol_constants.py

from typing import Final

class ProtocolConstants:
    """
    Vocabulario inmutable del álgebra de cadenas.
    Centraliza:
    1. Metadatos del servicio.
    2. Reglas estructurales del Origen.
    3. Etiquetas de relación expuestas hacia afuera (API / CLI).
    """

    # ==========================================================================
    # 1. METADATOS GLOBALES
    # ==========================================================================
    PROTOCOL_VERSION: Final[int] = 1

    # ==========================================================================
    # 2. REGLAS DE ESTRUCTURA
    # ==========================================================================

    # El Origen es la única cadena de altura 0 y no lleva identificador de bloque
    ORIGIN_HEIGHT: Final[int] = 0

    # Los identificadores de bloque son enteros no negativos
    MIN_BLOCK_ID: Final[int] = 0

    # ==========================================================================
    # 3. ETIQUETAS DE RELACIÓN
    # ==========================================================================
    REL_ANCESTOR: Final[str]   = "ANCESTOR"
    REL_DESCENDANT: Final[str] = "DESCENDANT"
    REL_EQUAL: Final[str]      = "EQUAL"
    REL_UNRELATED: Final[str]  = "UNRELATED"
