# cra/core/utils/chain_mapper.py

import logging
from typing import Any, Dict, Optional

from cra.core.builders.chain_builder import ChainBuilder
from cra.core.config.config_manager import ConfigManager
from cra.core.models.chain import AnyChain, Chain

logger = logging.getLogger(__name__)

class ChainMapper:

    @staticmethod
    def reconstruct(data: Dict[str, Any], max_height: Optional[int] = None) -> AnyChain:
        """
        Reconstruye una cadena desde {"block_ids": [...], "height": opcional}.
        Si viene "height" debe coincidir con la cantidad de ids.
        """
        try:
            # 1. Campo obligatorio
            raw_ids = data["block_ids"]
            if not isinstance(raw_ids, (list, tuple)):
                raise ValueError("'block_ids' debe ser una lista de enteros.")

            # 2. Límite de altura (protege contra cadenas gigantes desde afuera)
            limit = max_height if max_height is not None else ConfigManager().max_chain_height
            if len(raw_ids) > limit:
                raise ValueError(f"La cadena supera la altura máxima permitida ({len(raw_ids)} > {limit}).")

            chain = ChainBuilder.from_ids(raw_ids)

            # 3. Altura declarada (opcional)
            declared = data.get("height")
            if declared is None:
                return AnyChain.wrap(chain)
            if isinstance(declared, bool) or not isinstance(declared, int):
                raise ValueError(f"'height' debe ser entero, se recibió {type(declared).__name__}.")
            return AnyChain(height=declared, chain=chain)

        except KeyError as e:
            logger.error(f"❌ Falta campo obligatorio en el JSON de la cadena: {e}")
            raise
        except ValueError as e:
            logger.warning(f"⚠️ Cadena rechazada: {e}")
            raise

    @staticmethod
    def to_dict(chain: Chain) -> Dict[str, Any]:
        return {
            "height": chain.height,
            "block_ids": ChainBuilder.to_ids(chain)
        }
