# cra/core/services/height_caster.py

import logging

from cra.core.models.chain import AnyChain, Chain

logger = logging.getLogger(__name__)

class HeightCaster:
    """
    Re-etiqueta una cadena con una altura que el llamador ya sabe correcta.
    Es la identidad sobre el contenido: nunca reconstruye ni copia la cadena.
    """

    @staticmethod
    def cast(chain: Chain, target_height: int) -> Chain:
        if target_height != chain.height:
            logger.warning(f"⛔ Cast rechazado: altura objetivo {target_height}, altura real {chain.height}.")
            raise ValueError(
                f"No se puede tratar una cadena de altura {chain.height} como de altura {target_height}."
            )
        return chain

    @staticmethod
    def cast_any(any_chain: AnyChain, target_height: int) -> AnyChain:
        HeightCaster.cast(any_chain.chain, target_height)
        return any_chain
