# cra/core/builders/chain_builder.py

import logging
from typing import Iterable, List, Optional

from cra.core.models.chain import Chain

logger = logging.getLogger(__name__)

class ChainBuilder:

    @staticmethod
    def from_ids(block_ids: Iterable[int], base: Optional[Chain] = None) -> Chain:
        """
        Extiende `base` (el Origen por defecto) con cada id, en orden.
        """
        chain = base if base is not None else Chain.origin()
        for block_id in block_ids:
            chain = chain.extend(block_id)
        return chain

    @staticmethod
    def to_ids(chain: Chain) -> List[int]:
        return list(chain.block_ids())
