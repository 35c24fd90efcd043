# cra/core/models/prefix_witness.py

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from cra.core.models.chain import Chain
from cra.core.services.chain_equality import ChainEquality

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class PrefixWitness:
    """
    Certificado de que `ancestor` es prefijo (o igual) de `descendant`.

    `links` son los ids que `descendant` agrega sobre `ancestor`, del más viejo
    al más nuevo. Sin enlaces el certificado es el caso "misma cadena"; con
    enlaces equivale a "prefijo de la predecesora + último enlace" (ver unwrap()).
    """
    ancestor: Chain
    descendant: Chain
    links: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        expected = self.descendant.height - self.ancestor.height
        if len(self.links) != expected:
            raise ValueError(
                f"Certificado inconsistente: {len(self.links)} enlaces para una diferencia de altura de {expected}."
            )

    @property
    def steps(self) -> int:
        return len(self.links)

    @property
    def is_same(self) -> bool:
        return not self.links

    def unwrap(self) -> Optional[Tuple['PrefixWitness', int]]:
        """
        Vista de variante: None si es el caso "misma cadena"; si no,
        (certificado sobre la predecesora de descendant, último id).
        """
        if self.is_same:
            return None
        inner = PrefixWitness(
            ancestor=self.ancestor,
            descendant=self.descendant.previous,  # type: ignore
            links=self.links[:-1]
        )
        return inner, self.links[-1]

    def verify(self) -> bool:
        """Comprueba el certificado contra la estructura real de las cadenas."""
        node: Chain = self.descendant
        for block_id in reversed(self.links):
            if node.is_origin or node.block_id != block_id:
                logger.debug(f"Certificado inválido: se esperaba id {block_id} a la altura {node.height}.")
                return False
            node = node.previous  # type: ignore
        return ChainEquality.equal(node, self.ancestor)
