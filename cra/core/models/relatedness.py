# cra/core/models/relatedness.py

from dataclasses import dataclass
from enum import Enum, unique
from typing import Optional, Tuple

from cra.core.config.protocol_constants import ProtocolConstants
from cra.core.models.chain import Chain
from cra.core.models.equality_proof import EqualityProof
from cra.core.models.prefix_witness import PrefixWitness

@unique
class Relation(Enum):
    
    ANCESTOR = ProtocolConstants.REL_ANCESTOR       # left es estrictamente anterior a right
    DESCENDANT = ProtocolConstants.REL_DESCENDANT   # left extiende estrictamente a right
    EQUAL = ProtocolConstants.REL_EQUAL
    UNRELATED = ProtocolConstants.REL_UNRELATED     # ramas distintas de un fork

    def flipped(self) -> 'Relation':
        if self is Relation.ANCESTOR:
            return Relation.DESCENDANT
        if self is Relation.DESCENDANT:
            return Relation.ANCESTOR
        return self

@dataclass(frozen=True)
class Classification:
    """
    Resultado de clasificar (left, right) con su evidencia:
    - ANCESTOR / DESCENDANT: `prefix` certifica que la cadena anterior es prefijo de la otra.
    - EQUAL: `equality` certifica la igualdad.
    - UNRELATED: sin evidencia.
    """
    relation: Relation
    left: Chain
    right: Chain
    prefix: Optional[PrefixWitness] = None
    equality: Optional[EqualityProof] = None

    def __post_init__(self) -> None:
        needs_prefix = self.relation in (Relation.ANCESTOR, Relation.DESCENDANT)
        if needs_prefix != (self.prefix is not None):
            raise ValueError(f"La relación {self.relation.value} no corresponde con la evidencia de prefijo.")
        if (self.relation is Relation.EQUAL) != (self.equality is not None):
            raise ValueError(f"La relación {self.relation.value} no corresponde con la evidencia de igualdad.")

    @property
    def is_related(self) -> bool:
        return self.relation is not Relation.UNRELATED

    @property
    def ancestor(self) -> Optional[Chain]:
        """La cadena anterior (o cualquiera de las dos si son iguales)."""
        if self.prefix is not None:
            return self.prefix.ancestor
        if self.equality is not None:
            return self.left
        return None

    @property
    def links_to_replay(self) -> Tuple[int, ...]:
        """Ids que la cadena posterior agrega sobre la anterior."""
        return self.prefix.links if self.prefix is not None else ()

    def flipped(self) -> 'Classification':
        return Classification(
            relation=self.relation.flipped(),
            left=self.right,
            right=self.left,
            prefix=self.prefix,
            equality=self.equality.flipped() if self.equality is not None else None
        )
