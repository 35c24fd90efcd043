# cra/core/services/prefix_finder.py

import logging
from typing import List, Optional

from cra.core.models.chain import Chain
from cra.core.models.prefix_witness import PrefixWitness
from cra.core.services.chain_equality import ChainEquality

logger = logging.getLogger(__name__)

class PrefixFinder:
    """
    Relación de prefijo (ancestro-o-igual) entre cadenas.

    Todas las operaciones devuelven certificados (PrefixWitness), no booleanos,
    para que el consumidor sepa cuántos enlaces separan ambas cadenas y cuáles son.
    Los recorridos son iterativos: la profundidad de pila no depende de la altura.
    """

    @staticmethod
    def find_prefix(a: Chain, b: Chain) -> Optional[PrefixWitness]:
        # Una cadena más alta nunca es prefijo de una más baja
        if a.height > b.height:
            return None

        # Quitamos enlaces de b hasta igualar alturas
        links: List[int] = []
        node: Chain = b
        while node.height > a.height:
            links.append(node.block_id)  # type: ignore
            node = node.previous  # type: ignore

        # A igual altura la relación es pura igualdad estructural
        if not ChainEquality.equal(a, node):
            logger.debug(f"Sin prefijo: divergencia a la altura {a.height}.")
            return None

        links.reverse()
        return PrefixWitness(ancestor=a, descendant=b, links=tuple(links))

    @staticmethod
    def is_prefix(a: Chain, b: Chain) -> bool:
        return PrefixFinder.find_prefix(a, b) is not None

    # --- Construcción de Certificados ---

    @staticmethod
    def reflexive(a: Chain) -> PrefixWitness:
        return PrefixWitness(ancestor=a, descendant=a)

    @staticmethod
    def from_origin(b: Chain) -> PrefixWitness:
        return PrefixWitness(ancestor=Chain.origin(), descendant=b, links=b.block_ids())

    @staticmethod
    def extend(witness: PrefixWitness, block_id: int) -> PrefixWitness:
        """Un enlace más sobre el descendiente: Prefix(a, b) => Prefix(a, b + id)."""
        return PrefixWitness(
            ancestor=witness.ancestor,
            descendant=witness.descendant.extend(block_id),
            links=witness.links + (block_id,)
        )

    @staticmethod
    def compose(first: PrefixWitness, second: PrefixWitness) -> PrefixWitness:
        """Transitividad: Prefix(a, b) y Prefix(b, c) => Prefix(a, c)."""
        if not ChainEquality.equal(first.descendant, second.ancestor):
            raise ValueError("No se pueden encadenar certificados: el descendiente del primero no es el ancestro del segundo.")

        return PrefixWitness(
            ancestor=first.ancestor,
            descendant=second.descendant,
            links=first.links + second.links
        )

    @staticmethod
    def strip(witness: PrefixWitness) -> PrefixWitness:
        """Prefix(a + id, b) => Prefix(a, b)."""
        ancestor = witness.ancestor
        if ancestor.is_origin:
            raise ValueError("El Origen no tiene predecesora que extraer.")

        return PrefixWitness(
            ancestor=ancestor.previous,  # type: ignore
            descendant=witness.descendant,
            links=(ancestor.block_id,) + witness.links  # type: ignore
        )

    # --- Punto de Fork ---

    @staticmethod
    def common_ancestor(a: Chain, b: Chain) -> Chain:
        """
        Cadena más alta que es prefijo de ambas. Siempre existe (el Origen como mínimo).
        """
        base_height = min(a.height, b.height)
        left = a.ancestor_at(base_height)
        right = b.ancestor_at(base_height)

        fork = left
        while left is not right and not left.is_origin:
            # La divergencia más baja decide: todo lo que está debajo coincide
            if left.block_id != right.block_id:
                fork = left.previous  # type: ignore
            left = left.previous  # type: ignore
            right = right.previous  # type: ignore

        logger.debug(f"Ancestro común a la altura {fork.height} (alturas {a.height} y {b.height}).")
        return fork
