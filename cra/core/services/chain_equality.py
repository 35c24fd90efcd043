# cra/core/services/chain_equality.py

import logging
from typing import Optional

from cra.core.models.chain import Chain
from cra.core.models.equality_proof import EqualityProof

logger = logging.getLogger(__name__)

class ChainEquality:

    @staticmethod
    def equal(a: Chain, b: Chain) -> bool:
        """
        Igualdad estructural: compara pares (id, predecesora) hasta el Origen.
        El Origen solo es igual al Origen. El recorrido es iterativo.
        """
        # El hash se deriva de la estructura: hashes distintos implican cadenas distintas
        if hash(a) != hash(b):
            return False

        left: Chain = a
        right: Chain = b
        while True:
            # Prefijo compartido (mismo objeto): el resto es idéntico
            if left is right:
                return True

            if left.is_origin or right.is_origin:
                return left.is_origin and right.is_origin

            if left.block_id != right.block_id:
                return False

            left = left.previous  # type: ignore
            right = right.previous  # type: ignore

    @staticmethod
    def prove(a: Chain, b: Chain) -> Optional[EqualityProof]:
        if not ChainEquality.equal(a, b):
            return None
        return EqualityProof(left=a, right=b)

    @staticmethod
    def same_height(proof: EqualityProof) -> int:
        """Altura común de dos cadenas probadamente iguales."""
        left_height = proof.left.height
        right_height = proof.right.height
        if left_height != right_height:
            # Solo alcanzable con una prueba fabricada a mano
            logger.error(f"Prueba de igualdad inconsistente: alturas {left_height} y {right_height}.")
            raise ValueError("La prueba de igualdad no corresponde a cadenas de igual altura.")
        return left_height
