# cra/core/models/equality_proof.py

from dataclasses import dataclass

from cra.core.models.chain import Chain

@dataclass(frozen=True)
class EqualityProof:
    """
    Evidencia de que dos cadenas son estructuralmente iguales.
    Solo ChainEquality.prove() debería construirla.
    """
    left: Chain
    right: Chain

    @property
    def height(self) -> int:
        # Cadenas iguales comparten altura: ambos lados dan el mismo valor
        return self.left.height

    def flipped(self) -> 'EqualityProof':
        return EqualityProof(left=self.right, right=self.left)
