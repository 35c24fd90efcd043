# cra/core/services/relatedness_classifier.py

import logging

from cra.core.models.chain import Chain
from cra.core.models.relatedness import Classification, Relation
from cra.core.services.chain_equality import ChainEquality
from cra.core.services.prefix_finder import PrefixFinder

logger = logging.getLogger(__name__)

class RelatednessClassifier:

    @staticmethod
    def classify(a: Chain, b: Chain) -> Classification:
        """
        Clasifica (a, b) en exactamente uno de: EQUAL, ANCESTOR, DESCENDANT, UNRELATED.
        Las desigualdades estrictas de altura impiden que ANCESTOR/DESCENDANT se solapen con EQUAL.
        """
        # 1. Igualdad
        equality = ChainEquality.prove(a, b)
        if equality is not None:
            return Classification(relation=Relation.EQUAL, left=a, right=b, equality=equality)

        # 2. a es estrictamente anterior a b
        if a.height < b.height:
            witness = PrefixFinder.find_prefix(a, b)
            if witness is not None:
                return Classification(relation=Relation.ANCESTOR, left=a, right=b, prefix=witness)

        # 3. a extiende estrictamente a b
        if b.height < a.height:
            witness = PrefixFinder.find_prefix(b, a)
            if witness is not None:
                return Classification(relation=Relation.DESCENDANT, left=a, right=b, prefix=witness)

        # 4. Ramas distintas
        logger.debug(f"Cadenas no relacionadas (alturas {a.height} y {b.height}).")
        return Classification(relation=Relation.UNRELATED, left=a, right=b)
