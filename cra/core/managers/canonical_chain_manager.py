# cra/core/managers/canonical_chain_manager.py

import logging
import threading
from dataclasses import dataclass
from enum import Enum, unique
from typing import Optional, Tuple

from cra.core.config.comparison_config import ComparisonConfig
from cra.core.config.config_manager import ConfigManager
from cra.core.models.chain import Chain
from cra.core.models.relatedness import Classification, Relation
from cra.core.services.prefix_finder import PrefixFinder
from cra.core.services.relatedness_classifier import RelatednessClassifier

logger = logging.getLogger(__name__)

@unique
class ChainDecision(Enum):
    EXTENDED = "EXTENDED"        # El candidato extiende la canónica (avance rápido)
    REORGANIZED = "REORGANIZED"  # Rama distinta y más alta: se reemplaza
    KEPT = "KEPT"                # Nos quedamos con la canónica actual

@dataclass(frozen=True)
class ChainUpdate:
    decision: ChainDecision
    canonical: Chain
    classification: Classification
    fork_point: Optional[Chain] = None
    orphaned_ids: Tuple[int, ...] = ()
    replayed_ids: Tuple[int, ...] = ()

class CanonicalChainManager:

    def __init__(self, config: Optional[ComparisonConfig] = None, initial: Optional[Chain] = None):
        self._config = config if config is not None else ConfigManager().comparison
        self._canonical: Chain = initial if initial is not None else Chain.origin()
        self._lock = threading.Lock()
        logger.info(f"Gestor de cadena canónica activo. Altura inicial: {self._canonical.height}")

    @property
    def canonical(self) -> Chain:
        with self._lock:
            return self._canonical

    def offer(self, candidate: Chain) -> ChainUpdate:
        with self._lock:
            current = self._canonical
            classification = RelatednessClassifier.classify(candidate, current)

            # 1. El candidato extiende la canónica: avance rápido
            if classification.relation is Relation.DESCENDANT:
                self._canonical = candidate
                logger.info(f"⛓️ Canónica extendida a la altura {candidate.height} (+{classification.prefix.steps} bloques).")  # type: ignore
                return ChainUpdate(
                    decision=ChainDecision.EXTENDED,
                    canonical=candidate,
                    classification=classification,
                    fork_point=current,
                    replayed_ids=classification.links_to_replay
                )

            # 2. Igual o atrasado: nada que hacer
            if classification.relation is not Relation.UNRELATED:
                logger.debug(f"Candidato ignorado ({classification.relation.value}).")
                return ChainUpdate(decision=ChainDecision.KEPT, canonical=current, classification=classification)

            # 3. Fork: regla de la cadena más larga, el primero visto gana los empates
            if candidate.height <= current.height or not self._config.allow_reorg:
                logger.info(f"Fork descartado: candidato de altura {candidate.height} frente a canónica {current.height}.")
                return ChainUpdate(decision=ChainDecision.KEPT, canonical=current, classification=classification)

            return self._reorganize(current, candidate, classification)

    def reset(self, initial: Optional[Chain] = None) -> None:
        with self._lock:
            self._canonical = initial if initial is not None else Chain.origin()
            logger.warning(f"🔄 Cadena canónica reiniciada a la altura {self._canonical.height}.")

    # --- MÉTODOS PRIVADOS ---

    def _reorganize(self, current: Chain, candidate: Chain, classification: Classification) -> ChainUpdate:
        fork_point = PrefixFinder.common_ancestor(current, candidate)
        logger.info(f"🔀 Divergencia en altura #{fork_point.height}. Iniciando reorg...")

        orphaned = PrefixFinder.find_prefix(fork_point, current)
        replayed = PrefixFinder.find_prefix(fork_point, candidate)
        if orphaned is None or replayed is None:
            # El ancestro común siempre es prefijo de ambos lados
            logger.critical("Ancestro común inconsistente durante el reorg.")
            raise RuntimeError("El ancestro común no es prefijo de ambas cadenas.")

        self._canonical = candidate
        logger.info(
            f"✅ Reorg finalizado. {orphaned.steps} bloques huérfanos, {replayed.steps} bloques nuevos."
        )
        return ChainUpdate(
            decision=ChainDecision.REORGANIZED,
            canonical=candidate,
            classification=classification,
            fork_point=fork_point,
            orphaned_ids=orphaned.links,
            replayed_ids=replayed.links
        )
