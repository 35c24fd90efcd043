# cra/interface/api/server.py

import logging
from typing import Any, Dict

# --- Framework Imports ---
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

# --- Project Imports ---
from cra.interface.api import schemas
from cra.interface.api.dependencies import ManagerContainer, get_manager_dependency
from cra.interface.api.config import settings
from cra.core.config.protocol_constants import ProtocolConstants
from cra.core.managers.canonical_chain_manager import CanonicalChainManager
from cra.core.models.chain import Chain
from cra.core.services.chain_equality import ChainEquality
from cra.core.services.prefix_finder import PrefixFinder
from cra.core.services.relatedness_classifier import RelatednessClassifier
from cra.core.utils.chain_mapper import ChainMapper

logger = logging.getLogger(__name__)

# ==============================================================================
# 🏗️ SERVICE LAYER
# ==============================================================================

class ChainComparisonService:
    def __init__(self, manager: CanonicalChainManager):
        self.manager = manager

    def get_status(self) -> schemas.ServiceStatusResponse:
        return schemas.ServiceStatusResponse(
            service=settings.title,
            version=settings.version,
            protocol_version=ProtocolConstants.PROTOCOL_VERSION,
            canonical_height=self.manager.canonical.height
        )

    def equal(self, req: schemas.ChainPairRequest) -> schemas.EqualityResponse:
        left = self._to_chain(req.left)
        right = self._to_chain(req.right)

        proof = ChainEquality.prove(left, right)
        if proof is None:
            return schemas.EqualityResponse(equal=False)
        return schemas.EqualityResponse(equal=True, height=ChainEquality.same_height(proof))

    def find_prefix(self, req: schemas.PrefixRequest) -> schemas.PrefixResponse:
        ancestor = self._to_chain(req.ancestor)
        descendant = self._to_chain(req.descendant)

        witness = PrefixFinder.find_prefix(ancestor, descendant)
        if witness is None:
            return schemas.PrefixResponse(found=False)
        return schemas.PrefixResponse(found=True, steps=witness.steps, links=list(witness.links))

    def classify(self, req: schemas.ChainPairRequest) -> schemas.ClassificationResponse:
        left = self._to_chain(req.left)
        right = self._to_chain(req.right)

        result = RelatednessClassifier.classify(left, right)
        ancestor = result.ancestor
        fork = PrefixFinder.common_ancestor(left, right)

        return schemas.ClassificationResponse(
            relation=result.relation.value,
            links_to_replay=list(result.links_to_replay),
            ancestor_height=ancestor.height if ancestor is not None else None,
            common_ancestor_height=fork.height
        )

    def get_canonical(self) -> schemas.ChainResponse:
        return schemas.ChainResponse(**ChainMapper.to_dict(self.manager.canonical))

    def offer(self, req: schemas.OfferRequest) -> schemas.OfferResponse:
        candidate = self._to_chain(req.chain)
        update = self.manager.offer(candidate)

        return schemas.OfferResponse(
            decision=update.decision.value,
            relation=update.classification.relation.value,
            canonical=schemas.ChainResponse(**ChainMapper.to_dict(update.canonical)),
            fork_height=update.fork_point.height if update.fork_point is not None else None,
            orphaned_ids=list(update.orphaned_ids),
            replayed_ids=list(update.replayed_ids)
        )

    # --- Conversión de Cable a Dominio ---

    @staticmethod
    def _to_chain(payload: schemas.ChainPayload) -> Chain:
        data: Dict[str, Any] = payload.model_dump()
        try:
            return ChainMapper.reconstruct(data, max_height=settings.max_chain_height).chain
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("⛓️ [BOOT] Iniciando API de relaciones de cadenas...")
    ManagerContainer.set_instance(CanonicalChainManager())
    try:
        yield
    finally:
        logger.info("🛑 Apagando API...")
        ManagerContainer.shutdown()

app = FastAPI(title=settings.title, version=settings.version, lifespan=lifespan)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

def get_comparison_service(manager: CanonicalChainManager = Depends(get_manager_dependency)) -> ChainComparisonService:
    return ChainComparisonService(manager)

@app.get("/status", response_model=schemas.ServiceStatusResponse, tags=["Sistema"])
def get_status(service: ChainComparisonService = Depends(get_comparison_service)):
    return service.get_status()

@app.post("/chains/equal", response_model=schemas.EqualityResponse, tags=["Comparación"])
def chains_equal(req: schemas.ChainPairRequest, service: ChainComparisonService = Depends(get_comparison_service)):
    return service.equal(req)

@app.post("/chains/prefix", response_model=schemas.PrefixResponse, tags=["Comparación"])
def chains_prefix(req: schemas.PrefixRequest, service: ChainComparisonService = Depends(get_comparison_service)):
    return service.find_prefix(req)

@app.post("/chains/classify", response_model=schemas.ClassificationResponse, tags=["Comparación"])
def chains_classify(req: schemas.ChainPairRequest, service: ChainComparisonService = Depends(get_comparison_service)):
    return service.classify(req)

@app.get("/canonical", response_model=schemas.ChainResponse, tags=["Canónica"])
def get_canonical(service: ChainComparisonService = Depends(get_comparison_service)):
    return service.get_canonical()

@app.post("/canonical/offer", response_model=schemas.OfferResponse, tags=["Canónica"])
def offer_chain(req: schemas.OfferRequest, service: ChainComparisonService = Depends(get_comparison_service)):
    return service.offer(req)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
