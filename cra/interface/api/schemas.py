# cra/interface/api/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

class ImmutableModel(BaseModel):
    """
    Clase base que fuerza la inmutabilidad (frozen=True).
    Garantiza que el estado del objeto no sea modificado después de crearse.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='ignore'
    )

# --- CADENAS EN EL CABLE ---

class ChainPayload(ImmutableModel):
    block_ids: List[int] = Field(default_factory=list, description="Ids desde el primer bloque hasta la punta")
    height: Optional[int] = Field(None, ge=0, description="Altura declarada (opcional, debe coincidir)")

class ChainResponse(ImmutableModel):
    height: int
    block_ids: List[int]

# --- COMPARACIONES ---

class ChainPairRequest(ImmutableModel):
    left: ChainPayload
    right: ChainPayload

class PrefixRequest(ImmutableModel):
    ancestor: ChainPayload
    descendant: ChainPayload

class EqualityResponse(ImmutableModel):
    equal: bool
    height: Optional[int] = Field(None, description="Altura común si son iguales")

class PrefixResponse(ImmutableModel):
    found: bool
    steps: Optional[int] = None
    links: List[int] = Field(default_factory=list)

class ClassificationResponse(ImmutableModel):
    relation: str
    links_to_replay: List[int]
    ancestor_height: Optional[int] = None
    common_ancestor_height: int

# --- CADENA CANÓNICA ---

class OfferRequest(ImmutableModel):
    chain: ChainPayload

class OfferResponse(ImmutableModel):
    decision: str
    relation: str
    canonical: ChainResponse
    fork_height: Optional[int] = None
    orphaned_ids: List[int]
    replayed_ids: List[int]

class ServiceStatusResponse(ImmutableModel):
    service: str
    version: str
    protocol_version: int
    canonical_height: int
