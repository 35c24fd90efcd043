# cra/core/models/chain.py

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from cra.core.config.protocol_constants import ProtocolConstants
from cra.core.interfaces.i_chain import IChain

logger = logging.getLogger(__name__)

class Chain(IChain):
    """
    Cadena inmutable desde el Origen hasta su último bloque.

    Cada valor es el Origen (altura 0) o un Enlace (cadena previa + id de bloque).
    La altura se deriva de la cadena previa al construir y nunca se modifica.
    Las extensiones guardan una referencia a su predecesora: los forks comparten
    el prefijo común, nada se copia.
    """

    __slots__ = ("_previous", "_block_id", "_height", "_hash")

    _ORIGIN: Optional['Chain'] = None

    def __init__(self, previous: Optional['Chain'] = None, block_id: Optional[int] = None) -> None:
        if previous is None and block_id is None:
            height = ProtocolConstants.ORIGIN_HEIGHT
            chain_hash = hash(("origin",))
        elif previous is not None and block_id is not None:
            if not isinstance(previous, Chain):
                raise ValueError(f"La cadena previa debe ser Chain, se recibió {type(previous).__name__}.")
            Chain._check_block_id(block_id)
            height = previous.height + 1
            chain_hash = hash((hash(previous), block_id))
        else:
            # Un enlace sin predecesora (o sin id) rompería el invariante de altura
            raise ValueError("Un enlace requiere cadena previa e identificador de bloque a la vez.")

        object.__setattr__(self, "_previous", previous)
        object.__setattr__(self, "_block_id", block_id)
        object.__setattr__(self, "_height", height)
        object.__setattr__(self, "_hash", chain_hash)

    # --- Constructores Públicos ---

    @classmethod
    def origin(cls) -> 'Chain':
        if cls._ORIGIN is None:
            cls._ORIGIN = cls()
        return cls._ORIGIN

    def extend(self, block_id: int) -> 'Chain':
        return Chain(self, block_id)

    # --- Propiedades de la Interfaz ---

    @property
    def height(self) -> int:
        return self._height

    @property
    def tip(self) -> Optional[int]:
        return self._block_id

    # --- Getters ---

    @property
    def previous(self) -> Optional['Chain']: return self._previous
    @property
    def block_id(self) -> Optional[int]: return self._block_id
    @property
    def is_origin(self) -> bool: return self._previous is None

    # --- Consultas Estructurales ---

    def block_ids(self) -> Tuple[int, ...]:
        """Identificadores desde el primer bloque hasta la punta."""
        ids = []
        node: Chain = self
        while node._previous is not None:
            ids.append(node._block_id)
            node = node._previous
        ids.reverse()
        return tuple(ids)

    def ancestor_at(self, height: int) -> 'Chain':
        """Prefijo de esta cadena a la altura indicada."""
        if isinstance(height, bool) or not isinstance(height, int):
            raise ValueError(f"La altura debe ser entera, se recibió {type(height).__name__}.")
        if height < ProtocolConstants.ORIGIN_HEIGHT or height > self._height:
            raise ValueError(f"Altura {height} fuera de rango para una cadena de altura {self._height}.")

        node: Chain = self
        while node._height > height:
            node = node._previous  # type: ignore
        return node

    # --- Inmutabilidad ---

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Chain es inmutable: no se puede asignar '{name}'.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Chain es inmutable: no se puede borrar '{name}'.")

    def __copy__(self) -> 'Chain':
        return self

    def __deepcopy__(self, memo: Any) -> 'Chain':
        return self

    def __reduce__(self) -> Any:
        # Se reconstruye desde los ids: no hay estado que asignar
        return (_rebuild_chain, (self.block_ids(),))

    # --- Igualdad Estructural ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chain):
            return NotImplemented
        from cra.core.services.chain_equality import ChainEquality
        return ChainEquality.equal(self, other)

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        if self.is_origin:
            return "Chain(origin)"
        return f"Chain(height={self._height}, tip={self._block_id})"

    # --- Método Privado de Ayuda ---

    @staticmethod
    def _check_block_id(block_id: Any) -> None:
        if isinstance(block_id, bool) or not isinstance(block_id, int):
            raise ValueError(f"El id de bloque debe ser entero, se recibió {type(block_id).__name__}.")
        if block_id < ProtocolConstants.MIN_BLOCK_ID:
            raise ValueError(f"El id de bloque no puede ser negativo: {block_id}.")


def origin() -> Chain:
    return Chain.origin()


def extend(chain: Chain, block_id: int) -> Chain:
    return chain.extend(block_id)


@dataclass(frozen=True)
class AnyChain:
    """
    Par (altura, cadena) para guardar cadenas de alturas distintas juntas.
    La altura declarada debe coincidir con la estructural.
    """
    height: int
    chain: Chain

    def __post_init__(self) -> None:
        if not isinstance(self.chain, Chain):
            raise ValueError(f"AnyChain requiere un Chain, se recibió {type(self.chain).__name__}.")
        if self.height != self.chain.height:
            logger.warning(f"⛔ AnyChain rechazado: altura declarada {self.height} != estructural {self.chain.height}.")
            raise ValueError(
                f"Altura declarada {self.height} no coincide con la altura de la cadena ({self.chain.height})."
            )

    @classmethod
    def wrap(cls, chain: Chain) -> 'AnyChain':
        return cls(height=chain.height, chain=chain)


def _rebuild_chain(block_ids: Tuple[int, ...]) -> Chain:
    from cra.core.builders.chain_builder import ChainBuilder
    return ChainBuilder.from_ids(block_ids)
