# cra/core/interfaces/i_chain.py

from abc import ABC, abstractmethod
from typing import Optional

class IChain(ABC):
    """
    Contrato base para cualquier estructura de cadena.
    
    Permite que los servicios de comparación y el gestor canónico trabajen
    con la cadena sin importar cómo esté representada internamente.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def height(self) -> int:
        """
        Retorna la altura de la cadena (cantidad de enlaces hasta el Origen).
        Utilizado para decidir qué lado recorrer al comparar dos cadenas.
        """
        pass

    @property
    @abstractmethod
    def tip(self) -> Optional[int]:
        """
        Retorna el identificador del último bloque.
        El Origen no tiene identificador y devuelve None.
        """
        pass
