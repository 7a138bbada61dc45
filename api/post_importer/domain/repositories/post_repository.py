"""
Interfaz del repositorio de posts.
Define el contrato minimo que usa el pipeline de importacion.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from post_importer.domain.entities.post import StoredPost


class IPostRepository(ABC):
    """
    Interfaz del repositorio de posts.

    El repositorio no hace commit: la demarcacion de la transaccion
    pertenece al caso de uso.
    """

    @abstractmethod
    async def find_by_external_id(self, external_id: int) -> Optional[StoredPost]:
        """
        Busca un post por su identificador externo.

        Args:
            external_id: Identificador asignado por la fuente

        Returns:
            Optional[StoredPost]: Post encontrado o None
        """
        pass

    @abstractmethod
    async def insert(self, post: StoredPost) -> StoredPost:
        """
        Inserta un post nuevo.

        Args:
            post: Post sin id, con imported_at ya asignado

        Returns:
            StoredPost: Post con el id asignado por el almacenamiento

        Raises:
            sqlalchemy.exc.IntegrityError: Si external_id ya existe
        """
        pass

    @abstractmethod
    async def update(self, post: StoredPost) -> StoredPost:
        """
        Sobrescribe autor, titulo y cuerpo de un post existente (por id).
        imported_at no se modifica.
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[StoredPost]:
        """Retorna todos los posts ordenados por id."""
        pass
