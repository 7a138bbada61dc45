"""
Casos de uso expuestos por la API de posts: disparar importacion y listar.
"""
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from post_importer.application.dto.post_dto import ImportResultDTO, StoredPostResponseDTO
from post_importer.application.use_cases.post_import_use_cases import PostImportUseCases
from post_importer.domain.repositories.post_repository import IPostRepository
from post_importer.infrastructure.external.posts_source import PostsSourceClient
from post_importer.infrastructure.repositories.post_repository_impl import PostRepositoryImpl
from post_importer.shared.constants.post_constants import KEYWORD_MAX_LENGTH
from post_importer.shared.exceptions.domain import ValidationException


class PostUseCases:
    """
    Capa delgada sobre el pipeline y el repositorio.
    No mantiene estado entre llamadas.
    """

    def __init__(
        self,
        db: AsyncSession,
        source_client: PostsSourceClient,
        post_repository: Optional[IPostRepository] = None
    ):
        self.post_repository = post_repository or PostRepositoryImpl(db)
        self.import_use_cases = PostImportUseCases(db, source_client, self.post_repository)

    async def trigger_import(self, keyword: Optional[str] = None) -> ImportResultDTO:
        """
        Ejecuta una importacion y retorna la cantidad de posts procesados.

        Raises:
            ValidationException: Si la palabra clave excede el largo permitido
        """
        if keyword is not None and len(keyword) > KEYWORD_MAX_LENGTH:
            raise ValidationException(
                f"La palabra clave no puede exceder {KEYWORD_MAX_LENGTH} caracteres",
                field="keyword"
            )

        imported = await self.import_use_cases.import_filtered(keyword)
        return ImportResultDTO(imported_count=len(imported))

    async def list_stored(self) -> List[StoredPostResponseDTO]:
        """Retorna todos los posts almacenados, sin filtro ni paginacion."""
        posts = await self.post_repository.list_all()
        return [StoredPostResponseDTO.from_entity(post) for post in posts]
