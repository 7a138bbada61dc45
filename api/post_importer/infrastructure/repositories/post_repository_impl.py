"""
Implementacion del repositorio de posts usando SQLAlchemy.
"""
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from post_importer.domain.repositories.post_repository import IPostRepository
from post_importer.domain.entities.post import StoredPost
from post_importer.infrastructure.database.models import PostModel
from post_importer.shared.utils.datetime_utils import DateTimeUtils


class PostRepositoryImpl(IPostRepository):
    """Implementacion del repositorio de posts con SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """
        Args:
            session: Sesion de SQLAlchemy compartida con el caso de uso
        """
        self.session = session

    async def find_by_external_id(self, external_id: int) -> Optional[StoredPost]:
        """Busca un post por su identificador externo."""
        db_post = await self._get_model_by_external_id(external_id)
        if db_post is None:
            return None
        return self._to_entity(db_post)

    async def insert(self, post: StoredPost) -> StoredPost:
        """Inserta un post nuevo; el flush dispara la restriccion unica."""
        db_post = PostModel(
            external_id=post.external_id,
            author_id=post.author_id,
            title=post.title,
            body=post.body,
            imported_at=post.imported_at
        )

        self.session.add(db_post)
        await self.session.flush()
        await self.session.refresh(db_post)

        return self._to_entity(db_post)

    async def update(self, post: StoredPost) -> StoredPost:
        """Sobrescribe autor, titulo y cuerpo de un post existente."""
        result = await self.session.execute(
            select(PostModel).where(PostModel.id == post.id)
        )
        db_post = result.scalar_one()

        db_post.author_id = post.author_id
        db_post.title = post.title
        db_post.body = post.body

        await self.session.flush()
        await self.session.refresh(db_post)

        return self._to_entity(db_post)

    async def list_all(self) -> List[StoredPost]:
        """Retorna todos los posts en orden de id."""
        result = await self.session.execute(
            select(PostModel).order_by(PostModel.id)
        )
        return [self._to_entity(db_post) for db_post in result.scalars().all()]

    async def _get_model_by_external_id(self, external_id: int) -> Optional[PostModel]:
        result = await self.session.execute(
            select(PostModel).where(PostModel.external_id == external_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(db_post: PostModel) -> StoredPost:
        """
        Convierte un modelo de base de datos a entidad de dominio.

        Args:
            db_post: Modelo de SQLAlchemy

        Returns:
            StoredPost: Entidad de dominio
        """
        return StoredPost(
            id=db_post.id,
            external_id=db_post.external_id,
            author_id=db_post.author_id,
            title=db_post.title,
            body=db_post.body,
            imported_at=DateTimeUtils.ensure_utc(db_post.imported_at)
        )
