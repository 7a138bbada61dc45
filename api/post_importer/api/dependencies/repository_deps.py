"""
Dependencias para inyeccion de repositorios y clientes externos.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from post_importer.infrastructure.database.session import get_db
from post_importer.infrastructure.external.posts_source import PostsSourceClient
from post_importer.infrastructure.repositories.post_repository_impl import PostRepositoryImpl


async def get_post_repository(
    session: AsyncSession = Depends(get_db)
) -> PostRepositoryImpl:
    """
    Dependencia para obtener el repositorio de posts.

    Args:
        session: Sesion de base de datos

    Returns:
        PostRepositoryImpl: Instancia del repositorio de posts
    """
    return PostRepositoryImpl(session)


def get_posts_source_client() -> PostsSourceClient:
    """Cliente de la fuente de posts configurado desde settings."""
    return PostsSourceClient()
