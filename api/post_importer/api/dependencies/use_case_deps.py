"""
Dependencias para inyeccion de casos de uso.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from post_importer.application.use_cases.post_use_cases import PostUseCases
from post_importer.domain.repositories.post_repository import IPostRepository
from post_importer.api.dependencies.repository_deps import (
    get_post_repository,
    get_posts_source_client,
)
from post_importer.infrastructure.database.session import get_db
from post_importer.infrastructure.external.posts_source import PostsSourceClient


async def get_post_use_cases(
    db: AsyncSession = Depends(get_db),
    post_repository: IPostRepository = Depends(get_post_repository),
    source_client: PostsSourceClient = Depends(get_posts_source_client)
) -> PostUseCases:
    """
    Dependencia para obtener los casos de uso de posts.

    FastAPI reutiliza la misma sesion de get_db dentro del request, de modo
    que repositorio y pipeline comparten una sola transaccion.

    Args:
        db: Sesion de base de datos
        post_repository: Repositorio de posts
        source_client: Cliente de la fuente externa

    Returns:
        PostUseCases: Instancia de casos de uso de posts
    """
    return PostUseCases(db, source_client, post_repository)
