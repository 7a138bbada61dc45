"""
Pipeline de importacion: fuente externa -> filtro -> mapeo -> UPSERT.

Diseno (resumen):
- Descarga la coleccion completa (una sola llamada, sin reintentos)
- Filtra por palabra clave en el titulo, preservando el orden de la fuente
- Mapea cada RemotePost a StoredPost (validando longitudes)
- UPSERT por external_id con llamadas explicitas find -> update | insert
- Una sola transaccion por llamada: o se confirman todos los UPSERT o ninguno

Carrera entre importaciones concurrentes:
- Cada insert corre dentro de un SAVEPOINT. Si el indice unico de
  external_id lo rechaza (otra importacion inserto primero), se vuelve al
  SAVEPOINT, se relee la fila y se actualiza (read-repair).
"""
from dataclasses import dataclass
from typing import List, Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from post_importer.application.services.post_filter import filter_by_keyword
from post_importer.domain.entities.post import StoredPost
from post_importer.domain.repositories.post_repository import IPostRepository
from post_importer.infrastructure.external.posts_source import PostsSourceClient
from post_importer.infrastructure.repositories.post_repository_impl import PostRepositoryImpl
from post_importer.shared.exceptions.domain import PersistenceFailureException
from post_importer.shared.utils.datetime_utils import DateTimeUtils


@dataclass
class _ImportStats:
    inserted: int = 0
    updated: int = 0
    repaired: int = 0


class PostImportUseCases:
    """
    Caso de uso del pipeline de importacion.

    Es dueno de la transaccion: hace commit al terminar y rollback ante
    cualquier fallo durante el mapeo o la persistencia.
    """

    def __init__(
        self,
        db: AsyncSession,
        source_client: PostsSourceClient,
        post_repository: Optional[IPostRepository] = None
    ):
        """
        Args:
            db: Sesion de base de datos (la misma que usa el repositorio)
            source_client: Cliente de la fuente externa de posts
            post_repository: Repositorio de posts; por defecto el de SQLAlchemy
        """
        self.db = db
        self.source_client = source_client
        self.post_repository = post_repository or PostRepositoryImpl(db)

    async def import_filtered(self, keyword: Optional[str]) -> List[StoredPost]:
        """
        Importa los posts de la fuente cuyo titulo contiene la palabra clave.

        Args:
            keyword: Palabra clave (None o "" importa todos)

        Returns:
            List[StoredPost]: Posts insertados o actualizados, en el orden filtrado

        Raises:
            SourceUnavailableException: La fuente no respondio (sin escrituras)
            MalformedSourceDataException: La fuente no devolvio un arreglo (sin escrituras)
            PersistenceFailureException: El almacenamiento rechazo una escritura (rollback total)
        """
        fetched = await self.source_client.fetch_all()
        if not fetched.posts:
            logger.info("La fuente no devolvio posts. Nada que importar.")
            return []

        selected = filter_by_keyword(fetched.posts, keyword)
        logger.info(
            f"Importacion keyword='{keyword or ''}': {len(selected)} de {len(fetched.posts)} posts pasan el filtro"
        )
        if not selected:
            return []

        stats = _ImportStats()
        current_external_id: Optional[int] = None
        results: List[StoredPost] = []

        try:
            drafts = []
            for remote in selected:
                current_external_id = remote.external_id
                drafts.append(StoredPost.from_remote(remote))

            for draft in drafts:
                current_external_id = draft.external_id
                results.append(await self._upsert(draft, stats))

            await self.db.commit()
        except (SQLAlchemyError, ValueError) as e:
            await self.db.rollback()
            logger.error(f"Importacion revertida en external_id={current_external_id}: {e}")
            raise PersistenceFailureException(
                f"El almacenamiento rechazo el post {current_external_id}: {e}",
                external_id=current_external_id
            ) from e
        except Exception:
            await self.db.rollback()
            logger.exception(f"Importacion revertida en external_id={current_external_id}")
            raise

        logger.info(
            f"Importacion completada. insertados={stats.inserted}, "
            f"actualizados={stats.updated}, read_repair={stats.repaired}"
        )
        return results

    async def _upsert(self, draft: StoredPost, stats: _ImportStats) -> StoredPost:
        """Actualiza el post si ya existe; si no, lo inserta con imported_at = ahora."""
        existing = await self.post_repository.find_by_external_id(draft.external_id)
        if existing is not None:
            stats.updated += 1
            return await self._overwrite(existing, draft)

        draft.imported_at = DateTimeUtils.now_utc()
        try:
            async with self.db.begin_nested():
                created = await self.post_repository.insert(draft)
        except IntegrityError as e:
            return await self._read_repair(draft, stats, e)

        stats.inserted += 1
        return created

    async def _read_repair(
        self,
        draft: StoredPost,
        stats: _ImportStats,
        error: IntegrityError
    ) -> StoredPost:
        """
        Resuelve un insert rechazado por el indice unico releyendo la fila.

        Si la fila no existe, la violacion no era de external_id y se
        propaga como PersistenceFailureException.
        """
        existing = await self.post_repository.find_by_external_id(draft.external_id)
        if existing is None:
            raise PersistenceFailureException(
                f"Insert del post {draft.external_id} rechazado por el almacenamiento",
                external_id=draft.external_id
            ) from error

        logger.warning(
            f"Conflicto de insert en external_id={draft.external_id}: "
            f"otra importacion lo creo primero, se actualiza la fila {existing.id}"
        )
        stats.repaired += 1
        stats.updated += 1
        return await self._overwrite(existing, draft)

    async def _overwrite(self, existing: StoredPost, draft: StoredPost) -> StoredPost:
        existing.overwrite_content(draft)
        return await self.post_repository.update(existing)
