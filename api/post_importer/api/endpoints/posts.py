"""
Endpoints para importar y consultar posts.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from post_importer.application.use_cases.post_use_cases import PostUseCases
from post_importer.application.dto.post_dto import ImportResultDTO, StoredPostResponseDTO
from post_importer.api.dependencies.use_case_deps import get_post_use_cases
from post_importer.shared.constants.post_constants import KEYWORD_MAX_LENGTH


router = APIRouter(prefix="/posts", tags=["Posts"])


@router.post(
    "/import",
    response_model=ImportResultDTO,
    summary="Importar posts de la fuente externa"
)
async def trigger_import(
    keyword: Optional[str] = Query(
        default=None,
        max_length=KEYWORD_MAX_LENGTH,
        description="Filtra por titulo (sin distinguir mayusculas); vacio importa todos"
    ),
    use_cases: PostUseCases = Depends(get_post_use_cases)
) -> ImportResultDTO:
    """
    Descarga los posts de la fuente, filtra por palabra clave y hace
    UPSERT por external_id.

    Args:
        keyword: Palabra clave opcional (maximo 100 caracteres)
        use_cases: Casos de uso de posts (inyectado)

    Returns:
        ImportResultDTO: Cantidad de posts insertados o actualizados
    """
    return await use_cases.trigger_import(keyword)


@router.get(
    "",
    response_model=List[StoredPostResponseDTO],
    summary="Listar posts almacenados"
)
async def list_stored(
    use_cases: PostUseCases = Depends(get_post_use_cases)
) -> List[StoredPostResponseDTO]:
    """Lista todos los posts almacenados en orden de id."""
    return await use_cases.list_stored()
