"""
DTOs relacionados con posts.

Los nombres JSON siguen el contrato publico (camelCase); en Python se
usan nombres snake_case gracias a populate_by_name.
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from post_importer.domain.entities.post import StoredPost


class ImportResultDTO(BaseModel):
    """DTO de respuesta de una importacion."""

    imported_count: int = Field(..., ge=0, alias="importedCount", description="Posts insertados o actualizados")

    class Config:
        """Configuracion de Pydantic."""
        populate_by_name = True


class StoredPostResponseDTO(BaseModel):
    """DTO de respuesta para un post almacenado."""

    id: int
    external_id: int = Field(..., alias="externalId")
    author_id: Optional[int] = Field(None, alias="userId")
    title: Optional[str] = None
    body: Optional[str] = None
    imported_at: datetime = Field(..., alias="importedAt")

    class Config:
        """Configuracion de Pydantic."""
        populate_by_name = True
        from_attributes = True

    @classmethod
    def from_entity(cls, post: StoredPost) -> "StoredPostResponseDTO":
        return cls(
            id=post.id,
            external_id=post.external_id,
            author_id=post.author_id,
            title=post.title,
            body=post.body,
            imported_at=post.imported_at,
        )
