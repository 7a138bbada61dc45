"""
Entidades de dominio: RemotePost (transitorio) y StoredPost (persistido).
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from post_importer.shared.constants.post_constants import BODY_MAX_LENGTH, TITLE_MAX_LENGTH


@dataclass(frozen=True)
class RemotePost:
    """
    Post tal como lo entrega la fuente externa.

    Solo external_id es obligatorio; el resto de campos se toleran como None
    cuando vienen ausentes o con un tipo inesperado.
    """

    external_id: int
    author_id: Optional[int] = None
    title: Optional[str] = None
    body: Optional[str] = None


@dataclass
class StoredPost:
    """
    Post persistido, identificado de forma natural por external_id.

    id e imported_at los asigna el almacenamiento en el primer insert y
    no cambian en reimportaciones posteriores.
    """

    external_id: int
    author_id: Optional[int] = None
    title: Optional[str] = None
    body: Optional[str] = None
    id: Optional[int] = None
    imported_at: Optional[datetime] = None

    def __post_init__(self):
        """Valida los limites de longitud de las columnas."""
        if self.title is not None and len(self.title) > TITLE_MAX_LENGTH:
            raise ValueError(
                f"El titulo del post {self.external_id} excede {TITLE_MAX_LENGTH} caracteres"
            )
        if self.body is not None and len(self.body) > BODY_MAX_LENGTH:
            raise ValueError(
                f"El cuerpo del post {self.external_id} excede {BODY_MAX_LENGTH} caracteres"
            )

    @classmethod
    def from_remote(cls, remote: RemotePost) -> "StoredPost":
        """Proyecta un RemotePost a la forma persistible (sin imported_at)."""
        return cls(
            external_id=remote.external_id,
            author_id=remote.author_id,
            title=remote.title,
            body=remote.body,
        )

    def overwrite_content(self, source: "StoredPost") -> None:
        """
        Sobrescribe autor, titulo y cuerpo con los de otra version del mismo post.
        id e imported_at se conservan.
        """
        self.author_id = source.author_id
        self.title = source.title
        self.body = source.body
