"""
Modelos de base de datos (ORM).
"""
from sqlalchemy import BigInteger, Column, String, Integer, DateTime

from post_importer.infrastructure.database.session import Base
from post_importer.shared.constants.post_constants import BODY_MAX_LENGTH, TITLE_MAX_LENGTH


class PostModel(Base):
    """
    Modelo de base de datos para posts importados.

    external_id es la clave natural de deduplicacion y tiene un indice
    unico; id es la clave subrogada asignada en el insert.
    """

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    external_id = Column(BigInteger, nullable=False, unique=True, index=True)
    author_id = Column(BigInteger, nullable=True)
    title = Column(String(TITLE_MAX_LENGTH), nullable=True)
    body = Column(String(BODY_MAX_LENGTH), nullable=True)
    imported_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Post(id={self.id}, external_id={self.external_id}, title={self.title})>"
