"""
Entidades del dominio.
"""
from post_importer.domain.entities.post import RemotePost, StoredPost

__all__ = [
    "RemotePost",
    "StoredPost",
]
