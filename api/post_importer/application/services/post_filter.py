"""
Filtro por palabra clave sobre el titulo de los posts.

Logica pura (sin I/O): normaliza la palabra clave y conserva los posts
cuyo titulo la contiene sin distinguir mayusculas. El orden de entrada
se preserva.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from post_importer.domain.entities.post import RemotePost


def normalize_keyword(keyword: Optional[str]) -> str:
    """None se trata como cadena vacia; el resto se pasa a minusculas (sin trim)."""
    return (keyword or "").lower()


def title_matches(title: Optional[str], normalized_keyword: str) -> bool:
    """
    True si la palabra clave (ya normalizada) esta vacia, o si el titulo
    existe y la contiene como subcadena.
    """
    if not normalized_keyword:
        return True
    if title is None:
        return False
    return normalized_keyword in title.lower()


def filter_by_keyword(posts: Iterable[RemotePost], keyword: Optional[str]) -> List[RemotePost]:
    """
    Filtra posts por palabra clave.

    Args:
        posts: Posts en el orden entregado por la fuente
        keyword: Palabra clave; None o "" conserva todos

    Returns:
        List[RemotePost]: Posts que pasan el filtro, en el mismo orden
    """
    normalized = normalize_keyword(keyword)
    return [post for post in posts if title_matches(post.title, normalized)]
