"""
Servicios de aplicacion.

Contiene la logica reutilizable que no pertenece
a un caso de uso especifico.
"""
from post_importer.application.services.post_filter import (
    filter_by_keyword,
    normalize_keyword,
    title_matches,
)

__all__ = [
    "filter_by_keyword",
    "normalize_keyword",
    "title_matches",
]
