"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .post_dto import ImportResultDTO, StoredPostResponseDTO

__all__ = [
    "ImportResultDTO",
    "StoredPostResponseDTO",
]
