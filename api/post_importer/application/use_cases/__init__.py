"""
Casos de uso de la aplicacion.
"""
from .post_import_use_cases import PostImportUseCases
from .post_use_cases import PostUseCases

__all__ = ["PostImportUseCases", "PostUseCases"]
