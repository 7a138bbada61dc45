"""
Configuracion de base de datos.

Importa los modelos para que se registren con Base
antes de crear las tablas.
"""
from post_importer.infrastructure.database.models import PostModel

__all__ = ["PostModel"]
