"""
Script para crear la tabla de posts sin pasar por Alembic.
"""
import asyncio
import sys
from pathlib import Path

from loguru import logger

_API_ROOT = Path(__file__).resolve().parents[1]
if str(_API_ROOT) not in sys.path:
    sys.path.insert(0, str(_API_ROOT))

from post_importer.core.config import settings
from post_importer.infrastructure.database.session import init_db, close_db


async def main():
    """Crea las tablas declaradas en los modelos si no existen."""
    logger.info(f"Inicializando base de datos en {settings.effective_database_url.split('@')[-1]}...")

    try:
        await init_db()
        logger.success("Base de datos inicializada correctamente")
    except Exception as e:
        logger.error(f"Error al inicializar base de datos: {e}")
        raise
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
