"""
CLI: importa posts de la fuente externa a la base de datos.

Corre el mismo pipeline que POST /api/posts/import, pensado para
ejecutarse como job (cron/systemd timer) sin pasar por el API.

Ejecucion:
  python scripts/import_posts.py
  python scripts/import_posts.py --keyword qui
  python scripts/import_posts.py --keyword qui --base-url http://localhost:3000 --timeout-ms 2000

Codigos de salida:
  0  importacion confirmada (se imprime la cantidad de posts)
  1  la importacion fallo y no se escribio nada
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

# Permite ejecutar este script desde cualquier cwd sin configurar PYTHONPATH.
_API_ROOT = Path(__file__).resolve().parents[1]
if str(_API_ROOT) not in sys.path:
    sys.path.insert(0, str(_API_ROOT))

load_dotenv(_API_ROOT / ".env", override=False)

from post_importer.application.use_cases.post_import_use_cases import PostImportUseCases
from post_importer.infrastructure.database.session import AsyncSessionLocal, close_db, init_db
from post_importer.infrastructure.external.posts_source import PostsSourceClient
from post_importer.shared.constants.post_constants import KEYWORD_MAX_LENGTH
from post_importer.shared.exceptions.base import AppException


def _keyword(value: str) -> str:
    if len(value) > KEYWORD_MAX_LENGTH:
        raise argparse.ArgumentTypeError(
            f"la palabra clave admite como maximo {KEYWORD_MAX_LENGTH} caracteres"
        )
    return value


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("debe ser un entero positivo")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Importa posts filtrados por palabra clave")
    parser.add_argument(
        "--keyword",
        type=_keyword,
        default=None,
        help="Palabra clave a buscar en el titulo (vacio importa todos).",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="URL base de la fuente (default: POSTS_SOURCE_BASE_URL).",
    )
    parser.add_argument(
        "--timeout-ms",
        type=_positive_int,
        default=None,
        help="Timeout de la descarga en milisegundos (default: POSTS_SOURCE_TIMEOUT_MS).",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Crea la tabla posts antes de importar (sin Alembic).",
    )
    return parser


async def run_import(
    keyword: Optional[str],
    base_url: Optional[str],
    timeout_ms: Optional[int],
    create_tables: bool = False,
) -> int:
    """Ejecuta una importacion y retorna la cantidad de posts escritos."""
    client = PostsSourceClient(base_url=base_url, timeout_ms=timeout_ms)
    try:
        if create_tables:
            await init_db()
        async with AsyncSessionLocal() as session:
            imported = await PostImportUseCases(session, client).import_filtered(keyword)
    finally:
        await close_db()
    return len(imported)


def main() -> int:
    args = build_parser().parse_args()

    logger.info("Iniciando importacion de posts...")
    try:
        count = asyncio.run(
            run_import(args.keyword, args.base_url, args.timeout_ms, args.create_tables)
        )
    except AppException as e:
        logger.error(f"Importacion fallida [{e.error_code}]: {e.message}")
        return 1

    logger.success(f"Importacion OK: {count} posts")
    print(count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
