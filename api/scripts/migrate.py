#!/usr/bin/env python
"""
Wrapper de Alembic para las migraciones de la tabla posts.

Uso:
    python scripts/migrate.py upgrade            # Aplica migraciones pendientes
    python scripts/migrate.py upgrade 001        # Aplica hasta una revision
    python scripts/migrate.py downgrade          # Revierte la ultima migracion
    python scripts/migrate.py revision "desc"    # Crea una migracion (autogenerate)
    python scripts/migrate.py current            # Version aplicada
    python scripts/migrate.py history            # Historial
"""
import argparse
import subprocess
from pathlib import Path
from typing import List


# Carpeta donde vive alembic.ini
API_DIR = Path(__file__).resolve().parents[1]


def run_alembic(args: List[str]) -> int:
    """
    Ejecuta alembic con los argumentos dados desde API_DIR.

    Returns:
        Codigo de salida del proceso
    """
    cmd = ["alembic"] + args
    print(f"Ejecutando: {' '.join(cmd)}")
    print("-" * 50)
    return subprocess.run(cmd, cwd=API_DIR).returncode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Migraciones de base de datos del importador de posts"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    up = sub.add_parser("upgrade", help="Aplica migraciones (default: head)")
    up.add_argument("target", nargs="?", default="head")

    down = sub.add_parser("downgrade", help="Revierte migraciones (default: -1)")
    down.add_argument("target", nargs="?", default="-1")

    rev = sub.add_parser("revision", help="Crea una nueva migracion")
    rev.add_argument("message")
    rev.add_argument(
        "--empty",
        action="store_true",
        help="No usar --autogenerate",
    )

    sub.add_parser("current", help="Muestra la version aplicada")
    sub.add_parser("history", help="Muestra el historial de migraciones")
    return parser


def main() -> int:
    args = build_parser().parse_args()

    if args.command in ("upgrade", "downgrade"):
        return run_alembic([args.command, args.target])

    if args.command == "revision":
        alembic_args = ["revision", "-m", args.message]
        if not args.empty:
            alembic_args.append("--autogenerate")
        return run_alembic(alembic_args)

    if args.command == "history":
        return run_alembic(["history", "--verbose"])

    return run_alembic([args.command])


if __name__ == "__main__":
    raise SystemExit(main())
