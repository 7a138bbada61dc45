"""
Cliente HTTP de la fuente externa de posts.

Contrato consumido:
- GET {base_url}/posts -> [{"userId": int, "id": int, "title": str, "body": str}, ...]

Requisitos cubiertos:
- httpx async con un unico timeout configurable (milisegundos) que acota
  la llamada completa, no solo cada fase de la conexion
- sin reintentos: timeout, error de red o status no-2xx -> SourceUnavailableException
- registros malformados (sin id entero) se descartan con un warning
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from loguru import logger

from post_importer.core.config import settings
from post_importer.domain.entities.post import RemotePost
from post_importer.shared.constants.post_constants import POSTS_SOURCE_PATH
from post_importer.shared.exceptions.domain import (
    MalformedSourceDataException,
    SourceUnavailableException,
)


@dataclass(frozen=True)
class FetchResult:
    """Posts validos recibidos y cantidad de registros descartados."""

    posts: list[RemotePost]
    skipped: int = 0


def _optional_int(value: Any) -> Optional[int]:
    # bool es subclase de int; no es un identificador valido
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def parse_remote_post(raw: Any) -> Optional[RemotePost]:
    """
    Convierte un objeto JSON de la fuente en RemotePost.

    Retorna None si el registro no es un objeto o no trae un id entero.
    Los demas campos ausentes o con tipo inesperado quedan en None.
    """
    if not isinstance(raw, dict):
        return None

    external_id = _optional_int(raw.get("id"))
    if external_id is None:
        return None

    return RemotePost(
        external_id=external_id,
        author_id=_optional_int(raw.get("userId")),
        title=_optional_str(raw.get("title")),
        body=_optional_str(raw.get("body")),
    )


class PostsSourceClient:
    """
    Cliente de la fuente de posts.

    Expone una sola operacion, fetch_all, que desde el punto de vista del
    caller es una llamada que espera hasta terminar o fallar.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = (base_url or settings.POSTS_SOURCE_BASE_URL).rstrip("/")
        if timeout_ms is None:
            timeout_ms = settings.POSTS_SOURCE_TIMEOUT_MS
        if timeout_ms <= 0:
            raise ValueError(f"timeout_ms debe ser positivo, se recibio {timeout_ms}")
        self._timeout_ms = timeout_ms
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    async def fetch_all(self) -> FetchResult:
        """
        Descarga la coleccion completa de posts.

        Returns:
            FetchResult: Posts validos en el orden entregado por la fuente

        Raises:
            SourceUnavailableException: Error de red, timeout o status no-2xx
            MalformedSourceDataException: El cuerpo no es un arreglo JSON
        """
        payload = await self._get_json(POSTS_SOURCE_PATH)

        if not isinstance(payload, list):
            raise MalformedSourceDataException(
                "La fuente de posts no devolvio un arreglo JSON",
                details={"type": type(payload).__name__},
            )

        posts: list[RemotePost] = []
        skipped = 0
        for index, raw in enumerate(payload):
            post = parse_remote_post(raw)
            if post is None:
                skipped += 1
                logger.warning(f"Registro {index} de la fuente descartado: falta un 'id' entero")
                continue
            posts.append(post)

        logger.info(f"Fuente de posts: {len(payload)} registros recibidos, {skipped} descartados")
        return FetchResult(posts=posts, skipped=skipped)

    async def _request(self, url: str, timeout: float) -> httpx.Response:
        async with httpx.AsyncClient(timeout=httpx.Timeout(timeout), transport=self._transport) as client:
            return await client.get(url, headers={"Accept": "application/json"})

    async def _get_json(self, path: str) -> Any:
        """
        GET sin reintentos.

        - Timeout o error de red: SourceUnavailableException
        - 4xx/5xx: SourceUnavailableException con el status en details
        - Cuerpo no-JSON: MalformedSourceDataException
        """
        url = f"{self._base_url}{path}"
        deadline = self._timeout_ms / 1000

        try:
            # httpx.Timeout acota cada fase; wait_for acota la llamada entera
            resp = await asyncio.wait_for(self._request(url, deadline), timeout=deadline)
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise SourceUnavailableException(
                f"Timeout de {self._timeout_ms} ms consultando la fuente de posts",
                details={"url": url, "reason": "timeout"},
            ) from e
        except httpx.HTTPError as e:
            raise SourceUnavailableException(
                f"No se pudo contactar la fuente de posts: {e}",
                details={"url": url, "reason": "network"},
            ) from e

        if not (200 <= resp.status_code < 300):
            # Evita volcar cuerpos enormes; solo un fragmento.
            raise SourceUnavailableException(
                f"La fuente de posts respondio {resp.status_code}",
                details={"url": url, "status_code": resp.status_code, "body": resp.text[:500]},
            )

        try:
            return resp.json()
        except ValueError as e:
            raise MalformedSourceDataException(
                "La fuente de posts devolvio un cuerpo que no es JSON",
                details={"url": url},
            ) from e
