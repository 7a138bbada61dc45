"""
Excepciones del pipeline de importacion de posts.

Separa los fallos del lado de la fuente externa (502) de los fallos del
lado del almacenamiento (500) para que el cliente pueda distinguirlos.
"""
from typing import Any, Dict, Optional

from post_importer.shared.exceptions.base import AppException


class SourceUnavailableException(AppException):
    """La fuente externa no respondio, excedio el timeout o devolvio un status no-2xx."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=502,
            error_code="SOURCE_UNAVAILABLE",
            details=details
        )


class MalformedSourceDataException(AppException):
    """La respuesta de la fuente no tiene la forma esperada (un arreglo JSON)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=502,
            error_code="MALFORMED_SOURCE_DATA",
            details=details
        )


class ValidationException(AppException):
    """Entrada invalida rechazada antes de llegar al pipeline."""

    def __init__(self, message: str, field: str = None):
        details = {"field": field} if field else None
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details
        )


class PersistenceFailureException(AppException):
    """
    El almacenamiento rechazo una escritura.
    Todas las escrituras de la importacion en curso se revierten.
    """

    def __init__(self, message: str, external_id: Optional[int] = None):
        details = {"external_id": external_id} if external_id is not None else None
        super().__init__(
            message=message,
            status_code=500,
            error_code="PERSISTENCE_FAILURE",
            details=details
        )
