"""Helpers de logging para a API SparkPost (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import SparkPostApiError

logger = logging.getLogger(__name__)


def log_api_error(
    errors: tuple[SparkPostApiError, ...],
    method: str,
    path: str,
    status_code: int,
) -> None:
    """Loga resposta de erro da API sem expor dados sensíveis."""
    logger.warning(
        "sparkpost_api_error",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "error_codes": [error.code for error in errors],
        },
    )


def log_transport_failure(method: str, path: str, reason: str) -> None:
    logger.warning(
        "sparkpost_transport_failure",
        extra={"method": method, "path": path, "reason": reason},
    )


def log_success(method: str, path: str, status_code: int) -> None:
    logger.debug(
        "sparkpost_request_ok",
        extra={"method": method, "path": path, "status_code": status_code},
    )
