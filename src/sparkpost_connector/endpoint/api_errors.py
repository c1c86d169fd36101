"""Erros e helpers de parsing para a API SparkPost."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SparkPostApiError:
    """Erro retornado pela API no array `errors`."""

    message: str
    code: str | None = None
    description: str | None = None


def parse_api_errors(response_data: Any) -> tuple[SparkPostApiError, ...]:
    """Extrai os erros de um payload `{"errors": [...]}`.

    Args:
        response_data: JSON decodificado da resposta

    Returns:
        Tupla de SparkPostApiError (vazia se não houver erros)
    """
    if not isinstance(response_data, dict):
        return ()

    raw_errors = response_data.get("errors")
    if isinstance(raw_errors, dict):
        raw_errors = [raw_errors]
    if not isinstance(raw_errors, list):
        return ()

    parsed: list[SparkPostApiError] = []
    for item in raw_errors:
        if not isinstance(item, dict):
            continue
        code = item.get("code")
        parsed.append(
            SparkPostApiError(
                message=str(item.get("message", "Erro desconhecido")),
                code=str(code) if code is not None else None,
                description=item.get("description"),
            )
        )
    return tuple(parsed)
