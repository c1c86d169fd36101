"""Resultado de uma chamada ao Endpoint.

Toda chamada termina em exatamente um dos dois:
- ClassifiedResponse: houve resposta HTTP com JSON (qualquer status)
- TransportFailure: a chamada não produziu resposta utilizável
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from sparkpost_connector.endpoint.api_errors import SparkPostApiError


@dataclass(frozen=True)
class ClassifiedResponse:
    """Resposta normalizada {status_code, results} da API.

    Attributes:
        status_code: Status HTTP
        results: Valor da chave `results` (objeto, lista ou None)
        errors: Erros da chave `errors` (vazio em caso de sucesso)
    """

    status_code: int
    results: Any = None
    errors: tuple[SparkPostApiError, ...] = ()

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class TransportFailure:
    """Falha de transporte (conexão, timeout, JSON inválido).

    Attributes:
        reason: timeout, connection_error, http_error ou invalid_json
        error: Exceção original, quando houver
        method: Verbo HTTP da chamada
        path: Path relativo da chamada
    """

    reason: str
    error: BaseException | None = None
    method: str | None = None
    path: str | None = None


EndpointResult: TypeAlias = ClassifiedResponse | TransportFailure
