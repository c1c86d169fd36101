"""Endpoint SparkPost: ponto único de IO com a API.

Responsabilidades:
- Montar URL a partir da base configurada
- Anexar headers obrigatórios (Authorization, Content-Type, Accept, User-Agent)
- Serializar o body (shapes, listas e mappings)
- Executar exatamente uma chamada HTTP (sem retry)
- Classificar o resultado em ClassifiedResponse ou TransportFailure

Falhas de chamada nunca viram exceção: são valores de retorno.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from sparkpost_connector.config.settings import SparkPostSettings, get_sparkpost_settings
from sparkpost_connector.endpoint.api_errors import parse_api_errors
from sparkpost_connector.endpoint.api_logging import (
    log_api_error,
    log_success,
    log_transport_failure,
)
from sparkpost_connector.endpoint.http_base import HttpClient, HttpClientConfig, HttpError
from sparkpost_connector.endpoint.marshaling import marshal_response
from sparkpost_connector.endpoint.response import (
    ClassifiedResponse,
    EndpointResult,
    TransportFailure,
)
from sparkpost_connector.errors import SparkPostConfigurationError
from sparkpost_connector.shapes import to_payload

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)


class SparkPostEndpoint:
    """Cliente da API SparkPost com classificação uniforme de respostas."""

    marshal_response = staticmethod(marshal_response)

    def __init__(
        self,
        settings: SparkPostSettings | None = None,
        http_client: HttpClient | None = None,
    ) -> None:
        """Inicializa o endpoint.

        Args:
            settings: SparkPostSettings. Se None, carrega do ambiente.
            http_client: HttpClient já configurado (útil em testes).
        """
        self._settings = settings or get_sparkpost_settings()
        self._http = http_client or HttpClient(http_client_config(self._settings))

    @property
    def settings(self) -> SparkPostSettings:
        return self._settings

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> EndpointResult:
        """Executa uma chamada à API.

        Args:
            method: Verbo HTTP (get, post, ...)
            path: Path relativo (ex: "transmissions" ou "transmissions/123")
            body: Estrutura a serializar como payload JSON
            params: Filtros de query string (valores None são ignorados)

        Returns:
            ClassifiedResponse para qualquer status HTTP com JSON válido,
            TransportFailure para falha de conexão ou JSON inválido.

        Raises:
            SparkPostConfigurationError: Se a API key não estiver configurada.
        """
        verb = method.upper()
        headers = self._build_headers()
        url = self._settings.build_url(path)
        payload = to_payload(body) if body is not None else None

        try:
            response = await self._http.send(
                verb,
                url,
                json=payload,
                params=_query_params(params),
                headers=headers,
            )
        except HttpError as exc:
            log_transport_failure(verb, path, exc.reason)
            return TransportFailure(
                reason=exc.reason,
                error=exc.__cause__ or exc,
                method=verb,
                path=path,
            )

        return self._classify(response, verb, path)

    def _build_headers(self) -> dict[str, str]:
        """Header de autenticação. Os demais vêm de HttpClientConfig."""
        api_key = self._settings.api_key
        if not api_key or not api_key.strip():
            logger.error("sparkpost_api_key_missing")
            raise SparkPostConfigurationError(
                "API key é obrigatória. Verifique se SPARKPOST_API_KEY está configurado."
            )
        return {"Authorization": api_key}

    def _classify(
        self,
        response: httpx.Response,
        method: str,
        path: str,
    ) -> EndpointResult:
        """Converte a resposta HTTP crua em ClassifiedResponse."""
        try:
            data = response.json()
        except ValueError as exc:
            log_transport_failure(method, path, "invalid_json")
            return TransportFailure(reason="invalid_json", error=exc, method=method, path=path)

        errors = parse_api_errors(data)
        classified = ClassifiedResponse(
            status_code=response.status_code,
            results=data.get("results") if isinstance(data, dict) else None,
            errors=errors,
        )
        if errors or not classified.ok:
            log_api_error(errors, method, path, response.status_code)
        else:
            log_success(method, path, response.status_code)
        return classified


def _query_params(params: Mapping[str, Any] | None) -> dict[str, str] | None:
    if not params:
        return None
    return {str(key): str(value) for key, value in params.items() if value is not None}


def http_client_config(settings: SparkPostSettings) -> HttpClientConfig:
    """Config HTTP derivada das settings, com os headers fixos da API."""
    return HttpClientConfig(
        timeout_seconds=settings.request_timeout_seconds,
        default_headers={
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": settings.user_agent,
        },
        verify_ssl=settings.verify_ssl,
    )


def create_sparkpost_endpoint(
    settings: SparkPostSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> SparkPostEndpoint:
    """Factory para criar o endpoint com config padrão.

    Args:
        settings: SparkPostSettings opcional. Se None, carrega do ambiente.
        client: httpx.AsyncClient opcional a reutilizar entre chamadas.
    """
    resolved = settings or get_sparkpost_settings()
    http_client = HttpClient(http_client_config(resolved), client=client)
    return SparkPostEndpoint(settings=resolved, http_client=http_client)


@lru_cache(maxsize=1)
def get_sparkpost_endpoint() -> SparkPostEndpoint:
    """Endpoint compartilhado, criado a partir das settings do ambiente.

    Usado pelos recursos quando nenhum endpoint é passado. Cada chamada abre
    seu próprio httpx.AsyncClient, então a instância não fica presa a um
    event loop.
    """
    return create_sparkpost_endpoint()
