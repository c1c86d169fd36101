"""Cliente HTTP base (httpx) do conector.

Uma tentativa por chamada: sem retry e sem backoff.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Falha de transporte sem dados sensíveis.

    `reason` é um rótulo estável: timeout, connection_error ou http_error.
    """

    def __init__(self, message: str, reason: str) -> None:
        super().__init__(message)
        self.reason = reason


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Se `client` for informado ele é reutilizado (e não é fechado aqui);
    caso contrário um `httpx.AsyncClient` é aberto por chamada.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    async def send(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa uma requisição e retorna a resposta crua, qualquer status.

        Raises:
            HttpError: Timeout, erro de conexão ou outro erro do httpx.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            if self._client is not None:
                return await self._dispatch(
                    self._client, method, url, json, params, merged_headers
                )
            async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
                return await self._dispatch(client, method, url, json, params, merged_headers)
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout", reason="timeout") from exc
        except httpx.TransportError as exc:
            raise HttpError("http_connection_error", reason="connection_error") from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_error", reason="http_error") from exc

    async def _dispatch(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        json: Any,
        params: dict[str, str] | None,
        headers: dict[str, str],
    ) -> httpx.Response:
        return await client.request(
            method,
            url,
            json=json,
            params=params,
            headers=headers,
            timeout=self._config.timeout_seconds,
        )
