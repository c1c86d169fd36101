"""Settings do conector SparkPost.

Carregadas de variáveis de ambiente e cacheadas (singleton por processo).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Endpoints públicos da API
SPARKPOST_API_ENDPOINT: str = "https://api.sparkpost.com/api/v1"
SPARKPOST_EU_API_ENDPOINT: str = "https://api.eu.sparkpost.com/api/v1"

DEFAULT_USER_AGENT: str = "sparkpost-connector/0.1.0"


@dataclass(frozen=True)
class SparkPostSettings:
    """Configurações de acesso à API SparkPost.

    Attributes:
        api_key: API key enviada no header Authorization
        api_endpoint: URL base (inclui /api/v1)
        request_timeout_seconds: Timeout por requisição HTTP
        verify_ssl: Validar certificado TLS
        user_agent: User-Agent enviado em toda requisição
    """

    api_key: str = ""
    api_endpoint: str = SPARKPOST_API_ENDPOINT
    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT

    def build_url(self, path: str) -> str:
        """Retorna URL completa para um path relativo (ex: transmissions/123)."""
        return f"{self.api_endpoint.rstrip('/')}/{path.lstrip('/')}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key.strip():
            errors.append("SPARKPOST_API_KEY não configurado")

        if not self.api_endpoint.startswith(("https://", "http://")):
            errors.append("SPARKPOST_API_ENDPOINT deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("SPARKPOST_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SparkPostSettings:
    """Carrega SparkPostSettings a partir de variáveis de ambiente."""
    return SparkPostSettings(
        api_key=os.getenv("SPARKPOST_API_KEY", ""),
        api_endpoint=os.getenv("SPARKPOST_API_ENDPOINT", SPARKPOST_API_ENDPOINT),
        request_timeout_seconds=float(
            os.getenv("SPARKPOST_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        verify_ssl=os.getenv("SPARKPOST_VERIFY_SSL", "true").lower() in ("true", "1"),
        user_agent=os.getenv("SPARKPOST_USER_AGENT", DEFAULT_USER_AGENT),
    )


@lru_cache(maxsize=1)
def get_sparkpost_settings() -> SparkPostSettings:
    """Retorna instância cacheada de SparkPostSettings."""
    return _load_from_env()
