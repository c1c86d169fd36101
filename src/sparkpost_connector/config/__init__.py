"""Configuração do conector: settings e logging."""

from .settings import (
    SPARKPOST_API_ENDPOINT,
    SPARKPOST_EU_API_ENDPOINT,
    SparkPostSettings,
    get_sparkpost_settings,
)

__all__ = [
    "SPARKPOST_API_ENDPOINT",
    "SPARKPOST_EU_API_ENDPOINT",
    "SparkPostSettings",
    "get_sparkpost_settings",
]
