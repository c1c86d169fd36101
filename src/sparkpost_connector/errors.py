"""Exceções do conector SparkPost.

Resultados de chamadas à API nunca são sinalizados por exceção (ver
`endpoint.response`). Exceções ficam restritas a erros de uso/configuração.
"""

from __future__ import annotations


class SparkPostError(RuntimeError):
    """Base para erros do conector."""


class SparkPostConfigurationError(SparkPostError, ValueError):
    """Configuração ausente ou inválida (ex: SPARKPOST_API_KEY vazio)."""
