"""Logging estruturado JSON do conector.

O conector apenas emite logs via `logging.getLogger(__name__)`. Quem usa a
biblioteca pode chamar `configure_logging` uma vez para obter saída JSON com
campos fixos:
- asctime
- level
- logger
- message
- service
- connector (nome/versão do pacote)
- correlation_id

Nunca logar API key, endereços de email ou payloads brutos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pythonjsonlogger.json import JsonFormatter

from sparkpost_connector.config.settings import DEFAULT_USER_AGENT

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import TextIO

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "sparkpost_connector"
PACKAGE_LOGGER = "sparkpost_connector"

LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "connector",
    "correlation_id",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


class ConnectorContextFilter(logging.Filter):
    """Completa cada record com os campos de contexto do conector.

    `context` traz valores fixos (service, connector). `correlation_id` é
    resolvido a cada record pelo getter do chamador. Campos já presentes no
    record, vindos de `extra`, têm precedência.
    """

    def __init__(
        self,
        context: Mapping[str, str],
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._context = dict(context)
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        for name, value in self._context.items():
            if not getattr(record, name, None):
                setattr(record, name, value)
        if not getattr(record, "correlation_id", None):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter is not None else ""
        return True


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com os campos de LOG_FIELDS."""
    return JsonFormatter(
        " ".join(f"%({name})s" for name in LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    logger_name: str = PACKAGE_LOGGER,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configura logging JSON para o logger do conector.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço injetado em cada log.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto do chamador.
        logger_name: Logger a configurar. "" configura o root logger.
        stream: Destino do handler (default: stderr).

    Returns:
        Logger configurado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        ConnectorContextFilter(
            {"service": service_name, "connector": DEFAULT_USER_AGENT},
            correlation_id_getter,
        )
    )

    logger = logging.getLogger(logger_name or None)
    logger.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    logger.handlers = [handler]
    return logger
