"""Configuração de logging estruturado.

Uso:
    from sparkpost_connector.config.logging import configure_logging

    configure_logging(level="DEBUG", service_name="minha_app")
"""

from sparkpost_connector.config.logging.config import (
    DEFAULT_SERVICE_NAME,
    FIELD_RENAME_MAP,
    LOG_FIELDS,
    ConnectorContextFilter,
    configure_logging,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "LOG_FIELDS",
    "ConnectorContextFilter",
    "configure_logging",
    "create_json_formatter",
]
