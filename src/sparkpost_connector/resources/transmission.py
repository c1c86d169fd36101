"""Recurso Transmission da API SparkPost (envio de email).

Operações:
- create: envia uma transmission (POST transmissions)
- get: detalhes de uma transmission (GET transmissions/{id})
- list_transmissions: transmissions anteriores, filtradas por campaign_id
  e/ou template_id (GET transmissions)

Referência: https://developers.sparkpost.com/api/transmissions/

Exemplo:
    transmission = Transmission(
        recipients=to_recipient_list(["to@you.com"]),
        return_path="from@me.com",
        content=InlineContent(from_="from@me.com", subject="Oi", text="..."),
    )
    result = await create(transmission)
    if isinstance(result, TransmissionResponse):
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from sparkpost_connector.endpoint.client import SparkPostEndpoint, get_sparkpost_endpoint
from sparkpost_connector.endpoint.marshaling import marshal_response
from sparkpost_connector.resources.content import (
    InlineContent,
    RawContent,
    TemplateRef,
    content_from_api,
)
from sparkpost_connector.resources.recipient import (
    Recipient,
    RecipientListRef,
    recipients_from_api,
)
from sparkpost_connector.shapes import REQUIRED, ApiRecord, Required, nested_record

logger = logging.getLogger(__name__)

RESOURCE_PATH = "transmissions"


@dataclass(frozen=True)
class TransmissionOptions(ApiRecord):
    """Opções de tracking, agendamento e sandbox."""

    start_time: str | None = None
    open_tracking: bool | None = True
    click_tracking: bool | None = True
    transactional: bool | None = None
    sandbox: bool | None = None
    skip_suppression: bool | None = None


@dataclass(frozen=True)
class Transmission(ApiRecord):
    """Transmission: um envio de email para um ou mais destinatários.

    `return_path`, `recipients` e `content` são obrigatórios para envio e
    começam em REQUIRED. Os campos a partir de `id` são gerados pelo sistema
    e só vêm preenchidos em get/list.
    """

    nested: ClassVar[dict[str, Callable[[Any], Any]]] = {
        "options": nested_record(TransmissionOptions),
        "recipients": recipients_from_api,
        "content": content_from_api,
    }

    options: TransmissionOptions = field(default_factory=TransmissionOptions)
    campaign_id: str | None = None
    return_path: str | Required = REQUIRED
    metadata: dict[str, Any] | None = None
    substitution_data: dict[str, Any] | None = None
    recipients: list[Recipient] | RecipientListRef | Required = REQUIRED
    content: InlineContent | RawContent | TemplateRef | dict[str, Any] | Required = REQUIRED
    id: str | None = None
    description: str | None = None
    state: str | None = None
    rcpt_list_chunk_size: int | None = None
    rcpt_list_total_chunks: int | None = None
    num_rcpts: int | None = None
    num_generated: int | None = None
    num_failed_gen: int | None = None
    generation_start_time: str | None = None
    generation_end_time: str | None = None


@dataclass(frozen=True)
class TransmissionResponse(ApiRecord):
    """Resultado de `create`."""

    id: str | None = None
    total_accepted_recipients: int | None = None
    total_rejected_recipients: int | None = None


async def create(
    transmission: Transmission,
    *,
    endpoint: SparkPostEndpoint | None = None,
) -> TransmissionResponse | Any:
    """Cria uma transmission e envia o email.

    Args:
        transmission: Transmission com recipients, content e return_path
        endpoint: Endpoint a usar. Se None, usa o endpoint compartilhado.

    Returns:
        TransmissionResponse em caso de sucesso; caso contrário o
        TransportFailure ou ClassifiedResponse de erro, sem alteração.
    """
    missing = transmission.missing_required()
    if missing:
        logger.warning(
            "sparkpost_required_fields_unset",
            extra={"resource": RESOURCE_PATH, "fields": missing},
        )

    client = endpoint or get_sparkpost_endpoint()
    response = await client.request("POST", RESOURCE_PATH, body=transmission)
    return marshal_response(response, TransmissionResponse)


async def get(
    transmission_id: str,
    *,
    endpoint: SparkPostEndpoint | None = None,
) -> Transmission | Any:
    """Retorna os detalhes de uma transmission existente.

    A API aninha o objeto em `{"results": {"transmission": {...}}}`.
    """
    client = endpoint or get_sparkpost_endpoint()
    response = await client.request("GET", f"{RESOURCE_PATH}/{transmission_id}")
    return marshal_response(response, Transmission, result_key="transmission")


async def list_transmissions(
    filters: Mapping[str, Any] | None = None,
    *,
    endpoint: SparkPostEndpoint | None = None,
) -> list[Transmission] | Any:
    """Lista transmissions com múltiplos destinatários.

    Args:
        filters: Filtros de query (campaign_id, template_id)
        endpoint: Endpoint a usar. Se None, usa o endpoint compartilhado.

    Returns:
        Lista de Transmission na ordem da API, ou o valor de falha sem alteração.
        Um único objeto em `results` vira lista de um elemento.
    """
    client = endpoint or get_sparkpost_endpoint()
    response = await client.request("GET", RESOURCE_PATH, params=filters or {})
    result = marshal_response(response, Transmission)
    if isinstance(result, Transmission):
        return [result]
    return result
