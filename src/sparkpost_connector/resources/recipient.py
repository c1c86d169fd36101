"""Shapes de destinatário."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from sparkpost_connector.resources.address import Address, to_address
from sparkpost_connector.shapes import REQUIRED, ApiRecord, Required, nested_record


@dataclass(frozen=True)
class Recipient(ApiRecord):
    """Destinatário individual de uma transmission."""

    nested: ClassVar[dict[str, Callable[[Any], Any]]] = {"address": nested_record(Address)}

    address: Address | str | Required = REQUIRED
    return_path: str | None = None
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None
    substitution_data: dict[str, Any] | None = None


@dataclass(frozen=True)
class RecipientListRef(ApiRecord):
    """Referência a uma lista de destinatários armazenada."""

    list_id: str | Required = REQUIRED


def to_recipient(value: str | Address | Recipient) -> Recipient:
    """Converte email, Address ou Recipient em Recipient."""
    if isinstance(value, Recipient):
        return value
    return Recipient(address=to_address(value))


def to_recipient_list(values: Iterable[str | Address | Recipient]) -> list[Recipient]:
    """Converte uma sequência de emails em lista de Recipient, na mesma ordem."""
    return [to_recipient(value) for value in values]


def recipients_from_api(data: Any) -> list[Recipient] | RecipientListRef | Any:
    """Projeta o campo `recipients` devolvido pela API.

    Lista vira lista de Recipient; objeto com `list_id` vira RecipientListRef.
    """
    if isinstance(data, list):
        return [Recipient.from_api(item) if isinstance(item, Mapping) else item for item in data]
    if isinstance(data, Mapping) and "list_id" in data:
        return RecipientListRef.from_api(data)
    return data
