"""Shape de endereço de email."""

from __future__ import annotations

import re
from dataclasses import dataclass

from sparkpost_connector.shapes import REQUIRED, ApiRecord, Required

# "Nome <email@dominio>" ou "<email@dominio>"
_NAMED_ADDRESS = re.compile(r"^\s*(?P<name>[^<]*?)\s*<(?P<email>[^<>]+)>\s*$")


@dataclass(frozen=True)
class Address(ApiRecord):
    """Endereço de email com nome de exibição opcional."""

    email: str | Required = REQUIRED
    name: str | None = None
    header_to: str | None = None


def to_address(value: str | Address) -> Address:
    """Converte "email" ou "Nome <email>" em Address."""
    if isinstance(value, Address):
        return value

    match = _NAMED_ADDRESS.match(value)
    if match:
        name = match.group("name").strip().strip('"') or None
        return Address(email=match.group("email").strip(), name=name)
    return Address(email=value.strip())
