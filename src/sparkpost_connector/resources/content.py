"""Shapes de conteúdo de uma transmission.

Três formas aceitas pela API:
- InlineContent: subject/from/text/html declarados na própria chamada
- RawContent: mensagem RFC822 completa
- TemplateRef: referência a um template armazenado
"""

from __future__ import annotations

import base64
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, ClassVar

from sparkpost_connector.resources.address import Address
from sparkpost_connector.shapes import API_NAME, REQUIRED, ApiRecord, Required, nested_record


@dataclass(frozen=True)
class Attachment(ApiRecord):
    """Anexo ou imagem inline (data em base64)."""

    name: str | Required = REQUIRED
    type: str | Required = REQUIRED
    data: str | Required = REQUIRED


@dataclass(frozen=True)
class InlineContent(ApiRecord):
    nested: ClassVar[dict[str, Callable[[Any], Any]]] = {"from_": nested_record(Address)}

    from_: Address | str | Required = field(default=REQUIRED, metadata={API_NAME: "from"})
    subject: str | Required = REQUIRED
    text: str | None = None
    html: str | None = None
    reply_to: str | None = None
    headers: dict[str, str] | None = None
    attachments: list[Attachment] | None = None
    inline_images: list[Attachment] | None = None


@dataclass(frozen=True)
class RawContent(ApiRecord):
    email_rfc822: str | Required = REQUIRED


@dataclass(frozen=True)
class TemplateRef(ApiRecord):
    template_id: str | Required = REQUIRED
    use_draft_template: bool | None = None


def to_attachment(filename: str, mime_type: str, data: bytes) -> Attachment:
    """Monta Attachment a partir dos bytes do arquivo.

    Exemplo:
        to_attachment("cat.jpg", "image/jpeg", Path("cat.jpg").read_bytes())
    """
    return Attachment(
        name=filename,
        type=mime_type,
        data=base64.b64encode(data).decode("ascii"),
    )


def content_from_api(data: Any) -> InlineContent | RawContent | TemplateRef | Any:
    """Identifica a forma de um objeto `content` vindo da API.

    A API devolve `template_id` mesmo para conteúdo inline ("inline"), então
    só é TemplateRef quando o id não é "inline". Valores desconhecidos voltam
    sem alteração.
    """
    if not isinstance(data, dict):
        return data
    if "email_rfc822" in data:
        return RawContent.from_api(data)
    template_id = data.get("template_id")
    if template_id and template_id != "inline":
        return TemplateRef.from_api(data)
    if "subject" in data or "from" in data:
        return InlineContent.from_api(data)
    return data
