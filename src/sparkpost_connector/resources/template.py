"""Shapes de template armazenado."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, ClassVar

from sparkpost_connector.resources.address import Address
from sparkpost_connector.shapes import API_NAME, ApiRecord, nested_record


@dataclass(frozen=True)
class TemplateOptions(ApiRecord):
    open_tracking: bool | None = None
    click_tracking: bool | None = None
    transactional: bool | None = None


@dataclass(frozen=True)
class TemplateContent(ApiRecord):
    """Conteúdo de um template (inline ou RFC822)."""

    nested: ClassVar[dict[str, Callable[[Any], Any]]] = {"from_": nested_record(Address)}

    from_: Address | str | None = field(default=None, metadata={API_NAME: "from"})
    subject: str | None = None
    text: str | None = None
    html: str | None = None
    reply_to: str | None = None
    headers: dict[str, str] | None = None
    email_rfc822: str | None = None


@dataclass(frozen=True)
class Template(ApiRecord):
    """Template armazenado no SparkPost.

    Os campos a partir de `has_draft` são gerados pelo sistema.
    """

    nested: ClassVar[dict[str, Callable[[Any], Any]]] = {
        "options": nested_record(TemplateOptions),
        "content": nested_record(TemplateContent),
    }

    id: str | None = None
    name: str | None = None
    description: str | None = None
    published: bool | None = None
    shared_with_subaccounts: bool | None = None
    options: TemplateOptions | None = None
    content: TemplateContent | None = None
    has_draft: bool | None = None
    has_published: bool | None = None
    last_update_time: str | None = None
    last_use: str | None = None
