"""Recursos da API SparkPost.

Estrutura:
- transmission: envio de email (create/get/list) ✅
- recipient, address, content, template: shapes de dados
"""

from . import transmission
from .address import Address, to_address
from .content import (
    Attachment,
    InlineContent,
    RawContent,
    TemplateRef,
    content_from_api,
    to_attachment,
)
from .recipient import Recipient, RecipientListRef, to_recipient, to_recipient_list
from .template import Template, TemplateContent, TemplateOptions
from .transmission import Transmission, TransmissionOptions, TransmissionResponse

__all__ = [
    "Address",
    "Attachment",
    "InlineContent",
    "RawContent",
    "Recipient",
    "RecipientListRef",
    "Template",
    "TemplateContent",
    "TemplateOptions",
    "TemplateRef",
    "Transmission",
    "TransmissionOptions",
    "TransmissionResponse",
    "content_from_api",
    "to_address",
    "to_attachment",
    "to_recipient",
    "to_recipient_list",
    "transmission",
]
