"""Conector SparkPost - cliente da API HTTP de email transacional.

Uso:
    from sparkpost_connector import Transmission, transmission

    result = await transmission.create(Transmission(...))
"""

from .endpoint import (
    ClassifiedResponse,
    SparkPostApiError,
    SparkPostEndpoint,
    TransportFailure,
    create_sparkpost_endpoint,
    get_sparkpost_endpoint,
    marshal_response,
)
from .errors import SparkPostConfigurationError, SparkPostError
from .resources import (
    Address,
    Attachment,
    InlineContent,
    RawContent,
    Recipient,
    RecipientListRef,
    Template,
    TemplateRef,
    Transmission,
    TransmissionOptions,
    TransmissionResponse,
    to_address,
    to_attachment,
    to_recipient,
    to_recipient_list,
    transmission,
)
from .shapes import REQUIRED, ApiRecord, Required

__version__ = "0.1.0"

__all__ = [
    "REQUIRED",
    "Address",
    "ApiRecord",
    "Attachment",
    "ClassifiedResponse",
    "InlineContent",
    "RawContent",
    "Recipient",
    "RecipientListRef",
    "Required",
    "SparkPostApiError",
    "SparkPostConfigurationError",
    "SparkPostEndpoint",
    "SparkPostError",
    "Template",
    "TemplateRef",
    "Transmission",
    "TransmissionOptions",
    "TransmissionResponse",
    "TransportFailure",
    "create_sparkpost_endpoint",
    "get_sparkpost_endpoint",
    "marshal_response",
    "to_address",
    "to_attachment",
    "to_recipient",
    "to_recipient_list",
    "transmission",
]
