"""Endpoint SparkPost - único ponto de IO com a API.

Responsabilidades:
- HTTP client (httpx) sem retry
- Classificação de respostas (ClassifiedResponse / TransportFailure)
- Parsing de erros da API
- Marshaling de respostas em shapes de recurso
"""

from .api_errors import SparkPostApiError, parse_api_errors
from .client import (
    SparkPostEndpoint,
    create_sparkpost_endpoint,
    get_sparkpost_endpoint,
    http_client_config,
)
from .http_base import HttpClient, HttpClientConfig, HttpError
from .marshaling import marshal_response, select_results
from .response import ClassifiedResponse, EndpointResult, TransportFailure

__all__ = [
    "ClassifiedResponse",
    "EndpointResult",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "SparkPostApiError",
    "SparkPostEndpoint",
    "TransportFailure",
    "create_sparkpost_endpoint",
    "get_sparkpost_endpoint",
    "http_client_config",
    "marshal_response",
    "parse_api_errors",
    "select_results",
]
