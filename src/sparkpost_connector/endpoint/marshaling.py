"""Projeção de respostas classificadas em shapes de recurso."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from sparkpost_connector.endpoint.response import ClassifiedResponse

if TYPE_CHECKING:
    from sparkpost_connector.shapes import ApiRecord

RecordT = TypeVar("RecordT", bound="ApiRecord")


def select_results(response: ClassifiedResponse, result_key: str | None = None) -> Any:
    """Seleciona `results` ou `results[result_key]` (None se ausente)."""
    if result_key is None:
        return response.results
    if isinstance(response.results, Mapping):
        return response.results.get(result_key)
    return None


def marshal_response(
    response: Any,
    shape: type[RecordT],
    result_key: str | None = None,
) -> RecordT | list[RecordT] | Any:
    """Converte uma resposta do Endpoint no shape solicitado.

    Regras:
    1. Valor que não é ClassifiedResponse (ex: TransportFailure) volta intacto.
    2. ClassifiedResponse com status fora de 2xx volta intacta; o chamador
       lê `errors`.
    3. Lista em `results` (ou `results[result_key]`) vira lista de shapes,
       na mesma ordem.
    4. Qualquer outro valor vira um único shape.

    Args:
        response: Resultado de `SparkPostEndpoint.request`
        shape: Subclasse de ApiRecord a popular
        result_key: Chave aninhada a extrair antes de popular
            (ex: "transmission" em `{"results": {"transmission": {...}}}`)

    Returns:
        Shape populado, lista de shapes, ou o valor recebido sem alteração.
    """
    if not isinstance(response, ClassifiedResponse):
        return response
    if not response.ok:
        return response

    source = select_results(response, result_key)
    if isinstance(source, (list, tuple)):
        return [shape.from_api(item) for item in source]
    return shape.from_api(source)
