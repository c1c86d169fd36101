"""Base dos shapes de recurso da API SparkPost.

Todo recurso (transmission, recipient, content, template) é um dataclass
congelado derivado de `ApiRecord`. Este módulo concentra:
- Sentinel `REQUIRED` para campos obrigatórios ainda não informados
- Projeção campo a campo de um JSON decodificado para o shape (`from_api`)
- Serialização do shape para o payload de saída (`to_payload`)

Nomes de campo que são palavras reservadas (ex: `from`) são declarados com
sufixo `_` e mapeados via metadata `api_name`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from enum import Enum
from functools import cache
from typing import Any, ClassVar, TypeVar

API_NAME = "api_name"

RecordT = TypeVar("RecordT", bound="ApiRecord")


class Required(Enum):
    """Marca de campo obrigatório ainda não informado.

    Diferente de `None` (campo ausente) e de qualquer valor legítimo.
    Nunca é enviado no payload de saída.
    """

    REQUIRED = "required"

    def __repr__(self) -> str:
        return "REQUIRED"


REQUIRED = Required.REQUIRED


@cache
def field_map(shape: type[ApiRecord]) -> tuple[tuple[str, str], ...]:
    """Retorna pares (atributo, nome na API) declarados pelo shape."""
    return tuple(
        (f.name, f.metadata.get(API_NAME, f.name)) for f in fields(shape) if f.init
    )


def nested_record(shape: type[ApiRecord]) -> Callable[[Any], Any]:
    """Conversor que projeta objetos em `shape` e mantém os demais valores."""

    def convert(value: Any) -> Any:
        if isinstance(value, Mapping):
            return shape.from_api(value)
        return value

    return convert


@dataclass(frozen=True)
class ApiRecord:
    """Registro imutável de um recurso da API.

    Subclasses declaram em `nested` conversores por atributo, aplicados aos
    valores vindos da API (ex: options -> TransmissionOptions).
    """

    nested: ClassVar[dict[str, Callable[[Any], Any]]] = {}

    @classmethod
    def from_api(cls: type[RecordT], data: Any) -> RecordT:
        """Projeta um objeto decodificado da API neste shape.

        Chaves desconhecidas são ignoradas; chaves ausentes mantêm o default
        declarado. Valores que não são objeto resultam no shape padrão.
        """
        if not isinstance(data, Mapping):
            return cls()

        kwargs: dict[str, Any] = {}
        for attr, key in field_map(cls):
            if key not in data:
                continue
            value = data[key]
            convert = cls.nested.get(attr)
            if convert is not None and value is not None:
                value = convert(value)
            kwargs[attr] = value
        return cls(**kwargs)

    def missing_required(self) -> list[str]:
        """Nomes (na API) dos campos obrigatórios ainda em `REQUIRED`."""
        return [key for attr, key in field_map(type(self)) if getattr(self, attr) is REQUIRED]


def to_payload(value: Any) -> Any:
    """Converte shapes (e estruturas que os contêm) em JSON serializável.

    Campos `None` e `REQUIRED` de um shape são omitidos. `REQUIRED` dentro
    de mappings e listas também é omitido.
    """
    if isinstance(value, ApiRecord):
        payload: dict[str, Any] = {}
        for attr, key in field_map(type(value)):
            item = getattr(value, attr)
            if item is None or item is REQUIRED:
                continue
            payload[key] = to_payload(item)
        return payload
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {
            str(key): to_payload(item)
            for key, item in value.items()
            if item is not REQUIRED
        }
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value if item is not REQUIRED]
    return value
