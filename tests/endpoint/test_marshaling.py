"""Testes de marshal_response e da projeção em shapes."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from sparkpost_connector.endpoint.api_errors import SparkPostApiError
from sparkpost_connector.endpoint.marshaling import marshal_response, select_results
from sparkpost_connector.endpoint.response import ClassifiedResponse, TransportFailure
from sparkpost_connector.resources.transmission import Transmission, TransmissionOptions
from sparkpost_connector.shapes import REQUIRED, ApiRecord, Required


@dataclass(frozen=True)
class Widget(ApiRecord):
    name: str | Required = REQUIRED
    size: int | None = None
    color: str = "blue"


class TestPassthrough:
    """Valores que não são resposta de sucesso voltam sem alteração."""

    @pytest.mark.parametrize(
        "value",
        [
            TransportFailure(reason="connection_error"),
            ("error", "econnrefused"),
            None,
            "timeout",
            42,
            {"results": {"name": "not-a-response"}},
        ],
    )
    def test_non_classified_values_are_returned_unchanged(self, value) -> None:
        assert marshal_response(value, Widget) is value

    def test_error_status_response_is_returned_unchanged(self) -> None:
        """Status fora de 2xx não é projetado no shape."""
        response = ClassifiedResponse(
            status_code=401,
            results=None,
            errors=(SparkPostApiError(message="Unauthorized."),),
        )

        assert marshal_response(response, Widget) is response


class TestSingleObject:
    def test_populates_single_instance(self) -> None:
        response = ClassifiedResponse(status_code=200, results={"name": "gear", "size": 3})

        result = marshal_response(response, Widget)

        assert result == Widget(name="gear", size=3)

    def test_result_key_extracts_nested_object(self) -> None:
        response = ClassifiedResponse(
            status_code=200,
            results={"widget": {"name": "bolt"}, "other": 1},
        )

        result = marshal_response(response, Widget, result_key="widget")

        assert result == Widget(name="bolt")
        assert not isinstance(result, list)

    def test_extra_keys_are_ignored(self) -> None:
        response = ClassifiedResponse(
            status_code=200,
            results={"name": "nut", "unknown_field": True, "weight": 1.5},
        )

        assert marshal_response(response, Widget) == Widget(name="nut")

    def test_missing_keys_keep_declared_defaults(self) -> None:
        response = ClassifiedResponse(status_code=200, results={"size": 7})

        result = marshal_response(response, Widget)

        assert result.name is REQUIRED
        assert result.size == 7
        assert result.color == "blue"

    def test_missing_result_key_yields_defaults(self) -> None:
        response = ClassifiedResponse(status_code=200, results={"something": {}})

        assert marshal_response(response, Widget, result_key="widget") == Widget()

    def test_absent_results_yield_defaults(self) -> None:
        response = ClassifiedResponse(status_code=200, results=None)

        assert marshal_response(response, Widget) == Widget()


class TestSequence:
    def test_list_keeps_length_and_order(self) -> None:
        response = ClassifiedResponse(
            status_code=200,
            results=[{"name": "c"}, {"name": "a"}, {"name": "b", "size": 2}],
        )

        result = marshal_response(response, Widget)

        assert result == [Widget(name="c"), Widget(name="a"), Widget(name="b", size=2)]

    def test_empty_list_returns_empty_list(self) -> None:
        response = ClassifiedResponse(status_code=200, results=[])

        assert marshal_response(response, Widget) == []

    def test_nested_list_under_result_key(self) -> None:
        response = ClassifiedResponse(
            status_code=200,
            results={"widgets": [{"name": "x"}, {"name": "y"}]},
        )

        result = marshal_response(response, Widget, result_key="widgets")

        assert [item.name for item in result] == ["x", "y"]


class TestNestedShapes:
    def test_options_are_projected_into_options_shape(self) -> None:
        response = ClassifiedResponse(
            status_code=200,
            results={
                "id": "1",
                "options": {"open_tracking": False, "conversion_tracking": ""},
            },
        )

        result = marshal_response(response, Transmission)

        assert result.options == TransmissionOptions(open_tracking=False)

    def test_missing_options_keep_default_options(self) -> None:
        response = ClassifiedResponse(status_code=200, results={"id": "1"})

        result = marshal_response(response, Transmission)

        assert result.options == TransmissionOptions()
        assert result.recipients is REQUIRED


def test_select_results_on_non_mapping_with_key() -> None:
    response = ClassifiedResponse(status_code=200, results=[1, 2])

    assert select_results(response, "transmission") is None
    assert select_results(response) == [1, 2]
