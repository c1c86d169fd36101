"""Configuração do pytest para o sparkpost-connector."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

# Adiciona raiz (tests.fakes) e src/ ao PYTHONPATH para permitir imports absolutos
root_path = Path(__file__).parent.parent
for path in (root_path, root_path / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from sparkpost_connector.config.settings import SparkPostSettings  # noqa: E402
from sparkpost_connector.endpoint.client import (  # noqa: E402
    SparkPostEndpoint,
    create_sparkpost_endpoint,
)
from tests.fakes.fake_transport import FakeTransport  # noqa: E402

TEST_API_ENDPOINT = "https://api.test.sparkpost.local/api/v1"


@pytest.fixture
def settings() -> SparkPostSettings:
    return SparkPostSettings(api_key="test-api-key", api_endpoint=TEST_API_ENDPOINT)


@pytest.fixture
def make_endpoint(
    settings: SparkPostSettings,
) -> Callable[[FakeTransport], SparkPostEndpoint]:
    """Cria SparkPostEndpoint ligado a um FakeTransport."""

    def _make(transport: FakeTransport) -> SparkPostEndpoint:
        client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
        return create_sparkpost_endpoint(settings=settings, client=client)

    return _make
