"""Pytest configuration and fixtures."""

import json
import os
from collections.abc import Callable

import httpx
import pytest


def pytest_configure(config):
    """Set up test environment variables before tests run."""
    os.environ.setdefault("API_BASE_URL", "http://localhost:8000")
    os.environ.setdefault("LOG_LEVEL", "DEBUG")


@pytest.fixture
def valid_form():
    """Form that passes validation: 渋谷区 / 味噌 / 500–2000円."""
    from src.form.options import District, RamenType
    from src.form.state import FormState

    return FormState().toggle_district(District.SHIBUYA).toggle_ramen_type(RamenType.MISO)


@pytest.fixture
def make_client() -> Callable:
    """Build an APIClient whose requests are answered by ``handler``."""
    from src.ui.api_client import APIClient

    def factory(handler) -> APIClient:
        return APIClient(
            base_url="http://testserver",
            timeout=5.0,
            transport=httpx.MockTransport(handler),
        )

    return factory


@pytest.fixture
def recorded_requests() -> list[dict]:
    """List that handlers can append decoded request bodies to."""
    return []


@pytest.fixture
def ok_handler(recorded_requests):
    """Handler that records the body and answers with a fixed message."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(json.loads(request.content))
        return httpx.Response(200, json={"message": "# おすすめ\n\n**一蘭**"})

    return handler
