from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from vietqr.api import app, get_payload_generator
from vietqr.bill_number import FixedRandomSource
from vietqr.config import settings
from vietqr.services.generator import PayloadGenerator


@pytest.fixture
def fixed_source() -> FixedRandomSource:
    return FixedRandomSource(42)


@pytest.fixture
def client():
    app.dependency_overrides[get_payload_generator] = lambda: PayloadGenerator(FixedRandomSource(42))
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-API-Key": settings.api_key}
