import pytest
from fastapi.testclient import TestClient

from apiary.main import app
from apiary.schemas.request import ExecuteRequestInput, ExportRequestInput, KeyValue


@pytest.fixture(scope="module")
def client():
    """Create a test client for the application."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def base_export_input() -> ExportRequestInput:
    return ExportRequestInput(
        method="GET",
        url="https://api.example.com/users",
        headers=[],
        query_params=[],
        body_type="none",
        body_content=None,
    )


@pytest.fixture
def make_request():
    """Factory for request values with sensible defaults."""

    def factory(**overrides) -> ExecuteRequestInput:
        fields = {
            "method": "GET",
            "url": "{{baseUrl}}/posts",
            "headers": [KeyValue(key="Authorization", value="Bearer {{token}}", enabled=True)],
            "query_params": [KeyValue(key="page", value="{{page}}", enabled=True)],
            "body_type": "none",
            "body_content": None,
        }
        fields.update(overrides)
        return ExecuteRequestInput(**fields)

    return factory
