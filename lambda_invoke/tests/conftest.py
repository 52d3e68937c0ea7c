import json

import pytest

from lambda_invoke.config import InvokerConfig
from lambda_invoke.core import request_context


class FakeTransport:
    """Records every call and answers with a canned response or exception."""

    def __init__(self, response: bytes = b"", error: Exception = None):
        self.response = response
        self.error = error
        self.calls = []

    def invoke(self, function_name: str, payload: bytes) -> bytes:
        self.calls.append((function_name, payload))
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_envelope(self) -> dict:
        return json.loads(self.calls[-1][1])


def proxy_response(status_code: int, body) -> bytes:
    """Build a proxy-integration response whose body is JSON text."""
    return json.dumps({"statusCode": status_code, "body": json.dumps(body)}).encode("utf-8")


@pytest.fixture
def fake_transport():
    return FakeTransport(response=proxy_response(200, {"ok": True}))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's AWS/logging environment out of the tests."""
    for key in (
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
        "AWS_PROFILE",
        "LAMBDA_ENDPOINT_URL",
        "LAMBDA_MAX_ATTEMPTS",
        "LEGACY_QUERY_KEY",
        "LOG_CONFIG_PATH",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    # Keep a stray .env in the working directory from leaking into InvokerConfig.
    monkeypatch.setitem(InvokerConfig.model_config, "env_file", None)
    yield
    request_context.clear_invocation_id()
