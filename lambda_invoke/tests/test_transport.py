"""
Boto3LambdaTransport against a stubbed botocore Lambda client.
"""

import io

import boto3
import pytest
from botocore.exceptions import ClientError
from botocore.response import StreamingBody
from botocore.stub import Stubber

from lambda_invoke.core.exceptions import FunctionInvocationError, TransportError
from lambda_invoke.models.request import InvocationRequest
from lambda_invoke.services.lambda_invoker import LambdaInvoker
from lambda_invoke.services.transport import Boto3LambdaTransport


def streaming(data: bytes) -> StreamingBody:
    return StreamingBody(io.BytesIO(data), len(data))


@pytest.fixture
def lambda_client():
    return boto3.client(
        "lambda",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


def test_transport_returns_payload_bytes(lambda_client):
    transport = Boto3LambdaTransport(lambda_client)
    with Stubber(lambda_client) as stubber:
        stubber.add_response(
            "invoke",
            {"StatusCode": 200, "Payload": streaming(b'{"statusCode": 200, "body": "{}"}')},
            {
                "FunctionName": "users-api",
                "InvocationType": "RequestResponse",
                "Payload": b'{"resource": "/users"}',
            },
        )

        raw = transport.invoke("users-api", b'{"resource": "/users"}')

        stubber.assert_no_pending_responses()

    assert raw == b'{"statusCode": 200, "body": "{}"}'


def test_transport_raises_on_function_error(lambda_client):
    transport = Boto3LambdaTransport(lambda_client)
    error_payload = b'{"errorMessage": "boom", "errorType": "RuntimeError"}'
    with Stubber(lambda_client) as stubber:
        stubber.add_response(
            "invoke",
            {"StatusCode": 200, "FunctionError": "Unhandled", "Payload": streaming(error_payload)},
        )

        with pytest.raises(FunctionInvocationError) as exc_info:
            transport.invoke("users-api", b"{}")

    assert exc_info.value.function_error == "Unhandled"
    assert exc_info.value.payload == error_payload


def test_transport_propagates_client_error(lambda_client):
    transport = Boto3LambdaTransport(lambda_client)
    with Stubber(lambda_client) as stubber:
        stubber.add_client_error(
            "invoke", service_error_code="TooManyRequestsException", http_status_code=429
        )

        with pytest.raises(ClientError):
            transport.invoke("users-api", b"{}")


def test_invoker_over_stubbed_client_end_to_end(lambda_client):
    invoker = LambdaInvoker(Boto3LambdaTransport(lambda_client))
    request = InvocationRequest(service="users-api", resource="/users/{id}", path_params={"id": "7"})
    with Stubber(lambda_client) as stubber:
        stubber.add_response(
            "invoke",
            {
                "StatusCode": 200,
                "Payload": streaming(b'{"statusCode": 200, "body": "{\\"id\\": \\"7\\"}"}'),
            },
        )

        assert invoker.invoke(request) == {"id": "7"}


def test_invoker_over_stubbed_client_throttled(lambda_client):
    invoker = LambdaInvoker(Boto3LambdaTransport(lambda_client))
    with Stubber(lambda_client) as stubber:
        stubber.add_client_error(
            "invoke", service_error_code="TooManyRequestsException", http_status_code=429
        )

        with pytest.raises(TransportError) as exc_info:
            invoker.invoke(InvocationRequest(service="users-api"))

    assert isinstance(exc_info.value.cause, ClientError)
