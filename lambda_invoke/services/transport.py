from typing import Protocol
import logging

from ..core.exceptions import FunctionInvocationError

logger = logging.getLogger("lambda_invoke.transport")


class LambdaTransport(Protocol):
    def invoke(self, function_name: str, payload: bytes) -> bytes: ...


class Boto3LambdaTransport:
    """Synchronous RequestResponse invocation through a boto3 Lambda client."""

    def __init__(self, client):
        self.client = client

    def invoke(self, function_name: str, payload: bytes) -> bytes:
        response = self.client.invoke(
            FunctionName=function_name,
            InvocationType="RequestResponse",
            Payload=payload,
        )
        body = response["Payload"].read()

        # Unhandled errors inside the function still come back as HTTP 200.
        function_error = response.get("FunctionError")
        if function_error:
            logger.debug(
                "Function reported an error",
                extra={
                    "function_name": function_name,
                    "function_error": function_error,
                    "executed_version": response.get("ExecutedVersion"),
                },
            )
            raise FunctionInvocationError(function_name, function_error, body)
        return body
