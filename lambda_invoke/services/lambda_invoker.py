"""
Lambda Invoker Service

Invokes a Lambda function as if it were an HTTP endpoint: builds an API Gateway
style envelope, sends it through the injected transport, validates the proxy
response and decodes its JSON body into the requested type.
"""

import logging
from typing import Any, Optional, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from lambda_invoke.clients import create_lambda_client
from lambda_invoke.config import InvokerConfig
from lambda_invoke.core.event_builder import (
    LEGACY_QUERY_PARAMETERS,
    QUERY_STRING_PARAMETERS,
    EventBuilder,
    ProxyEventBuilder,
)
from lambda_invoke.core.exceptions import (
    DecodingError,
    EncodingError,
    NonSuccessStatusError,
    TransportError,
)
from lambda_invoke.core.request_context import (
    get_invocation_id,
    reset_invocation_id,
    start_invocation,
)
from lambda_invoke.models.request import InvocationRequest
from lambda_invoke.models.result import InvocationResult
from lambda_invoke.services.transport import Boto3LambdaTransport, LambdaTransport

logger = logging.getLogger("lambda_invoke.invoker")

T = TypeVar("T")

SNIPPET_LENGTH = 200


def _snippet(payload: Union[bytes, str]) -> str:
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8", errors="replace")
    return payload[:SNIPPET_LENGTH]


class LambdaInvoker:
    def __init__(self, transport: LambdaTransport, builder: Optional[EventBuilder] = None):
        """
        Args:
            transport: Shared transport (e.g. Boto3LambdaTransport around one boto3 client)
            builder: Envelope builder, ProxyEventBuilder by default
        """
        self.transport = transport
        self.builder = builder or ProxyEventBuilder()

    @classmethod
    def from_config(cls, config: InvokerConfig) -> "LambdaInvoker":
        """Build client, transport and invoker from configuration."""
        client = create_lambda_client(config)
        query_key = LEGACY_QUERY_PARAMETERS if config.LEGACY_QUERY_KEY else QUERY_STRING_PARAMETERS
        return cls(Boto3LambdaTransport(client), ProxyEventBuilder(query_key=query_key))

    def invoke(self, request: InvocationRequest, output_type: Type[T] = Any) -> T:
        """
        Invoke the function and decode the inner response body.

        Args:
            request: What to call and with which HTTP-like parameters
            output_type: Type the inner body is validated into (model, dataclass, dict, Any...)

        Returns:
            The decoded inner body

        Raises:
            EncodingError: request could not be serialized, nothing was sent
            TransportError: the remote call failed
            DecodingError: outer envelope or inner body is malformed
            NonSuccessStatusError: statusCode is not 200
        """
        token = start_invocation()
        try:
            return self._invoke(request, output_type)
        finally:
            reset_invocation_id(token)

    def _invoke(self, request: InvocationRequest, output_type: Type[T]) -> T:
        function_name = request.service

        try:
            payload = self.builder.encode(request)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            logger.error(
                "Could not encode payload",
                extra={
                    "function_name": function_name,
                    "error_type": type(e).__name__,
                    "error_detail": str(e),
                },
            )
            raise EncodingError(function_name, e) from e

        logger.info(
            f"Invoking {function_name}",
            extra={"function_name": function_name, "resource": request.resource},
        )

        try:
            raw = self.transport.invoke(function_name, payload)
        except Exception as e:
            logger.error(
                f"Lambda invocation failed for function '{function_name}'",
                extra={
                    "function_name": function_name,
                    "error_type": type(e).__name__,
                    "error_detail": str(e),
                },
            )
            raise TransportError(function_name, e) from e

        try:
            result = InvocationResult.model_validate_json(raw)
        except ValidationError as e:
            logger.error(
                "Error during unmarshal of output payload",
                extra={
                    "function_name": function_name,
                    "error_detail": str(e),
                    "payload": _snippet(raw),
                },
            )
            raise DecodingError(function_name, raw, e) from e

        if not result.is_success:
            logger.warning(
                "Non 200 status code",
                extra={
                    "function_name": function_name,
                    "status_code": result.statusCode,
                    "payload": _snippet(raw),
                },
            )
            raise NonSuccessStatusError(function_name, result.statusCode, raw)

        try:
            output = TypeAdapter(output_type).validate_json(result.body)
        except ValidationError as e:
            logger.error(
                "Error during unmarshal of response body",
                extra={
                    "function_name": function_name,
                    "error_detail": str(e),
                    "payload": _snippet(result.body),
                },
            )
            raise DecodingError(function_name, result.body, e) from e

        logger.debug(
            f"Invocation of {function_name} succeeded",
            extra={"function_name": function_name, "invocation_id": get_invocation_id()},
        )
        return output
