import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from lambda_invoke.models.aws_v1 import ApiGatewayRequestContext, InvocationEnvelope
from lambda_invoke.models.request import InvocationRequest

logger = logging.getLogger("lambda_invoke.event_builder")

QUERY_STRING_PARAMETERS = "queryStringParameters"
LEGACY_QUERY_PARAMETERS = "queryParameters"
DEFAULT_METHOD = "GET"


def _reject_constant(name: str):
    raise ValueError(f"Out of range float value {name} is not valid JSON")


class EventBuilder(ABC):
    @abstractmethod
    def build(self, request: InvocationRequest) -> InvocationEnvelope:
        """
        Build an envelope model from an InvocationRequest.
        """
        pass

    def encode(self, request: InvocationRequest) -> bytes:
        """
        Serialize the envelope to JSON bytes.

        Raises:
            TypeError / ValueError (incl. PydanticSerializationError) when the
            body or a parameter map holds something JSON cannot represent,
            NaN and Infinity included.
        """
        envelope = self.build(request)
        data = envelope.model_dump_json(exclude_unset=True)
        json.loads(data, parse_constant=_reject_constant)
        return data.encode("utf-8")


class ProxyEventBuilder(EventBuilder):
    """API Gateway V1 (REST API) style envelope builder."""

    def __init__(self, query_key: str = QUERY_STRING_PARAMETERS):
        if query_key not in (QUERY_STRING_PARAMETERS, LEGACY_QUERY_PARAMETERS):
            raise ValueError(f"Unsupported query parameter key: {query_key}")
        self.query_key = query_key

    def build(self, request: InvocationRequest) -> InvocationEnvelope:
        fields: Dict[str, Any] = {
            "resource": request.resource,
            "body": request.body,
            "httpMethod": request.method or DEFAULT_METHOD,
        }

        # Empty maps are left unset so they never serialize as {}.
        if request.auth_context:
            fields["requestContext"] = ApiGatewayRequestContext(authorizer=request.auth_context)
        if request.path_params:
            fields["pathParameters"] = request.path_params
        if request.query_params:
            fields[self.query_key] = request.query_params

        logger.debug(
            "Built envelope",
            extra={"function_name": request.service, "envelope_keys": sorted(fields)},
        )
        return InvocationEnvelope(**fields)
