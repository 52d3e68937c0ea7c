# lambda_invoke/models/aws_v1.py

"""
Pydantic models for the API Gateway v1 (REST API) style envelope sent to the function.

Reference: https://docs.aws.amazon.com/apigateway/latest/developerguide/set-up-lambda-proxy-integrations.html#api-gateway-simple-proxy-for-lambda-input-format

Only the subset of the proxy event consumed by downstream handlers is modelled.
Use model_dump_json(exclude_unset=True) so that optional keys which were never
set stay out of the payload while an explicit null body is kept.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ApiGatewayRequestContext(BaseModel):
    """API Gateway Request Context object."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    authorizer: Dict[str, Any]


class InvocationEnvelope(BaseModel):
    """
    Request envelope (proxy integration event subset).

    `queryParameters` is the legacy spelling read by older handlers; a builder
    sets either it or `queryStringParameters`, never both.
    """

    # NaN and Infinity are written as bare constants so encode() can reject them.
    model_config = ConfigDict(ser_json_inf_nan="constants")

    resource: str
    body: Any = None
    httpMethod: str
    pathParameters: Optional[Dict[str, Any]] = None
    queryStringParameters: Optional[Dict[str, Any]] = None
    queryParameters: Optional[Dict[str, Any]] = None
    requestContext: Optional[ApiGatewayRequestContext] = None
