"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .aws_v1 import ApiGatewayRequestContext, InvocationEnvelope
from .request import InvocationRequest
from .result import InvocationResult

__all__ = [
    "ApiGatewayRequestContext",
    "InvocationEnvelope",
    "InvocationRequest",
    "InvocationResult",
]
