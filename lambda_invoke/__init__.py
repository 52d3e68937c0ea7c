"""
Invoke AWS Lambda functions as if they were HTTP endpoints.
"""

from .config import InvokerConfig
from .core.event_builder import EventBuilder, ProxyEventBuilder
from .core.exceptions import (
    ClientSetupError,
    DecodingError,
    EncodingError,
    FunctionInvocationError,
    LambdaInvokeError,
    NonSuccessStatusError,
    TransportError,
)
from .models import InvocationEnvelope, InvocationRequest, InvocationResult
from .services import Boto3LambdaTransport, LambdaInvoker, LambdaTransport

__all__ = [
    "InvokerConfig",
    "EventBuilder",
    "ProxyEventBuilder",
    "ClientSetupError",
    "DecodingError",
    "EncodingError",
    "FunctionInvocationError",
    "LambdaInvokeError",
    "NonSuccessStatusError",
    "TransportError",
    "InvocationEnvelope",
    "InvocationRequest",
    "InvocationResult",
    "Boto3LambdaTransport",
    "LambdaInvoker",
    "LambdaTransport",
]
