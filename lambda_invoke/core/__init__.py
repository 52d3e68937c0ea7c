"""
Core logic package.

Provides envelope building, exceptions and logging setup.
"""

from .event_builder import EventBuilder, ProxyEventBuilder
from .exceptions import (
    ClientSetupError,
    DecodingError,
    EncodingError,
    FunctionInvocationError,
    LambdaInvokeError,
    NonSuccessStatusError,
    TransportError,
)

__all__ = [
    "EventBuilder",
    "ProxyEventBuilder",
    "ClientSetupError",
    "DecodingError",
    "EncodingError",
    "FunctionInvocationError",
    "LambdaInvokeError",
    "NonSuccessStatusError",
    "TransportError",
]
