"""
Custom exception classes.

Represent errors related to Lambda invocation.
"""

from typing import Optional, Union


class LambdaInvokeError(Exception):
    """Base exception class for Lambda invocation."""

    pass


class ClientSetupError(LambdaInvokeError):
    """Raised when the Lambda client cannot be constructed."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Could not create Lambda client: {cause}")


class EncodingError(LambdaInvokeError):
    """Raised when the request envelope cannot be serialized."""

    def __init__(self, function_name: str, cause: Exception):
        self.function_name = function_name
        self.cause = cause
        super().__init__(f"Could not encode payload for {function_name}: {cause}")


class TransportError(LambdaInvokeError):
    """Raised when the remote call fails for any reason."""

    def __init__(self, function_name: str, cause: Exception):
        self.function_name = function_name
        self.cause = cause
        super().__init__(f"Lambda client error for {function_name}: {cause}")


class FunctionInvocationError(LambdaInvokeError):
    """Raised by the transport when the function itself reported an error (X-Amz-Function-Error)."""

    def __init__(self, function_name: str, function_error: str, payload: bytes = b""):
        self.function_name = function_name
        self.function_error = function_error
        self.payload = payload
        super().__init__(f"Function {function_name} returned {function_error}")


class DecodingError(LambdaInvokeError):
    """Raised when the outer envelope or the inner body cannot be decoded."""

    def __init__(
        self,
        function_name: str,
        payload: Union[bytes, str],
        cause: Optional[Exception] = None,
    ):
        self.function_name = function_name
        self.payload = payload
        self.cause = cause
        super().__init__(f"Error during unmarshal of {function_name} response: {cause}")


class NonSuccessStatusError(LambdaInvokeError):
    """Raised when the envelope status code is not 200."""

    def __init__(self, function_name: str, status_code: int, payload: bytes):
        self.function_name = function_name
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"Non 200 status code from {function_name}: {status_code}")
