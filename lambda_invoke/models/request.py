"""
Invocation request model.

Describes one HTTP-like call to a Lambda function, independent of wire format.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class InvocationRequest(BaseModel):
    """
    Input data for one invocation.

    Empty and absent parameter maps are equivalent: neither reaches the envelope.
    """

    service: str = Field(..., min_length=1, description="Target function name or ARN")
    resource: str = Field(default="", description="Logical route, e.g. /users/{id}")
    body: Any = None
    method: str = Field(default="", description="HTTP verb, GET when empty")
    path_params: Optional[Dict[str, Any]] = None
    query_params: Optional[Dict[str, Any]] = None
    auth_context: Optional[Dict[str, Any]] = Field(
        default=None, description="Pre-validated authorizer claims forwarded verbatim"
    )
