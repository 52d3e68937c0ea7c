"""
Invocation result models.

The function answers with proxy-integration framing whose body is itself JSON text.
"""

from http import HTTPStatus

from pydantic import BaseModel, ConfigDict


class InvocationResult(BaseModel):
    """
    Outer response envelope returned by the function.

    Extra proxy response keys (headers, isBase64Encoded) are ignored.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    statusCode: int
    body: str

    @property
    def is_success(self) -> bool:
        """Only an exact 200 counts as success."""
        return self.statusCode == HTTPStatus.OK
