"""
Invoker configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class InvokerConfig(BaseSettings):
    """
    Configuration for the Lambda client and the invoker built on top of it.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(
        default="config/logging.yml", description="Logging dictConfig YAML path"
    )

    # Lambda client settings
    AWS_REGION: Optional[str] = Field(default=None, description="Region for the Lambda client")
    LAMBDA_ENDPOINT_URL: Optional[str] = Field(
        default=None, description="Endpoint override, e.g. a local Lambda emulator"
    )
    LAMBDA_CONNECT_TIMEOUT: float = Field(default=10.0, description="Connect timeout (seconds)")
    LAMBDA_READ_TIMEOUT: float = Field(default=300.0, description="Read timeout (seconds)")
    LAMBDA_MAX_ATTEMPTS: int = Field(
        default=1, ge=1, description="botocore total attempts, 1 disables retries"
    )
    VERIFY_SSL: bool = Field(default=True, description="Whether to verify SSL certificates")

    # Envelope settings
    LEGACY_QUERY_KEY: bool = Field(
        default=False, description="Send query parameters as queryParameters"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )
