import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from lambda_invoke.config import InvokerConfig
from lambda_invoke.core.exceptions import ClientSetupError

logger = logging.getLogger("lambda_invoke.clients")


def create_lambda_client(config: InvokerConfig):
    """
    Create a boto3 Lambda client from config.

    Build it once and share it; boto3 clients are safe to use from several threads.

    Raises:
        ClientSetupError: botocore could not build the client (no region,
            malformed endpoint URL).
    """
    client_config = Config(
        connect_timeout=config.LAMBDA_CONNECT_TIMEOUT,
        read_timeout=config.LAMBDA_READ_TIMEOUT,
        retries={"total_max_attempts": config.LAMBDA_MAX_ATTEMPTS, "mode": "standard"},
    )
    try:
        client = boto3.client(
            "lambda",
            region_name=config.AWS_REGION,
            endpoint_url=config.LAMBDA_ENDPOINT_URL,
            verify=config.VERIFY_SSL,
            config=client_config,
        )
    except (BotoCoreError, ValueError) as e:
        logger.error(
            "Could not create Lambda client",
            extra={
                "region": config.AWS_REGION,
                "endpoint_url": config.LAMBDA_ENDPOINT_URL,
                "error_type": type(e).__name__,
                "error_detail": str(e),
            },
        )
        raise ClientSetupError(e) from e

    logger.debug(
        "Lambda client created",
        extra={"region": client.meta.region_name, "endpoint_url": client.meta.endpoint_url},
    )
    return client
