"""
Logging Configuration

Provides:
- CustomJsonFormatter: one JSON object per record, with invocation ID
- setup_logging: YAML dictConfig with environment variable substitution
"""

import json
import logging
import logging.config
import os
import string
from datetime import datetime, timezone
from typing import Optional

import yaml

from .request_context import get_invocation_id

DEFAULT_LOG_CONFIG_PATH = "config/logging.yml"


class CustomJsonFormatter(logging.Formatter):
    """
    JSON Formatter.

    Fields:
      - _time: ISO8601 timestamp (millisecond precision)
      - level: Log level
      - logger: Logger name (e.g. lambda_invoke.invoker)
      - message: Log message
      - invocation_id: ID of the invoke call that emitted the record
    """

    standard_attrs = {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }

    def format(self, record: logging.LogRecord) -> str:
        invocation_id = getattr(record, "invocation_id", None) or get_invocation_id()

        log_data = {
            "_time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if invocation_id:
            log_data["invocation_id"] = invocation_id

        # Include extra fields
        for key, value in record.__dict__.items():
            if key not in self.standard_attrs and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(config_path: Optional[str] = None, log_level: Optional[str] = None) -> None:
    """
    Load the YAML config, substitute environment variables, and initialize logging.

    Args:
        config_path: dictConfig YAML, LOG_CONFIG_PATH or config/logging.yml when omitted
        log_level: value for ${LOG_LEVEL}, taking precedence over the environment
    """
    if config_path is None:
        config_path = os.getenv("LOG_CONFIG_PATH", DEFAULT_LOG_CONFIG_PATH)

    if not os.path.exists(config_path):
        logging.basicConfig(level=log_level or logging.INFO)
        return

    with open(config_path, "r", encoding="utf-8") as f:
        # Supports ${LOG_LEVEL} format.
        template = string.Template(f.read())

    mapping = os.environ.copy()
    if log_level:
        mapping["LOG_LEVEL"] = log_level
    elif "LOG_LEVEL" not in mapping:
        mapping["LOG_LEVEL"] = "INFO"

    content = template.safe_substitute(mapping)
    config = yaml.safe_load(content)
    logging.config.dictConfig(config)
