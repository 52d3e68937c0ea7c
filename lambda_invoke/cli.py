#!/usr/bin/env python3
import argparse
import json
import sys
from typing import Dict, List, Optional

from lambda_invoke.config import InvokerConfig
from lambda_invoke.core.exceptions import LambdaInvokeError
from lambda_invoke.core.logging_config import setup_logging
from lambda_invoke.models.request import InvocationRequest
from lambda_invoke.services.lambda_invoker import LambdaInvoker


def _key_value(raw: str) -> tuple:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{raw}'")
    return key, value


def _function_name(raw: str) -> str:
    if not raw.strip():
        raise argparse.ArgumentTypeError("function name must not be empty")
    return raw


def _json_value(raw: str):
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"--body is not valid JSON: {e}") from e


def _to_map(pairs: Optional[List[tuple]]) -> Optional[Dict[str, str]]:
    return dict(pairs) if pairs else None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lambda-invoke",
        description="Invoke a Lambda function as if it were an HTTP endpoint",
    )
    parser.add_argument("function", type=_function_name, help="Function name or ARN")
    parser.add_argument("--resource", "-r", default="", help="Route, e.g. /users/{id}")
    parser.add_argument("--method", "-X", default="", help="HTTP method (default: GET)")
    parser.add_argument("--body", "-d", type=_json_value, default=None, help="JSON request body")
    parser.add_argument(
        "--path-param", "-p", type=_key_value, action="append", help="Path parameter KEY=VALUE"
    )
    parser.add_argument(
        "--query", "-q", type=_key_value, action="append", help="Query parameter KEY=VALUE"
    )
    parser.add_argument(
        "--auth", "-a", type=_key_value, action="append", help="Authorizer claim KEY=VALUE"
    )
    parser.add_argument(
        "--legacy-query-key",
        action="store_true",
        help="Send query parameters as queryParameters instead of queryStringParameters",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = InvokerConfig()
    if args.legacy_query_key:
        config.LEGACY_QUERY_KEY = True
    setup_logging(config.LOG_CONFIG_PATH, log_level=config.LOG_LEVEL)

    request = InvocationRequest(
        service=args.function,
        resource=args.resource,
        body=args.body,
        method=args.method,
        path_params=_to_map(args.path_param),
        query_params=_to_map(args.query),
        auth_context=_to_map(args.auth),
    )

    try:
        invoker = LambdaInvoker.from_config(config)
        result = invoker.invoke(request)
    except LambdaInvokeError as e:
        print(f"lambda-invoke: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
