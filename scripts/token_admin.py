#!/usr/bin/env python3
"""
Issue, inspect and revoke tokens from the command line.

Connects to the Redis store configured through TOKENS_* environment variables
(or the flags below) and runs a single token operation. Useful for support
staff and for smoke-testing a deployment.
"""

import argparse
import asyncio
import json
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from shared.config import TokenServiceConfig  # noqa: E402
from shared.logging import clear_context, configure_logging, set_request_id  # noqa: E402
from service_tokens.app.main import open_token_manager  # noqa: E402
from service_tokens.app.tokens import Token, TokenError  # noqa: E402


async def run(config: TokenServiceConfig, command: str, token_id: str, value: str = "") -> dict:
    """Execute one token operation and return a JSON-serialisable result."""
    async with open_token_manager(config) as manager:
        if command == "create":
            return (await manager.create(token_id)).to_dict()
        if command == "get":
            return (await manager.get(token_id)).to_dict()
        if command == "get-or-create":
            return (await manager.get_or_create(token_id)).to_dict()
        if command == "authenticate":
            await manager.authenticate(Token(id=token_id, value=value))
            return {"id": token_id, "authenticated": True}
        if command == "invalidate":
            await manager.invalidate(token_id)
            return {"id": token_id, "invalidated": True}

    raise ValueError(f"unknown command: {command}")


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage Redis-backed access tokens.")
    parser.add_argument("--redis-host", default=None, help="Redis host (default from TOKENS_REDIS_HOST)")
    parser.add_argument("--redis-port", type=int, default=None, help="Redis port (default from TOKENS_REDIS_PORT)")
    parser.add_argument("--redis-db", type=int, default=None, help="Redis database index")
    parser.add_argument("--prefix", default=None, help="Key prefix for token records")
    parser.add_argument("--ttl", type=int, default=None, help="Lifetime of new tokens in seconds")
    parser.add_argument("--request-id", default=None, help="Correlation id attached to every log line (default: random)")

    subparsers = parser.add_subparsers(dest="command", required=True)
    for name in ("create", "get", "get-or-create", "invalidate"):
        sub = subparsers.add_parser(name)
        sub.add_argument("id", help="Subject id the token is bound to")
    auth = subparsers.add_parser("authenticate")
    auth.add_argument("id", help="Subject id the token is bound to")
    auth.add_argument("value", help="Token value to check")
    return parser.parse_args(argv)


def _build_config(args: argparse.Namespace) -> TokenServiceConfig:
    overrides = {
        "redis_host": args.redis_host,
        "redis_port": args.redis_port,
        "redis_db": args.redis_db,
        "key_prefix": args.prefix,
        "token_ttl_seconds": args.ttl,
    }
    return TokenServiceConfig(**{k: v for k, v in overrides.items() if v is not None})


def main(argv=None) -> int:
    args = _parse_args(argv)
    config = _build_config(args)
    configure_logging("tokens", config.log_level)
    set_request_id(args.request_id)

    try:
        result = asyncio.run(run(config, args.command, args.id, getattr(args, "value", "")))
    except KeyboardInterrupt:
        return 130
    except TokenError as exc:
        print(f"[token-admin] {exc.code.value}: {exc.message}", file=sys.stderr)
        return 2
    except Exception as exc:  # pragma: no cover - CLI surface
        print(f"[token-admin] failed: {exc}", file=sys.stderr)
        return 1
    finally:
        clear_context()

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
