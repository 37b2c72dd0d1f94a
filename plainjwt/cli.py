"""Command-line interface."""

import argparse
import json
import logging
import sys

from .claims import now
from .config import config
from .exceptions import TokenError
from .parsed import parse
from .shortcuts import create
from .token import Token
from .validator import Validator


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="plainjwt token tool")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Create command
    create_parser = subparsers.add_parser("create", help="Create a signed token")
    create_parser.add_argument("--id", required=True, help="Token identifier (jti claim)")
    create_parser.add_argument("--issuer", required=True, help="Issuer (iss claim)")
    create_parser.add_argument(
        "--expires-in",
        type=int,
        default=config.tokens.expire_seconds,
        help="Seconds until expiration",
    )
    create_parser.add_argument("--secret", default=config.tokens.secret, help="Signing secret")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Decode a token without validating it")
    parse_parser.add_argument("token", help="Encoded token")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a token")
    validate_parser.add_argument("token", help="Encoded token")
    validate_parser.add_argument("--secret", default=config.tokens.secret, help="Verification secret")

    args = parser.parse_args(argv)

    logging.basicConfig(level=config.logging.level, format=config.logging.format)

    try:
        if args.command == "create":
            token = create(args.id, args.secret, now() + args.expires_in, args.issuer)
            print(token.encoded)
        elif args.command == "parse":
            parsed = parse(Token(encoded=args.token, secret=""))
            print(json.dumps({"header": dict(parsed.header), "payload": dict(parsed.payload)}, indent=2))
        elif args.command == "validate":
            result = Validator().validate(Token(encoded=args.token, secret=args.secret))
            print("valid" if result else result.reason)
            return 0 if result else 1
        else:
            parser.print_help()
    except TokenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
