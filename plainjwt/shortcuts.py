"""One-call helpers for the common token operations."""

from typing import Any

from .builder import Builder
from .claims import Clock
from .parsed import Parsed, parse
from .token import Token
from .validator import Validator


def builder() -> Builder:
    return Builder()


def validator() -> Validator:
    return Validator()


def create(
    identifier: str | int,
    secret: str,
    expiration: int,
    issuer: str,
    clock: Clock | None = None,
) -> Token:
    """Create a token with a minimal claim set.

    Args:
        identifier: Stored in the ``jti`` claim
        secret: Signing secret, checked against the secret policy
        expiration: Expiration as epoch seconds
        issuer: Stored in the ``iss`` claim

    Returns:
        The signed token.
    """
    return (
        Builder(clock=clock)
        .set_secret(secret)
        .set_issued_at()
        .set_jwt_id(str(identifier))
        .set_expiration(expiration)
        .set_issuer(issuer)
        .build()
    )


def custom_payload(payload: dict[str, Any], secret: str) -> Token:
    """Sign an arbitrary payload; reserved claims are still type-checked."""
    token_builder = Builder().set_secret(secret)
    for name, value in payload.items():
        token_builder = token_builder.set_custom_claim(name, value)
    return token_builder.build()


def validate(encoded: str, secret: str) -> bool:
    """Whether a wire token is well formed, authentic and currently usable."""
    return Validator().validate(Token(encoded=encoded, secret=secret)).valid


def parser(encoded: str, secret: str) -> Parsed:
    """Validate a wire token and decode it, raising the first failure."""
    token = Token(encoded=encoded, secret=secret)
    Validator().validate(token).raise_for_error()
    return parse(token)


def get_header(encoded: str, secret: str) -> dict[str, Any]:
    return dict(parser(encoded, secret).header)


def get_payload(encoded: str, secret: str) -> dict[str, Any]:
    return dict(parser(encoded, secret).payload)
