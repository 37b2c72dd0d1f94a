"""Token validation.

Checks run in a fixed order and stop at the first failure:

    structure -> signature -> expiration -> not before
"""

import logging
from typing import Any

from . import claims, codec
from .claims import Clock
from .exceptions import (
    ExpiredError,
    InvalidSignatureError,
    NotYetUsableError,
    TokenError,
    UnsupportedAlgorithmError,
)
from .secret import SecretPolicy
from .token import Token

logger = logging.getLogger(__name__)


class Validation:
    """Outcome of validating a token; truthy when the token is valid."""

    def __init__(self, error: TokenError | None = None) -> None:
        self.error = error

    @property
    def valid(self) -> bool:
        return self.error is None

    @property
    def reason(self) -> str:
        return "" if self.error is None else self.error.reason

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error

    def __bool__(self) -> bool:
        return self.valid

    def __repr__(self) -> str:
        if self.valid:
            return "Validation(valid)"
        return f"Validation(invalid: {self.reason})"


class Validator:
    """Decide whether a token is authentic and usable right now."""

    def __init__(self, policy: SecretPolicy | None = None, clock: Clock | None = None) -> None:
        self._policy = policy or SecretPolicy()
        self._clock = clock or claims.now

    def structure(self, token: Token) -> tuple[dict[str, Any], dict[str, Any]]:
        """Decode header and payload, raising InvalidStructureError."""
        header, payload, signature = token.segments()
        decoded = codec.decode_segment(header), codec.decode_segment(payload)
        codec.check_segment(signature)
        return decoded

    def signature(self, token: Token, header: dict[str, Any]) -> None:
        secret = token.get_secret()
        self._policy.validate(secret)

        algorithm = header.get("alg")
        if not isinstance(algorithm, str) or algorithm not in codec.ALGORITHMS:
            raise UnsupportedAlgorithmError(f"Unsupported algorithm: {algorithm!r}")

        header_segment, payload_segment, signature_segment = token.segments()
        if not codec.verify(header_segment, payload_segment, signature_segment, secret, algorithm):
            raise InvalidSignatureError("Token signature is invalid")

    def expiration(self, payload: dict[str, Any]) -> None:
        if "exp" not in payload:
            return
        exp = payload["exp"]
        if not claims.is_integer(exp):
            raise ExpiredError("Expiration claim is not an integer")
        if self._clock() >= exp:
            raise ExpiredError("Token has expired")

    def not_before(self, payload: dict[str, Any]) -> None:
        if "nbf" not in payload:
            return
        nbf = payload["nbf"]
        if not claims.is_integer(nbf):
            raise NotYetUsableError("Not before claim is not an integer")
        if self._clock() < nbf:
            raise NotYetUsableError("Token is not yet usable")

    def check(self, token: Token) -> None:
        """Run every stage, raising the first failure."""
        header, payload = self.structure(token)
        self.signature(token, header)
        self.expiration(payload)
        self.not_before(payload)

    def validate(self, token: Token) -> Validation:
        """Validate a token without raising."""
        try:
            self.check(token)
        except TokenError as e:
            logger.warning("Token rejected: %s (%s)", e.reason, e)
            return Validation(e)
        return Validation()
