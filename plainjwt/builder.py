"""Fluent token builder."""

import copy
import logging
from typing import Any

from . import claims, codec
from .claims import Clock
from .config import config
from .exceptions import SecretNotSetError
from .secret import SecretPolicy
from .token import Token

logger = logging.getLogger(__name__)


class Builder:
    """Accumulate claims and sign them into a Token.

    Every setter returns a new builder and leaves the original untouched, so a
    partially configured builder can be shared as a template::

        base = Builder().set_secret(secret).set_issuer("localhost")
        token = base.set_subject("payments").build()

    Args:
        algorithm: HMAC algorithm for the ``alg`` header (default from config)
        token_type: Value of the ``typ`` header (default from config)
        policy: Secret policy checked by ``build()``
        clock: Callable returning epoch seconds, used by ``set_issued_at``
            when no time is passed
    """

    def __init__(
        self,
        algorithm: str | None = None,
        token_type: str | None = None,
        policy: SecretPolicy | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._algorithm = algorithm or config.tokens.algorithm
        self._type = token_type or config.tokens.type
        self._policy = policy or SecretPolicy()
        self._clock = clock or claims.now
        self._secret: str | None = None
        self._header: dict[str, Any] = {}
        self._payload: dict[str, Any] = {}

    def _replace(self, **attrs: Any) -> "Builder":
        clone = copy.copy(self)
        clone._header = dict(self._header)
        clone._payload = dict(self._payload)
        for name, value in attrs.items():
            setattr(clone, name, value)
        return clone

    def _with_claim(self, location: str, name: str, value: Any) -> "Builder":
        value = copy.deepcopy(claims.check(name, value, location))
        clone = self._replace()
        if location == claims.HEADER:
            clone._header[name] = value
        else:
            clone._payload[name] = value
        return clone

    def set_secret(self, secret: str) -> "Builder":
        return self._replace(_secret=secret)

    def set_algorithm(self, algorithm: str) -> "Builder":
        return self._replace(_algorithm=claims.check("alg", algorithm, claims.HEADER))

    def set_type(self, token_type: str) -> "Builder":
        return self._replace(_type=claims.check("typ", token_type, claims.HEADER))

    def set_content_type(self, content_type: str) -> "Builder":
        return self._with_claim(claims.HEADER, "cty", content_type)

    def set_header_claim(self, name: str, value: Any) -> "Builder":
        if name == "alg":
            return self.set_algorithm(value)
        if name == "typ":
            return self.set_type(value)
        return self._with_claim(claims.HEADER, name, value)

    def set_issuer(self, issuer: str) -> "Builder":
        return self._with_claim(claims.PAYLOAD, "iss", issuer)

    def set_subject(self, subject: str) -> "Builder":
        return self._with_claim(claims.PAYLOAD, "sub", subject)

    def set_audience(self, audience: str | list[str]) -> "Builder":
        return self._with_claim(claims.PAYLOAD, "aud", audience)

    def set_expiration(self, timestamp: int) -> "Builder":
        return self._with_claim(claims.PAYLOAD, "exp", timestamp)

    def set_not_before(self, timestamp: int) -> "Builder":
        return self._with_claim(claims.PAYLOAD, "nbf", timestamp)

    def set_issued_at(self, timestamp: int | None = None) -> "Builder":
        if timestamp is None:
            timestamp = self._clock()
        return self._with_claim(claims.PAYLOAD, "iat", timestamp)

    def set_jwt_id(self, jwt_id: str) -> "Builder":
        return self._with_claim(claims.PAYLOAD, "jti", jwt_id)

    def set_custom_claim(self, name: str, value: Any) -> "Builder":
        """Add a payload claim; reserved names are still type-checked."""
        return self._with_claim(claims.PAYLOAD, name, value)

    def get_header(self) -> dict[str, Any]:
        return {"typ": self._type, "alg": self._algorithm, **copy.deepcopy(self._header)}

    def get_payload(self) -> dict[str, Any]:
        return copy.deepcopy(self._payload)

    def build(self) -> Token:
        """Encode and sign the accumulated claims.

        Raises:
            SecretNotSetError: If no secret was set
            WeakSecretError: If the secret fails the secret policy
            UnsupportedAlgorithmError: If the algorithm is not an HMAC one
        """
        if not self._secret:
            raise SecretNotSetError("A secret must be set before building a token")
        self._policy.validate(self._secret)

        header = codec.encode_segment(self.get_header())
        payload = codec.encode_segment(self._payload)
        signature = codec.sign(header, payload, self._secret, self._algorithm)

        logger.debug("Built %s token with claims: %s", self._algorithm, ", ".join(self._payload))
        return Token(encoded=f"{header}.{payload}.{signature}", secret=self._secret)
