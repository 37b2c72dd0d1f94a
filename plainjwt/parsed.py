"""Typed access to a decoded token."""

import copy
from types import MappingProxyType
from typing import Any, Mapping

from . import claims, codec
from .claims import Clock
from .token import Token


class Parsed:
    """Header, payload and signature of a token.

    Decoding does not validate: an expired or forged token can still be
    inspected.  Missing or mistyped reserved claims read as ``""`` or ``0``.
    """

    def __init__(
        self,
        token: Token,
        header: dict[str, Any],
        payload: dict[str, Any],
        signature: str,
        clock: Clock | None = None,
    ) -> None:
        self._token = token
        self._header = copy.deepcopy(dict(header))
        self._payload = copy.deepcopy(dict(payload))
        self._signature = signature
        self._clock = clock or claims.now

    def _claim(self, name: str) -> Any:
        return copy.deepcopy(claims.lookup(name, self._header, self._payload))

    @property
    def token(self) -> Token:
        return self._token

    @property
    def header(self) -> Mapping[str, Any]:
        """Read-only copy of the header; nested values are copies too."""
        return MappingProxyType(copy.deepcopy(self._header))

    @property
    def payload(self) -> Mapping[str, Any]:
        return MappingProxyType(copy.deepcopy(self._payload))

    @property
    def signature(self) -> str:
        return self._signature

    @property
    def issuer(self) -> str:
        return self._claim("iss")

    @property
    def subject(self) -> str:
        return self._claim("sub")

    @property
    def audience(self) -> str | list[str]:
        return self._claim("aud")

    @property
    def expiration(self) -> int:
        return self._claim("exp")

    @property
    def not_before(self) -> int:
        return self._claim("nbf")

    @property
    def issued_at(self) -> int:
        return self._claim("iat")

    @property
    def jwt_id(self) -> str:
        return self._claim("jti")

    @property
    def algorithm(self) -> str:
        return self._claim("alg")

    @property
    def type(self) -> str:
        return self._claim("typ")

    @property
    def content_type(self) -> str:
        return self._claim("cty")

    @property
    def expires_in(self) -> int:
        """Seconds until expiration, 0 when absent or already past."""
        return max(0, self.expiration - self._clock()) if self.expiration else 0

    @property
    def usable_in(self) -> int:
        """Seconds until the token becomes usable, 0 when already usable."""
        return max(0, self.not_before - self._clock()) if self.not_before else 0


def parse(token: Token, clock: Clock | None = None) -> Parsed:
    """Decode a token without validating it.

    Raises:
        InvalidStructureError: If the token is not three segments
        MalformedSegmentError: If header or payload cannot be decoded
    """
    header, payload, signature = token.segments()
    codec.check_segment(signature)
    return Parsed(
        token,
        codec.decode_segment(header),
        codec.decode_segment(payload),
        signature,
        clock=clock,
    )
