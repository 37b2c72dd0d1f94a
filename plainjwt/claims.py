"""Reserved claim table and clock."""

import time
from typing import Any, Callable, NamedTuple

from .exceptions import InvalidClaimError

HEADER = "header"
PAYLOAD = "payload"


class Claim(NamedTuple):
    location: str
    kind: str  # "string", "integer" or "audience"
    default: Any


CLAIMS: dict[str, Claim] = {
    "iss": Claim(PAYLOAD, "string", ""),
    "sub": Claim(PAYLOAD, "string", ""),
    "aud": Claim(PAYLOAD, "audience", ""),
    "exp": Claim(PAYLOAD, "integer", 0),
    "nbf": Claim(PAYLOAD, "integer", 0),
    "iat": Claim(PAYLOAD, "integer", 0),
    "jti": Claim(PAYLOAD, "string", ""),
    "alg": Claim(HEADER, "string", ""),
    "typ": Claim(HEADER, "string", ""),
    "cty": Claim(HEADER, "string", ""),
}


def now() -> int:
    """Current time in epoch seconds."""
    return int(time.time())


Clock = Callable[[], int]


def is_integer(value: Any) -> bool:
    # bool is an int subclass but never a valid epoch
    return isinstance(value, int) and not isinstance(value, bool)


def matches(kind: str, value: Any) -> bool:
    """Whether value has the type a claim of this kind requires."""
    if kind == "integer":
        return is_integer(value)
    if kind == "string":
        return isinstance(value, str)
    if kind == "audience":
        if isinstance(value, str):
            return True
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    raise ValueError(f"Unknown claim kind: {kind}")


def check(name: str, value: Any, location: str = PAYLOAD) -> Any:
    """Return value if it suits reserved claim ``name``, else raise.

    Names outside the table, or reserved for the other location, pass
    through unchecked.
    """
    claim = CLAIMS.get(name)
    if claim is None or claim.location != location:
        return value
    if claim.kind == "audience" and isinstance(value, (list, tuple)):
        value = list(value)
    if not matches(claim.kind, value):
        raise InvalidClaimError(
            f"Claim {name!r} must be {claim.kind}, got {type(value).__name__}"
        )
    return value


def lookup(name: str, header: dict, payload: dict) -> Any:
    """Read a reserved claim, falling back to its default."""
    claim = CLAIMS[name]
    source = header if claim.location == HEADER else payload
    value = source.get(name, claim.default)
    if not matches(claim.kind, value):
        return claim.default
    return value
