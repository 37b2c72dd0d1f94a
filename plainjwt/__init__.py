"""plainjwt - HMAC signed JSON Web Tokens."""

from .builder import Builder
from .exceptions import (
    ExpiredError,
    InvalidClaimError,
    InvalidSignatureError,
    InvalidStructureError,
    MalformedSegmentError,
    NotYetUsableError,
    SecretNotSetError,
    TokenError,
    UnsupportedAlgorithmError,
    WeakSecretError,
)
from .parsed import Parsed, parse
from .secret import SecretPolicy
from .shortcuts import create, custom_payload, get_header, get_payload, validate
from .token import Token
from .validator import Validation, Validator

try:
    from importlib.metadata import version
    __version__ = version("plainjwt")
except Exception:
    __version__ = "unknown"

__all__ = [
    "Builder",
    "ExpiredError",
    "InvalidClaimError",
    "InvalidSignatureError",
    "InvalidStructureError",
    "MalformedSegmentError",
    "NotYetUsableError",
    "Parsed",
    "SecretNotSetError",
    "SecretPolicy",
    "Token",
    "TokenError",
    "UnsupportedAlgorithmError",
    "Validation",
    "Validator",
    "WeakSecretError",
    "create",
    "custom_payload",
    "get_header",
    "get_payload",
    "parse",
    "validate",
]
