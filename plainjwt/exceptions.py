"""Errors raised while building, parsing and validating tokens."""


class TokenError(Exception):
    """Base class for all token errors."""

    reason = "token_error"


class InvalidStructureError(TokenError):
    """Token is not three non-empty dot-separated segments."""

    reason = "invalid_structure"


class MalformedSegmentError(InvalidStructureError):
    """A header or payload segment is not base64url encoded JSON."""

    reason = "malformed_segment"


class InvalidSignatureError(TokenError):
    """Recomputed signature does not match the token's signature."""

    reason = "invalid_signature"


class ExpiredError(TokenError):
    reason = "expired"


class NotYetUsableError(TokenError):
    reason = "not_yet_usable"


class WeakSecretError(TokenError):
    """Secret does not satisfy the secret policy."""

    reason = "weak_secret"


class SecretNotSetError(TokenError):
    reason = "secret_not_set"


class UnsupportedAlgorithmError(TokenError):
    reason = "unsupported_algorithm"


class InvalidClaimError(TokenError):
    """Reserved claim was given a value of the wrong type."""

    reason = "invalid_claim"
