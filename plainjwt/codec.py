"""Segment encoding and HMAC signatures.

A token on the wire is ``header.payload.signature`` where each part is
base64url encoded without ``=`` padding.  Header and payload are compact JSON
objects; the signature is the HMAC of ``header.payload`` under the secret.
"""

import hmac
import json
import re
from typing import Any

from jwt.algorithms import HMACAlgorithm
from jwt.exceptions import InvalidKeyError
from jwt.utils import base64url_decode, base64url_encode

from .exceptions import (
    InvalidStructureError,
    MalformedSegmentError,
    UnsupportedAlgorithmError,
    WeakSecretError,
)

ALGORITHMS = {
    "HS256": HMACAlgorithm(HMACAlgorithm.SHA256),
    "HS384": HMACAlgorithm(HMACAlgorithm.SHA384),
    "HS512": HMACAlgorithm(HMACAlgorithm.SHA512),
}

_SEGMENT = re.compile(r"[A-Za-z0-9_-]+")


def supported_algorithms() -> list[str]:
    return list(ALGORITHMS)


def encode_segment(data: dict[str, Any]) -> str:
    """Serialize a claim map to compact JSON and base64url encode it."""
    raw = json.dumps(data, separators=(",", ":")).encode("utf-8")
    return base64url_encode(raw).decode("ascii")


def decode_segment(segment: str) -> dict[str, Any]:
    """Decode a header or payload segment back into a claim map.

    Raises:
        MalformedSegmentError: If the segment is not base64url encoded JSON
            or does not hold a JSON object.
    """
    check_segment(segment)
    try:
        data = json.loads(base64url_decode(segment))
    except (ValueError, RecursionError) as e:
        raise MalformedSegmentError(f"Segment could not be decoded: {e}") from e
    if not isinstance(data, dict):
        raise MalformedSegmentError("Segment is not a JSON object")
    return data


def check_segment(segment: str) -> None:
    """Raise MalformedSegmentError unless segment uses the base64url alphabet."""
    if not _SEGMENT.fullmatch(segment):
        raise MalformedSegmentError("Segment is not base64url encoded")


def split(encoded: str) -> tuple[str, str, str]:
    """Split a wire token into header, payload and signature segments."""
    parts = encoded.split(".")
    if len(parts) != 3 or not all(parts):
        raise InvalidStructureError(
            "Token must have three non-empty segments separated by '.'"
        )
    return parts[0], parts[1], parts[2]


def _algorithm(algorithm: str) -> HMACAlgorithm:
    try:
        return ALGORITHMS[algorithm]
    except (KeyError, TypeError):
        raise UnsupportedAlgorithmError(f"Unsupported algorithm: {algorithm!r}")


def sign(header_segment: str, payload_segment: str, secret: str, algorithm: str) -> str:
    """Compute the signature segment for header and payload segments."""
    alg = _algorithm(algorithm)
    try:
        key = alg.prepare_key(secret)
    except InvalidKeyError as e:
        raise WeakSecretError(str(e)) from e
    message = f"{header_segment}.{payload_segment}".encode("ascii")
    return base64url_encode(alg.sign(message, key)).decode("ascii")


def verify(
    header_segment: str,
    payload_segment: str,
    signature_segment: str,
    secret: str,
    algorithm: str,
) -> bool:
    """Check a signature segment in constant time."""
    expected = sign(header_segment, payload_segment, secret, algorithm)
    return hmac.compare_digest(
        expected.encode("ascii"), signature_segment.encode("utf-8")
    )
