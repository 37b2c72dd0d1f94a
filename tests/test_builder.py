"""Tests for the token builder."""

import time

import pytest
from plainjwt import codec
from plainjwt.builder import Builder
from plainjwt.exceptions import (
    InvalidClaimError,
    SecretNotSetError,
    UnsupportedAlgorithmError,
    WeakSecretError,
)
from plainjwt.parsed import parse
from plainjwt.token import Token
from plainjwt.validator import Validator

SECRET = "foo1234He$$llo56"


def test_build():
    """Test building a token with an issuer."""
    token = Builder().set_secret(SECRET).set_issuer("localhost").build()

    assert isinstance(token, Token)
    assert token.encoded.count(".") == 2
    assert token.get_secret() == SECRET
    assert SECRET not in token.encoded
    assert SECRET not in repr(token)


def test_build_header():
    """Test the default header and explicit header claims."""
    token = Builder().set_secret(SECRET).set_content_type("nested").build()
    header = parse(token).header

    assert dict(header) == {"typ": "JWT", "alg": "HS256", "cty": "nested"}
    assert list(header) == ["typ", "alg", "cty"]


def test_build_type_and_algorithm():
    """Test overriding the type and algorithm."""
    token = (
        Builder()
        .set_secret(SECRET)
        .set_type("at+jwt")
        .set_header_claim("alg", "HS512")
        .build()
    )
    parsed = parse(token)

    assert parsed.type == "at+jwt"
    assert parsed.algorithm == "HS512"
    assert Validator().validate(token)


def test_build_round_trip():
    """Test that every claim set on the builder is in the payload."""
    now = int(time.time())
    token = (
        Builder()
        .set_secret(SECRET)
        .set_issuer("localhost")
        .set_subject("payments")
        .set_audience(["users", "admins"])
        .set_expiration(now + 300)
        .set_not_before(now - 10)
        .set_issued_at(now)
        .set_jwt_id("he6236Yui")
        .set_custom_claim("uid", 42)
        .set_custom_claim("roles", {"admin": True})
        .build()
    )
    payload = dict(parse(token).payload)

    assert payload == {
        "iss": "localhost",
        "sub": "payments",
        "aud": ["users", "admins"],
        "exp": now + 300,
        "nbf": now - 10,
        "iat": now,
        "jti": "he6236Yui",
        "uid": 42,
        "roles": {"admin": True},
    }
    assert Validator().validate(token)


def test_builder_is_immutable():
    """Test that setters return a new builder."""
    base = Builder().set_secret(SECRET)
    first = base.set_issuer("first")
    second = base.set_subject("second")

    assert base.get_payload() == {}
    assert first.get_payload() == {"iss": "first"}
    assert second.get_payload() == {"sub": "second"}

    assert first.build().encoded == first.build().encoded


def test_set_audience_tuple():
    """Test that an audience sequence is stored as a list."""
    builder = Builder().set_audience(("users", "admins"))
    assert builder.get_payload()["aud"] == ["users", "admins"]


def test_set_custom_claim_copies_value():
    """Test that later changes to a claim value are not picked up."""
    roles = ["admin"]
    builder = Builder().set_custom_claim("roles", roles)
    roles.append("user")
    assert builder.get_payload()["roles"] == ["admin"]


def test_set_issued_at_uses_clock():
    """Test that issued at defaults to the clock."""
    builder = Builder(clock=lambda: 1234).set_issued_at()
    assert builder.get_payload()["iat"] == 1234


@pytest.mark.parametrize(
    "name,value",
    [
        ("exp", "tomorrow"),
        ("exp", True),
        ("nbf", 1.5),
        ("iat", None),
        ("iss", 7),
        ("aud", ["users", 7]),
        ("aud", {"users": 1}),
        ("jti", 1),
    ],
)
def test_set_claim_wrong_type(name, value):
    """Test that reserved claims are type-checked."""
    with pytest.raises(InvalidClaimError):
        Builder().set_custom_claim(name, value)


def test_build_without_secret():
    """Test that a secret is required."""
    with pytest.raises(SecretNotSetError):
        Builder().set_issuer("localhost").build()


def test_build_weak_secret():
    """Test that a weak secret produces no token."""
    with pytest.raises(WeakSecretError):
        Builder().set_secret("hello").set_issuer("localhost").build()


def test_build_unsupported_algorithm():
    """Test that only HMAC algorithms can be used."""
    with pytest.raises(UnsupportedAlgorithmError):
        Builder(algorithm="RS256").set_secret(SECRET).build()


def test_build_signature():
    """Test that the signature covers header and payload."""
    token = Builder().set_secret(SECRET).set_issuer("localhost").build()
    header, payload, signature = token.segments()
    assert codec.sign(header, payload, SECRET, "HS256") == signature


def test_reserved_names_checked_by_location():
    """Test that header claim names are free-form in the payload and vice versa."""
    builder = Builder().set_custom_claim("alg", 5).set_header_claim("exp", "soon")
    assert builder.get_payload() == {"alg": 5}
    assert builder.get_header()["exp"] == "soon"

    with pytest.raises(InvalidClaimError):
        Builder().set_header_claim("cty", 5)
    with pytest.raises(InvalidClaimError):
        Builder().set_header_claim("alg", 5)
