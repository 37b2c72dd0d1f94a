"""Tests for the FastAPI bearer token dependency."""

import time

import pytest
from fastapi import HTTPException
from plainjwt.config import config
from plainjwt.dependencies import get_token_claims
from plainjwt.shortcuts import create

SECRET = "foo1234He$$llo56"


@pytest.mark.asyncio
async def test_get_token_claims_valid():
    """Test that a valid bearer token is parsed."""
    original_secret = config.tokens.secret

    try:
        config.tokens.secret = SECRET
        token = create(1, SECRET, int(time.time()) + 300, "localhost")
        parsed = await get_token_claims(f"Bearer {token.encoded}")
        assert parsed.issuer == "localhost"
        assert parsed.jwt_id == "1"
    finally:
        config.tokens.secret = original_secret


@pytest.mark.asyncio
@pytest.mark.parametrize("authorization", [None, "", "Basic abc", "Token abc"])
async def test_get_token_claims_missing(authorization):
    """Test that a missing bearer token raises 401."""
    original_secret = config.tokens.secret

    try:
        config.tokens.secret = SECRET
        with pytest.raises(HTTPException) as exc_info:
            await get_token_claims(authorization)
        assert exc_info.value.status_code == 401
    finally:
        config.tokens.secret = original_secret


@pytest.mark.asyncio
async def test_get_token_claims_expired():
    """Test that an expired token raises 401 with the reason."""
    original_secret = config.tokens.secret

    try:
        config.tokens.secret = SECRET
        token = create(1, SECRET, int(time.time()) - 100, "localhost")
        with pytest.raises(HTTPException) as exc_info:
            await get_token_claims(f"Bearer {token.encoded}")
        assert exc_info.value.status_code == 401
        assert "expired" in exc_info.value.detail
    finally:
        config.tokens.secret = original_secret


@pytest.mark.asyncio
async def test_get_token_claims_wrong_secret():
    """Test that a token signed with another secret raises 401."""
    original_secret = config.tokens.secret

    try:
        config.tokens.secret = "bar9876Wo$$rld12"
        token = create(1, SECRET, int(time.time()) + 300, "localhost")
        with pytest.raises(HTTPException) as exc_info:
            await get_token_claims(f"Bearer {token.encoded}")
        assert exc_info.value.status_code == 401
        assert "invalid_signature" in exc_info.value.detail
    finally:
        config.tokens.secret = original_secret


@pytest.mark.asyncio
async def test_get_token_claims_not_configured():
    """Test that a missing secret raises 500."""
    original_secret = config.tokens.secret

    try:
        config.tokens.secret = ""
        with pytest.raises(HTTPException) as exc_info:
            await get_token_claims("Bearer a.b.c")
        assert exc_info.value.status_code == 500
    finally:
        config.tokens.secret = original_secret
