"""FastAPI authentication dependencies."""

import logging

from fastapi import Header, HTTPException, status

from .config import config
from .parsed import Parsed, parse
from .token import Token
from .validator import Validator

logger = logging.getLogger(__name__)


async def get_token_claims(
    authorization: str | None = Header(None),
) -> Parsed:
    """FastAPI dependency: validate the bearer token and return its claims.

    Returns:
        The parsed token.

    Raises:
        HTTPException 401: when the token is missing or invalid.
        HTTPException 500: when no token secret is configured.
    """
    if not config.tokens.secret:
        logger.error("Request rejected: no token secret configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Token secret is not configured",
        )

    if not authorization or not authorization.startswith("Bearer "):
        logger.warning("Request rejected: Missing bearer token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid Authorization header. Use: Bearer <token>",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = Token(
        encoded=authorization.removeprefix("Bearer ").strip(),
        secret=config.tokens.secret,
    )

    result = Validator().validate(token)
    if not result:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {result.reason}",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return parse(token)
