"""API dependencies for service injection and authentication.

This module provides:
- Access to the process-wide TranslationService built at startup
- Optional API key authentication for network-exposed deployments
"""

import logging
import secrets
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, Request

from healthcare_translator.config import settings
from healthcare_translator.core.translation import TranslationService

logger = logging.getLogger(__name__)


# =============================================================================
# Service Dependencies
# =============================================================================


def get_translation_service(request: Request) -> TranslationService:
    """Return the TranslationService created in the application lifespan."""
    service = getattr(request.app.state, "translation_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Translation service not initialized")
    return service


TranslationServiceDep = Annotated[TranslationService, Depends(get_translation_service)]


# =============================================================================
# Authentication Dependencies
# =============================================================================


async def verify_api_token(
    authorization: Annotated[Optional[str], Header()] = None,
    x_api_key: Annotated[Optional[str], Header(alias="X-API-Key")] = None,
) -> bool:
    """Verify API token for sensitive endpoints.

    Supports two authentication methods:
    1. Authorization: Bearer <token>
    2. X-API-Key: <token>

    If API_AUTH_TOKEN is not set in environment, authentication is disabled
    (for local development).

    Raises:
        HTTPException: 401 if auth is required but token is invalid/missing
    """
    if not settings.api_auth_token:
        return True

    token = None
    if authorization and authorization.startswith("Bearer "):
        token = authorization[7:]
    elif x_api_key:
        token = x_api_key

    if not token:
        raise HTTPException(
            status_code=401,
            detail="Authentication required. Provide Authorization: Bearer <token> or X-API-Key header.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Use constant-time comparison to prevent timing attacks
    if not secrets.compare_digest(token, settings.api_auth_token):
        logger.warning("Rejected request with invalid API token")
        raise HTTPException(
            status_code=401,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return True


RequireAuth = Annotated[bool, Depends(verify_api_token)]
