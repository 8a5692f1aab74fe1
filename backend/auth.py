"""
Authentication module for Supabase session JWTs and API key validation.
Provides FastAPI dependencies for securing endpoints.

Sessions are issued by Supabase Auth; this service only verifies them:
- Supabase access tokens: HS256, signed with the project's JWT secret,
  audience "authenticated"
- API keys: "key" or "key:user_id", for scripts and automation
"""
import jwt
from fastapi import HTTPException, Header
from typing import Optional
import logging

from backend.settings import get_settings

logger = logging.getLogger(__name__)

SUPABASE_JWT_ALGORITHM = "HS256"


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key")
) -> str:
    """
    Authenticate via API key OR Supabase JWT.
    Returns user_id string.

    Usage:
        @app.get("/protected")
        async def protected_route(user_id: str = Depends(get_current_user)):
            return {"user_id": user_id}
    """
    # Option 1: API Key authentication
    if x_api_key:
        return validate_api_key(x_api_key)

    # Option 2: Supabase session JWT
    if authorization:
        return validate_jwt(authorization)

    raise HTTPException(
        status_code=401,
        detail="Missing authentication. Provide Authorization header or X-API-Key."
    )


def validate_api_key(api_key: str) -> str:
    """
    Validate API key and return user_id.

    API key format options:
    - Simple: "sk_test_abc123" -> returns "admin"
    - With user: "sk_test_abc123:user_12345" -> returns "user_12345"
    """
    valid_keys = get_settings().api_keys_list

    if not valid_keys:
        logger.warning("No API keys configured (API_KEYS env var empty)")
        raise HTTPException(status_code=401, detail="API key authentication not configured")

    key_part = api_key.split(":")[0]

    if key_part not in valid_keys:
        raise HTTPException(status_code=401, detail="Invalid API key")

    if ":" in api_key:
        return api_key.split(":", 1)[1]

    return "admin"


def validate_jwt(authorization: str) -> str:
    """Validate a Supabase access token and return the user id (sub claim)."""
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = authorization.split(" ", 1)[1]
    settings = get_settings()

    if not settings.supabase_jwt_secret:
        raise HTTPException(
            status_code=500,
            detail="JWT validation not configured (missing SUPABASE_JWT_SECRET)"
        )

    try:
        payload = jwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=[SUPABASE_JWT_ALGORITHM],
            audience=settings.supabase_jwt_audience,
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid Supabase JWT: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing user ID")
    logger.debug(f"Supabase JWT validated for user: {user_id}")
    return user_id


async def get_optional_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key")
) -> Optional[str]:
    """
    Returns user_id if authenticated, None otherwise.
    Screens use this to decide between rendering and redirecting to sign-in.
    """
    try:
        return await get_current_user(authorization, x_api_key)
    except HTTPException:
        return None
