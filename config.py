"""Environment-driven settings for the recipes API."""

import os
from typing import List

from dotenv import load_dotenv

# Pick up a local .env before reading anything
load_dotenv()

HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8080"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

COGNITO_REGION: str = os.getenv("COGNITO_REGION", "eu-central-1")
COGNITO_USER_POOL_ID: str = os.getenv("COGNITO_USER_POOL_ID", "eu-central-1_RDs64szop")

if not 0 < PORT < 65536:
    raise ValueError(f"Invalid PORT: {PORT}. Must be between 1 and 65535")


def cognito_issuer(region: str = COGNITO_REGION, user_pool_id: str = COGNITO_USER_POOL_ID) -> str:
    """Issuer claim expected in tokens minted by the user pool."""
    return f"https://cognito-idp.{region}.amazonaws.com/{user_pool_id}"


def cognito_jwks_url(region: str = COGNITO_REGION, user_pool_id: str = COGNITO_USER_POOL_ID) -> str:
    return f"{cognito_issuer(region, user_pool_id)}/.well-known/jwks.json"
