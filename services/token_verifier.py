"""Bearer token verification against an identity provider's published key set."""

import logging
from typing import Any, Dict, Optional

import jwt

import config

logger = logging.getLogger(__name__)

ALGORITHMS = ["RS256"]


class TokenVerificationError(Exception):
    """Raised when a token cannot be verified."""
    pass


class TokenVerifier:
    """Checks JWT signature, expiry and issuer.

    Signing keys are looked up by `kid` through a `jwt.PyJWKClient`, which
    fetches and caches the remote JWKS on first use.
    """

    def __init__(self, jwks_client: jwt.PyJWKClient, issuer: Optional[str] = None):
        self.jwks_client = jwks_client
        self.issuer = issuer

    @classmethod
    def for_cognito(cls, region: str = config.COGNITO_REGION,
                    user_pool_id: str = config.COGNITO_USER_POOL_ID) -> "TokenVerifier":
        """Build a verifier for an AWS Cognito user pool."""
        jwks_url = config.cognito_jwks_url(region, user_pool_id)
        logger.info(f"Token verifier using JWKS at {jwks_url}")
        return cls(
            jwt.PyJWKClient(jwks_url),
            issuer=config.cognito_issuer(region, user_pool_id),
        )

    def verify(self, token: str) -> Dict[str, Any]:
        """
        Verify a JWT and return its claims.

        Args:
            token: The encoded JWT, without the "Bearer " prefix

        Returns:
            The decoded claims

        Raises:
            TokenVerificationError: If the key cannot be resolved or the token is invalid
        """
        try:
            signing_key = self.jwks_client.get_signing_key_from_jwt(token)
            options = {"require": ["exp"]}
            if self.issuer:
                options["require"].append("iss")
            return jwt.decode(
                token,
                signing_key.key,
                algorithms=ALGORITHMS,
                issuer=self.issuer,
                options=options,
            )
        except jwt.PyJWTError as e:
            logger.warning(f"Token verification failed: {e}")
            raise TokenVerificationError(str(e)) from e


def parse_bearer_token(authorization: Optional[str]) -> str:
    """Extract the token from an `Authorization: Bearer <token>` header value."""
    if not authorization:
        raise TokenVerificationError("Missing Authorization header")
    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise TokenVerificationError("Authorization header must be 'Bearer <token>'")
    return token
