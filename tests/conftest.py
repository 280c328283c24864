import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from httpx import ASGITransport, AsyncClient
from jwt.exceptions import PyJWKClientError

from server import create_app
from services.recipe_store import RecipeStore
from services.token_verifier import TokenVerifier

ISSUER = "https://cognito-idp.eu-central-1.amazonaws.com/eu-central-1_test"
KEY_ID = "test-key"


@dataclass
class FakeSigningKey:
    key: Any


class FakeJWKClient:
    """Stands in for jwt.PyJWKClient with a single in-memory key."""

    def __init__(self, public_key, kid: str = KEY_ID):
        self.public_key = public_key
        self.kid = kid

    def get_signing_key_from_jwt(self, token: str) -> FakeSigningKey:
        header = jwt.get_unverified_header(token)
        if header.get("kid") != self.kid:
            raise PyJWKClientError(f'Unable to find a signing key that matches: "{header.get("kid")}"')
        return FakeSigningKey(self.public_key)


@pytest.fixture(scope="session")
def private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def make_token(private_key):
    """Sign a token with the test key; claims override the defaults."""
    def _make_token(claims: Optional[Dict[str, Any]] = None, kid: str = KEY_ID, key=None) -> str:
        payload = {
            "sub": "user-123",
            "iss": ISSUER,
            "exp": int(time.time()) + 300,
        }
        payload.update(claims or {})
        return jwt.encode(payload, key or private_key, algorithm="RS256", headers={"kid": kid})
    return _make_token


@pytest.fixture
def token_verifier(private_key):
    return TokenVerifier(FakeJWKClient(private_key.public_key()), issuer=ISSUER)


@pytest.fixture
def store():
    return RecipeStore()


@pytest.fixture
def app(store, token_verifier):
    return create_app(store=store, token_verifier=token_verifier)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
