import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException

from api.dependencies import get_token_verifier
from models.responses import TokenStatusResponse
from services.token_verifier import TokenVerificationError, TokenVerifier, parse_bearer_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["scheduler"])


@router.get("/scheduler", response_model=TokenStatusResponse)
def scheduler(
    authorization: Optional[str] = Header(default=None),
    verifier: TokenVerifier = Depends(get_token_verifier),
):
    """Check the caller's bearer token against the identity provider."""
    try:
        token = parse_bearer_token(authorization)
        claims = verifier.verify(token)
    except TokenVerificationError as e:
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info("The token is valid.")
    return {"detail": "Token is valid", "subject": claims.get("sub")}
