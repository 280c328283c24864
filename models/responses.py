from typing import Optional
from pydantic import BaseModel


class CreateRecipeResponse(BaseModel):
    id: str


class DetailResponse(BaseModel):
    detail: str


class TokenStatusResponse(BaseModel):
    detail: str
    subject: Optional[str] = None
