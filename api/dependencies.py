"""Shared FastAPI dependencies, resolved from the application state."""

from fastapi import Request

from services.recipe_store import RecipeStore
from services.token_verifier import TokenVerifier


def get_recipe_store(request: Request) -> RecipeStore:
    """Provide the store the application was built with."""
    return request.app.state.recipe_store


def get_token_verifier(request: Request) -> TokenVerifier:
    return request.app.state.token_verifier
