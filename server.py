import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

import config
from api.routes.recipes import router as recipes_router
from api.routes.scheduler import router as scheduler_router
from services.recipe_store import RecipeStore
from services.token_verifier import TokenVerifier

logger = logging.getLogger(__name__)


def setup_logging(level: str = config.LOG_LEVEL) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )

    # Reduce verbosity of external libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def create_app(
    store: Optional[RecipeStore] = None,
    token_verifier: Optional[TokenVerifier] = None,
) -> FastAPI:
    """
    Build the API around an explicitly owned store.

    Args:
        store: Recipe store shared by every request; a fresh one if omitted
        token_verifier: Verifier for the scheduler endpoint; Cognito if omitted

    Returns:
        The configured FastAPI application
    """
    app = FastAPI(title="Recipe API")

    app.state.recipe_store = RecipeStore() if store is None else store
    app.state.token_verifier = TokenVerifier.for_cognito() if token_verifier is None else token_verifier

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=PlainTextResponse)
    async def home():
        return "This is my home page"

    app.include_router(recipes_router)
    app.include_router(scheduler_router)

    return app


setup_logging()
app = create_app()

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Recipe API on {config.HOST}:{config.PORT}")
    uvicorn.run(
        app,
        host=config.HOST,
        port=config.PORT,
        timeout_graceful_shutdown=60,
        limit_concurrency=100,
    )
