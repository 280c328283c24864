import logging
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, status
from slugify import slugify

from api.dependencies import get_recipe_store
from models.recipes import Recipe
from models.responses import CreateRecipeResponse, DetailResponse
from services.recipe_store import RecipeExistsError, RecipeNotFoundError, RecipeStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("", response_model=Dict[str, Recipe])
def list_recipes(store: RecipeStore = Depends(get_recipe_store)):
    """Get every stored recipe, keyed by slug."""
    return store.list()


@router.post("", response_model=CreateRecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(recipe: Recipe, store: RecipeStore = Depends(get_recipe_store)):
    """Store a new recipe under the slug of its name."""
    slug = slugify(recipe.name)
    if not slug:
        raise HTTPException(
            status_code=400,
            detail="Recipe name must contain at least one letter or digit",
        )

    try:
        store.add(slug, recipe)
    except RecipeExistsError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=409, detail=str(e))

    logger.info(f"Created recipe {slug}")
    return {"id": slug}


@router.get("/{recipe_id}", response_model=Recipe)
def get_recipe(recipe_id: str, store: RecipeStore = Depends(get_recipe_store)):
    try:
        return store.get(recipe_id)
    except RecipeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{recipe_id}", response_model=Recipe)
def update_recipe(recipe_id: str, recipe: Recipe, store: RecipeStore = Depends(get_recipe_store)):
    """Replace a recipe. The slug stays the same even if the name changes."""
    try:
        updated = store.update(recipe_id, recipe)
    except RecipeNotFoundError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=404, detail=str(e))

    logger.info(f"Updated recipe {recipe_id}")
    return updated


@router.delete("/{recipe_id}", response_model=DetailResponse)
def delete_recipe(recipe_id: str, store: RecipeStore = Depends(get_recipe_store)):
    """Delete a recipe by its slug."""
    try:
        store.remove(recipe_id)
    except RecipeNotFoundError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=404, detail=str(e))

    logger.info(f"Deleted recipe {recipe_id}")
    return {"detail": "Recipe deleted successfully"}
