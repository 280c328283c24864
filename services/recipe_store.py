import copy
from typing import Dict

from models.recipes import Recipe
from services.rwlock import ReadWriteLock


class RecipeStoreError(Exception):
    """Base class for recipe store errors."""

    def __init__(self, recipe_id: str, message: str):
        super().__init__(message)
        self.recipe_id = recipe_id


class RecipeNotFoundError(RecipeStoreError):
    """Raised when an operation targets a recipe id that is not stored."""

    def __init__(self, recipe_id: str):
        super().__init__(recipe_id, f"Recipe not found: {recipe_id}")


class RecipeExistsError(RecipeStoreError):
    """Raised when trying to add a recipe under an id that is already taken."""

    def __init__(self, recipe_id: str):
        super().__init__(recipe_id, f"Recipe already exists with slug: {recipe_id}")


class RecipeStore:
    """In-memory recipe records keyed by id.

    Recipes are opaque to the store. They are copied on the way in and on the
    way out, so callers never share state with the stored values. Reads run
    concurrently with each other; writes are exclusive.
    """

    def __init__(self):
        self._recipes: Dict[str, Recipe] = {}
        self._lock = ReadWriteLock()

    def add(self, recipe_id: str, recipe: Recipe) -> None:
        """Store `recipe` under a new id."""
        if not recipe_id:
            raise ValueError("Recipe id must not be empty")
        value = copy.deepcopy(recipe)
        with self._lock.write():
            if recipe_id in self._recipes:
                raise RecipeExistsError(recipe_id)
            self._recipes[recipe_id] = value

    def get(self, recipe_id: str) -> Recipe:
        with self._lock.read():
            try:
                value = self._recipes[recipe_id]
            except KeyError:
                raise RecipeNotFoundError(recipe_id) from None
            return copy.deepcopy(value)

    def list(self) -> Dict[str, Recipe]:
        """Snapshot of every stored recipe, taken at a single point in time."""
        with self._lock.read():
            return copy.deepcopy(self._recipes)

    def update(self, recipe_id: str, recipe: Recipe) -> Recipe:
        """Replace an existing recipe and return a copy of what was stored."""
        value = copy.deepcopy(recipe)
        with self._lock.write():
            if recipe_id not in self._recipes:
                raise RecipeNotFoundError(recipe_id)
            self._recipes[recipe_id] = value
        return copy.deepcopy(value)

    def remove(self, recipe_id: str) -> None:
        with self._lock.write():
            if recipe_id not in self._recipes:
                raise RecipeNotFoundError(recipe_id)
            del self._recipes[recipe_id]
