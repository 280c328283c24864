from typing import List
from pydantic import BaseModel, ConfigDict, Field


class Ingredient(BaseModel):
    name: str

    model_config = ConfigDict(extra="forbid")


class Recipe(BaseModel):
    """A recipe as accepted and returned by the API."""
    name: str = Field(min_length=1)
    ingredients: List[Ingredient] = Field(default_factory=list)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Ham and cheese toasties",
                "ingredients": [
                    {"name": "bread"},
                    {"name": "ham"},
                    {"name": "cheese"}
                ]
            }
        }
    )
