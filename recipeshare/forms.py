"""
Recipe form values and client-side validation.

RecipeForm holds what the user typed (numeric fields may still be strings)
and validate() turns it into a RecipeDraft or raises ValidationError with the
first failing check. Invalid forms never reach the network.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from recipeshare.errors import ValidationError
from recipeshare.models import Recipe, RecipeDraft


def _positive_int(value: Union[int, str, None]) -> Optional[int]:
    """Parse a positive integer from form input, or return None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdecimal():
        number = int(value.strip())
        return number if number > 0 else None
    return None


@dataclass
class RecipeForm:
    """
    Editable recipe form.

    Ingredient and instruction lists always keep at least one row, matching the
    one-empty-input-per-list starting state of the form.
    """

    title: str = ""
    description: str = ""
    cooking_time: Union[int, str] = ""
    servings: Union[int, str] = ""
    ingredients: List[str] = field(default_factory=lambda: [""])
    instructions: List[str] = field(default_factory=lambda: [""])

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeForm":
        return cls(
            title=recipe.title or "",
            description=recipe.description or "",
            cooking_time=recipe.cooking_time,
            servings=recipe.servings,
            ingredients=list(recipe.ingredients) or [""],
            instructions=list(recipe.instructions) or [""],
        )

    def add_ingredient(self) -> None:
        self.ingredients.append("")

    def remove_ingredient(self, index: int) -> None:
        if len(self.ingredients) > 1:
            del self.ingredients[index]

    def add_instruction(self) -> None:
        self.instructions.append("")

    def remove_instruction(self, index: int) -> None:
        if len(self.instructions) > 1:
            del self.instructions[index]

    def validate(self) -> RecipeDraft:
        """
        Check the form and build the request body.

        Raises:
            ValidationError: With the message of the first failing check
        """
        if not self.title.strip():
            raise ValidationError("Title is required")
        if not self.description.strip():
            raise ValidationError("Description is required")
        cooking_time = _positive_int(self.cooking_time)
        if cooking_time is None:
            raise ValidationError("Valid cooking time is required")
        servings = _positive_int(self.servings)
        if servings is None:
            raise ValidationError("Valid number of servings is required")
        if not self.ingredients or any(not item.strip() for item in self.ingredients):
            raise ValidationError("All ingredients must be filled")
        if not self.instructions or any(not item.strip() for item in self.instructions):
            raise ValidationError("All instructions must be filled")
        return RecipeDraft(
            title=self.title,
            description=self.description,
            cooking_time=cooking_time,
            servings=servings,
            ingredients=self.ingredients,
            instructions=self.instructions,
        )
