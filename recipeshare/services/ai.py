"""
AI facade: ingredient-based suggestions and detailed recipe generation.

Both endpoints are backed by a model the client knows nothing about, so their
responses are checked strictly: an empty suggestion list or a detail payload
without title/ingredients/instructions is a ShapeError with a specific message.
"""

import logging
from typing import Iterable, List

from pydantic import ValidationError as PydanticValidationError

from recipeshare.errors import ShapeError, ValidationError
from recipeshare.models import DetailedRecipeDraft, Suggestion
from recipeshare.services.base import BaseService

logger = logging.getLogger(__name__)

NO_SUGGESTIONS_MESSAGE = "No recipe suggestions available for these ingredients"
INVALID_DETAIL_MESSAGE = "Invalid recipe details received"


def _clean_ingredients(ingredients: Iterable[str]) -> List[str]:
    """Trim, drop blanks and duplicates, keep first-seen order."""
    seen = set()
    cleaned = []
    for ingredient in ingredients:
        value = ingredient.strip()
        if value and value.lower() not in seen:
            seen.add(value.lower())
            cleaned.append(value)
    if not cleaned:
        raise ValidationError("Please add at least one ingredient")
    return cleaned


class AIService(BaseService):
    """Wrapper over /ai/suggest and /ai/detail."""

    def suggest(self, ingredients: Iterable[str]) -> List[Suggestion]:
        """
        Ask for dishes that can be made from the given ingredients.

        Args:
            ingredients: Non-empty collection of ingredient names

        Returns:
            Non-empty list of suggestions

        Raises:
            ValidationError: No usable ingredient was given (no request is made)
            ShapeError: The response has no suggestions or malformed entries
        """
        payload = self.client.post("/ai/suggest", {"ingredients": _clean_ingredients(ingredients)})
        raw = payload.get("suggestions") if isinstance(payload, dict) else None
        if not isinstance(raw, list) or not raw:
            logger.warning("Suggestion response had no suggestions")
            raise ShapeError(NO_SUGGESTIONS_MESSAGE)
        try:
            return [Suggestion.model_validate(item) for item in raw]
        except PydanticValidationError as e:
            logger.warning("Malformed suggestion entry: %s", e)
            raise ShapeError(NO_SUGGESTIONS_MESSAGE) from e

    def detail(self, dish_name: str, cuisine: str, ingredients: Iterable[str]) -> DetailedRecipeDraft:
        """
        Generate a full recipe for a chosen suggestion.

        Raises:
            ShapeError: Title, ingredients or instructions missing from the response
        """
        body = {
            "dishName": dish_name,
            "cuisine": cuisine,
            "ingredients": _clean_ingredients(ingredients),
        }
        payload = self.client.post("/ai/detail", body)
        return self._parse(DetailedRecipeDraft, payload, INVALID_DETAIL_MESSAGE)
