"""
Recipe facade: CRUD, listing and likes under /recipes.
"""

from recipeshare.models import ListQuery, Recipe, RecipeDraft, RecipePage
from recipeshare.services.base import BaseService

INVALID_RECIPE_RESPONSE = "Invalid recipe data received"


class RecipeService(BaseService):
    """Typed wrapper over the /recipes resource."""

    def list(self, query: ListQuery) -> RecipePage:
        """
        Fetch one page of the library.

        Args:
            query: Page, page size, sort and search parameters

        Returns:
            RecipePage with the recipes and pagination metadata
        """
        payload = self.client.get("/recipes", query=query.to_params())
        return self._parse(RecipePage, payload, "Invalid recipe list received")

    def get_by_id(self, recipe_id: str) -> Recipe:
        payload = self.client.get(f"/recipes/{recipe_id}")
        return self._parse(Recipe, payload, INVALID_RECIPE_RESPONSE)

    def create(self, draft: RecipeDraft) -> Recipe:
        payload = self.client.post("/recipes", draft.to_payload())
        return self._parse(Recipe, payload, INVALID_RECIPE_RESPONSE)

    def update(self, recipe_id: str, draft: RecipeDraft) -> Recipe:
        payload = self.client.put(f"/recipes/{recipe_id}", draft.to_payload())
        return self._parse(Recipe, payload, INVALID_RECIPE_RESPONSE)

    def delete(self, recipe_id: str) -> None:
        self.client.delete(f"/recipes/{recipe_id}")

    def toggle_like(self, recipe_id: str) -> Recipe:
        """
        Like or unlike a recipe for the current user.

        Returns:
            The recipe as confirmed by the server, with updated likes
        """
        payload = self.client.post(f"/recipes/{recipe_id}/like")
        return self._parse(Recipe, payload, INVALID_RECIPE_RESPONSE)
