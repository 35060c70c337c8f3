"""Recipe detail view controller: load, like, delete, edit."""

import asyncio
import logging
from typing import Optional

from recipeshare import navigation
from recipeshare.errors import ClientError, describe_error
from recipeshare.models import Recipe
from recipeshare.navigation import Navigator
from recipeshare.services.recipes import RecipeService
from recipeshare.session import SessionStore

logger = logging.getLogger(__name__)


class RecipeDetailController:
    """Holds one recipe and the actions available on it."""

    def __init__(self, recipes: RecipeService, session: SessionStore, navigator: Navigator) -> None:
        self._recipes = recipes
        self._session = session
        self._navigator = navigator
        self.recipe: Optional[Recipe] = None
        self.error: Optional[str] = None
        self.loading = False

    @property
    def can_edit(self) -> bool:
        return self.recipe is not None and self.recipe.can_be_edited_by(self._session.identity)

    @property
    def liked(self) -> bool:
        return self.recipe is not None and self.recipe.is_liked_by(self._session.identity)

    async def load(self, recipe_id: str) -> Optional[Recipe]:
        self.error = None
        self.loading = True
        try:
            self.recipe = await asyncio.to_thread(self._recipes.get_by_id, recipe_id)
        except ClientError as e:
            self.error = describe_error(e, "Failed to load recipe")
            return None
        finally:
            self.loading = False
        return self.recipe

    async def toggle_like(self) -> Optional[Recipe]:
        """
        Like or unlike the held recipe; the server's copy replaces it on success.

        Anonymous users are redirected to login without a request.
        """
        if self.recipe is None:
            return None
        if not self._session.is_authenticated:
            self._navigator.go(navigation.LOGIN)
            return None
        try:
            self.recipe = await asyncio.to_thread(self._recipes.toggle_like, self.recipe.id)
        except ClientError as e:
            logger.warning("Toggling like on %s failed: %s", self.recipe.id, e)
            self.error = describe_error(e, "Failed to update like")
            return None
        return self.recipe

    async def delete(self) -> bool:
        """Delete the recipe and go back to the library."""
        if self.recipe is None or not self.can_edit:
            return False
        try:
            await asyncio.to_thread(self._recipes.delete, self.recipe.id)
        except ClientError as e:
            self.error = describe_error(e, "Failed to delete recipe")
            return False
        logger.info("Deleted recipe %s", self.recipe.id)
        self._navigator.go(navigation.RECIPES)
        return True

    def edit(self) -> bool:
        if not self.can_edit:
            return False
        self._navigator.go(navigation.recipe_edit(self.recipe.id))
        return True
