"""
Add/edit recipe flow.

RecipeEditor owns a RecipeForm. For a new recipe it starts empty; for an
existing one load() fetches the recipe and checks the current user may edit
it (author or admin), redirecting to the recipe's page otherwise.
"""

import asyncio
import logging
from typing import Optional

from recipeshare import navigation
from recipeshare.errors import ClientError, ValidationError, describe_error
from recipeshare.forms import RecipeForm
from recipeshare.models import Recipe
from recipeshare.navigation import Navigator
from recipeshare.services.recipes import RecipeService
from recipeshare.session import SessionStore

logger = logging.getLogger(__name__)


class RecipeEditor:
    """
    Controller behind the add-recipe and edit-recipe views.

    Attributes:
        form: Current form values
        recipe_id: Id of the recipe loaded for editing, None when creating
        error: Message to display, cleared by the next submit
        loading: True while the recipe is being fetched
    """

    def __init__(self, recipes: RecipeService, session: SessionStore, navigator: Navigator) -> None:
        self._recipes = recipes
        self._session = session
        self._navigator = navigator
        self.form = RecipeForm()
        self.recipe_id: Optional[str] = None
        self.error: Optional[str] = None
        self.loading = False

    @property
    def is_editing(self) -> bool:
        return self.recipe_id is not None

    async def load(self, recipe_id: str) -> bool:
        """
        Fill the form from an existing recipe.

        Returns:
            True if the form is ready for editing
        """
        self.error = None
        self.loading = True
        try:
            recipe: Recipe = await asyncio.to_thread(self._recipes.get_by_id, recipe_id)
        except ClientError as e:
            self.error = describe_error(e, "Failed to load recipe")
            return False
        finally:
            self.loading = False

        if not recipe.can_be_edited_by(self._session.identity):
            logger.info("User may not edit recipe %s; redirecting", recipe_id)
            self._navigator.go(navigation.recipe_detail(recipe_id))
            return False
        self.recipe_id = recipe_id
        self.form = RecipeForm.from_recipe(recipe)
        return True

    async def submit(self) -> Optional[Recipe]:
        """
        Validate and send the form.

        Creating navigates to the library; updating navigates to the recipe.
        Validation failures are reported without any request.

        Returns:
            The saved recipe, or None on failure
        """
        self.error = None
        try:
            draft = self.form.validate()
        except ValidationError as e:
            self.error = e.message
            return None

        try:
            if self.is_editing:
                recipe = await asyncio.to_thread(self._recipes.update, self.recipe_id, draft)
            else:
                recipe = await asyncio.to_thread(self._recipes.create, draft)
        except ClientError as e:
            fallback = "Failed to update recipe" if self.is_editing else "Failed to create recipe"
            self.error = describe_error(e, fallback)
            return None

        if self.is_editing:
            self._navigator.go(navigation.recipe_detail(recipe.id))
        else:
            self.form = RecipeForm()
            self._navigator.go(navigation.RECIPES)
        return recipe
