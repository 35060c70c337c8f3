"""
AI recipe assistant wizard.

Three linear stages:
1. COLLECT_INGREDIENTS: build the ingredient set, then ask for suggestions
2. CHOOSE_SUGGESTION: pick a suggestion, then ask for the detailed recipe
3. REVIEW_AND_SAVE: show the generated recipe, save it on request

The only backward edge: when generating the detailed recipe fails, the wizard
stays on stage 2 with the suggestions intact. restart() clears everything and
returns to stage 1.
"""

import asyncio
import logging
from enum import IntEnum
from typing import List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from recipeshare import navigation
from recipeshare.errors import ClientError, ValidationError, describe_error
from recipeshare.models import DetailedRecipeDraft, Suggestion
from recipeshare.navigation import Navigator
from recipeshare.services.ai import AIService
from recipeshare.services.recipes import RecipeService

logger = logging.getLogger(__name__)

STEP_LABELS = ["Enter Ingredients", "Choose Recipe Type", "View Recipe"]


class WizardStage(IntEnum):
    COLLECT_INGREDIENTS = 0
    CHOOSE_SUGGESTION = 1
    REVIEW_AND_SAVE = 2

    @property
    def label(self) -> str:
        return STEP_LABELS[self.value]


class AssistantWizard:
    """
    State and transitions of the AI assistant.

    Attributes:
        stage: Current WizardStage
        ingredients: Ingredient names collected on stage 1
        suggestions: Suggestions shown on stage 2
        selected: Suggestion chosen on stage 2
        draft: Generated recipe shown on stage 3
        error: Message of the last failure, cleared by the next action
        busy: True while a backend call is pending
    """

    def __init__(self, ai: AIService, recipes: RecipeService, navigator: Navigator) -> None:
        self._ai = ai
        self._recipes = recipes
        self._navigator = navigator
        self._generation = 0
        self.restart()

    def restart(self) -> None:
        """
        Back to stage 1 with all ephemeral state cleared.

        Calls still pending when the wizard restarts are ignored when they finish.
        """
        self._generation += 1
        self.stage = WizardStage.COLLECT_INGREDIENTS
        self.ingredients: List[str] = []
        self.suggestions: List[Suggestion] = []
        self.selected: Optional[Suggestion] = None
        self.draft: Optional[DetailedRecipeDraft] = None
        self.error: Optional[str] = None
        self.busy = False

    def _require_stage(self, stage: WizardStage) -> None:
        if self.stage != stage:
            raise RuntimeError(f"Action requires stage {stage.name}, wizard is at {self.stage.name}")

    def _restarted_since(self, generation: int) -> bool:
        if generation != self._generation:
            logger.info("Wizard restarted while a request was pending; dropping its result")
            return True
        return False

    # -- stage 1 -----------------------------------------------------------

    def add_ingredient(self, text: str) -> bool:
        """
        Add an ingredient; blanks and case-insensitive duplicates are ignored.

        Returns:
            True if the ingredient was added
        """
        self._require_stage(WizardStage.COLLECT_INGREDIENTS)
        value = text.strip()
        if not value or value.lower() in (item.lower() for item in self.ingredients):
            return False
        self.ingredients.append(value)
        self.error = None
        return True

    def remove_ingredient(self, index: int) -> None:
        self._require_stage(WizardStage.COLLECT_INGREDIENTS)
        del self.ingredients[index]

    async def request_suggestions(self) -> bool:
        """
        Ask the AI for dishes; advances to stage 2 on success.

        Returns:
            True if the wizard advanced
        """
        self._require_stage(WizardStage.COLLECT_INGREDIENTS)
        if not self.ingredients:
            self.error = "Please add at least one ingredient"
            return False
        self.error = None
        generation = self._generation
        self.busy = True
        try:
            suggestions = await asyncio.to_thread(self._ai.suggest, list(self.ingredients))
        except (ClientError, ValidationError) as e:
            if self._restarted_since(generation):
                return False
            self.suggestions = []
            self.error = describe_error(e, "Failed to get suggestions. Please try different ingredients.")
            return False
        finally:
            if generation == self._generation:
                self.busy = False
        if self._restarted_since(generation):
            return False
        self.suggestions = suggestions
        self.stage = WizardStage.CHOOSE_SUGGESTION
        return True

    # -- stage 2 -----------------------------------------------------------

    async def choose(self, choice: Union[int, Suggestion]) -> bool:
        """
        Generate the detailed recipe for a suggestion; advances to stage 3.

        On failure the wizard stays on stage 2 with the suggestions kept.

        Args:
            choice: Index into `suggestions` or one of its entries

        Returns:
            True if the wizard advanced
        """
        self._require_stage(WizardStage.CHOOSE_SUGGESTION)
        suggestion = self.suggestions[choice] if isinstance(choice, int) else choice
        self.selected = suggestion
        self.error = None
        generation = self._generation
        self.busy = True
        try:
            draft = await asyncio.to_thread(
                self._ai.detail,
                suggestion.dish_name,
                suggestion.cuisine,
                list(self.ingredients),
            )
        except (ClientError, ValidationError) as e:
            if self._restarted_since(generation):
                return False
            self.draft = None
            self.error = describe_error(e, "Failed to get recipe details. Please try again.")
            self.stage = WizardStage.CHOOSE_SUGGESTION
            return False
        finally:
            if generation == self._generation:
                self.busy = False
        if self._restarted_since(generation):
            return False
        self.draft = draft
        self.stage = WizardStage.REVIEW_AND_SAVE
        return True

    # -- stage 3 -----------------------------------------------------------

    async def save(self) -> Optional[str]:
        """
        Persist the generated recipe and navigate to it.

        On failure the stage is kept and the error surfaced; nothing is retried.
        A save that finishes after restart() does not navigate.

        Returns:
            Id of the new recipe, or None on failure
        """
        self._require_stage(WizardStage.REVIEW_AND_SAVE)
        self.error = None
        try:
            recipe_draft = self.draft.to_recipe_draft()
        except PydanticValidationError as e:
            logger.warning("Generated recipe cannot be saved as-is: %s", e)
            self.error = "The generated recipe is missing cooking time, servings or other required details"
            return None

        generation = self._generation
        self.busy = True
        try:
            recipe = await asyncio.to_thread(self._recipes.create, recipe_draft)
        except ClientError as e:
            if not self._restarted_since(generation):
                self.error = describe_error(e, "Failed to save recipe")
            return None
        finally:
            if generation == self._generation:
                self.busy = False

        logger.info("Saved assistant recipe %s as %s", recipe.title, recipe.id)
        if self._restarted_since(generation):
            return recipe.id
        self._navigator.go(navigation.recipe_detail(recipe.id))
        return recipe.id
