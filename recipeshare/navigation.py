"""
Routes and the navigation collaborator.

Controllers never render anything; when a flow finishes (a recipe is saved, the
session expires) they hand a route to the Navigator. The base Navigator records
where it was sent; front-ends subclass it to actually switch views.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

HOME = "/"
LOGIN = "/login"
REGISTER = "/register"
RECIPES = "/recipes"
ADD_RECIPE = "/add-recipe"
AI_ASSISTANT = "/ai-assistant"
ABOUT = "/about"

HISTORY_LIMIT = 20

_DETAIL_RE = re.compile(r"^/recipes/(?P<id>[^/]+)$")
_EDIT_RE = re.compile(r"^/recipes/edit/(?P<id>[^/]+)$")


def recipe_detail(recipe_id: str) -> str:
    return f"{RECIPES}/{recipe_id}"


def recipe_edit(recipe_id: str) -> str:
    return f"{RECIPES}/edit/{recipe_id}"


def parse_route(route: str) -> Tuple[str, Dict[str, str]]:
    """
    Split a route into a view name and its parameters.

    Returns:
        ("recipe_detail", {"id": ...}), ("recipe_edit", {"id": ...}), or
        (route, {}) for fixed routes.

    Raises:
        ValueError: If the route is not one the client knows
    """
    match = _EDIT_RE.match(route)
    if match:
        return "recipe_edit", {"id": match.group("id")}
    match = _DETAIL_RE.match(route)
    if match:
        return "recipe_detail", {"id": match.group("id")}
    if route in (HOME, LOGIN, REGISTER, RECIPES, ADD_RECIPE, AI_ASSISTANT, ABOUT):
        return route, {}
    raise ValueError(f"Unknown route: {route}")


class Navigator:
    """
    Records navigation requests; subclasses perform the actual switch.

    Only the last HISTORY_LIMIT routes are kept.
    """

    def __init__(self) -> None:
        self.history: List[str] = []

    @property
    def current(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def go(self, route: str) -> None:
        parse_route(route)
        logger.debug("Navigating to %s", route)
        self.history.append(route)
        del self.history[:-HISTORY_LIMIT]
