"""
Shared fixtures and in-memory fakes for the client tests.

The fakes stand in for the facades, so controller tests exercise real
asyncio.to_thread dispatch without any HTTP.
"""

import threading
from typing import Dict, List, Optional
from unittest.mock import Mock

import pytest

from recipeshare.errors import ClientError
from recipeshare.models import DetailedRecipeDraft, Identity, ListQuery, Pagination, Recipe, RecipePage, Suggestion
from recipeshare.navigation import Navigator
from recipeshare.session import SessionStore
from recipeshare.storage import MemoryStorage


def make_recipe(recipe_id: str, title: Optional[str] = None, author_id: str = "author-1", likes=()) -> Recipe:
    """Build a valid Recipe with sensible defaults."""
    return Recipe.model_validate({
        "_id": recipe_id,
        "title": title or f"Recipe {recipe_id}",
        "description": "Tasty",
        "cookingTime": 30,
        "servings": 4,
        "ingredients": ["egg", "salt"],
        "instructions": ["Mix", "Cook"],
        "likes": list(likes),
        "author": {"_id": author_id, "username": "chef"},
    })


class FakeRecipeService:
    """
    In-memory stand-in for RecipeService.

    list() answers with recipes whose ids encode the query ("<search>-p<page>-<n>")
    so tests can tell which response was applied. The page is read from the store
    when the request arrives, like a real server would; a threading.Event
    registered in `gates` under a page number then holds that response back until
    it is set.
    """

    def __init__(self, per_page: int = 3, total_pages: int = 5) -> None:
        self.per_page = per_page
        self.total_pages = total_pages
        self.list_calls: List[ListQuery] = []
        self.gates: Dict[int, threading.Event] = {}
        self.store: Dict[str, Recipe] = {}
        self.like_calls: List[str] = []
        self.created = []
        self.updated = []
        self.deleted: List[str] = []
        self.list_error: Optional[ClientError] = None
        self.like_error: Optional[ClientError] = None
        self.write_error: Optional[ClientError] = None
        self.liker_id = "user-1"

    def list(self, query: ListQuery) -> RecipePage:
        prefix = query.search_text.strip() or "all"
        recipes = []
        for n in range(self.per_page):
            recipe_id = f"{prefix}-p{query.page}-{n}"
            recipe = self.store.get(recipe_id) or make_recipe(recipe_id)
            self.store[recipe_id] = recipe
            recipes.append(recipe)
        self.list_calls.append(query)
        gate = self.gates.get(query.page)
        if gate is not None:
            assert gate.wait(timeout=5), "gate was never released"
        if self.list_error is not None:
            raise self.list_error
        return RecipePage(recipes=recipes, pagination=Pagination(total_pages=self.total_pages))

    def get_by_id(self, recipe_id: str) -> Recipe:
        if self.write_error is not None:
            raise self.write_error
        return self.store[recipe_id]

    def toggle_like(self, recipe_id: str) -> Recipe:
        self.like_calls.append(recipe_id)
        if self.like_error is not None:
            raise self.like_error
        recipe = self.store[recipe_id]
        likes = list(recipe.likes)
        if self.liker_id in likes:
            likes.remove(self.liker_id)
        else:
            likes.append(self.liker_id)
        updated = recipe.model_copy(update={"likes": likes})
        self.store[recipe_id] = updated
        return updated

    def create(self, draft) -> Recipe:
        self.created.append(draft)
        if self.write_error is not None:
            raise self.write_error
        recipe = make_recipe(f"new-{len(self.created)}", title=draft.title, author_id=self.liker_id)
        self.store[recipe.id] = recipe
        return recipe

    def update(self, recipe_id: str, draft) -> Recipe:
        self.updated.append((recipe_id, draft))
        if self.write_error is not None:
            raise self.write_error
        recipe = self.store[recipe_id].model_copy(update={"title": draft.title})
        self.store[recipe_id] = recipe
        return recipe

    def delete(self, recipe_id: str) -> None:
        self.deleted.append(recipe_id)
        if self.write_error is not None:
            raise self.write_error
        self.store.pop(recipe_id, None)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def session(storage):
    return SessionStore(storage)


@pytest.fixture
def navigator():
    return Navigator()


@pytest.fixture
def identity():
    return Identity.model_validate({"_id": "user-1", "username": "alice", "email": "alice@example.com", "token": "tok-123"})


@pytest.fixture
def logged_in(session, identity):
    """Session already in the Authenticated state."""
    session.login(identity)
    return session


@pytest.fixture
def recipe_service():
    return FakeRecipeService()


@pytest.fixture
def suggestions():
    return [
        Suggestion.model_validate({
            "dishName": "Shakshuka",
            "cuisine": "Middle Eastern",
            "briefDescription": "Eggs poached in tomato sauce",
            "additionalIngredientsNeeded": ["cumin"],
        }),
        Suggestion.model_validate({"dishName": "Frittata", "cuisine": "Italian"}),
    ]


@pytest.fixture
def detailed_draft():
    return DetailedRecipeDraft.model_validate({
        "title": "Shakshuka",
        "description": "Eggs poached in a spiced tomato sauce",
        "ingredients": ["4 eggs", "1 can tomatoes"],
        "instructions": ["Simmer the sauce", "Poach the eggs"],
        "cookingTime": 25,
        "servings": 2,
        "tips": ["Serve with bread"],
    })


@pytest.fixture
def ai_service(suggestions, detailed_draft):
    """Mocked AIService returning the fixture suggestions and draft."""
    service = Mock()
    service.suggest.return_value = suggestions
    service.detail.return_value = detailed_draft
    return service


@pytest.fixture
def recipe_factory():
    """The make_recipe helper, for tests that need ad-hoc recipes."""
    return make_recipe
