"""
Tests for the backend facades with a mocked ApiClient.

Facades build the right request and parse responses strictly: anything that
does not match the expected shape is a ShapeError.
"""

from unittest.mock import Mock

import pytest

from recipeshare.errors import ShapeError, ValidationError
from recipeshare.http_client import ApiClient
from recipeshare.models import Credentials, ListQuery, RecipeDraft, RegistrationProfile, SortKey, SortOrder
from recipeshare.services import AIService, AuthService, RecipeService
from recipeshare.services.ai import INVALID_DETAIL_MESSAGE, NO_SUGGESTIONS_MESSAGE

RECIPE_PAYLOAD = {
    "_id": "r1",
    "title": "Soup",
    "description": "Warm",
    "cookingTime": 30,
    "servings": 2,
    "ingredients": ["water", "salt"],
    "instructions": ["Boil"],
    "likes": [],
    "author": {"_id": "u1", "username": "chef"},
    "createdAt": "2024-05-01T10:00:00Z",
}


@pytest.fixture
def client():
    return Mock(spec=ApiClient)


class TestRecipeService:
    """Tests for RecipeService."""

    def test_list_sends_query_params(self, client):
        client.get.return_value = {"recipes": [RECIPE_PAYLOAD], "pagination": {"totalPages": 3}}
        query = ListQuery(page=2, page_size=12, sort_key=SortKey.POPULARITY, sort_order=SortOrder.ASC, search_text=" soup ")

        page = RecipeService(client).list(query)

        client.get.assert_called_once_with(
            "/recipes",
            query={"page": 2, "limit": 12, "sort": "likes", "order": "asc", "search": "soup"},
        )
        assert page.pagination.total_pages == 3
        assert page.recipes[0].cooking_time == 30
        assert page.recipes[0].author.username == "chef"

    def test_list_rejects_malformed_payload(self, client):
        client.get.return_value = {"recipes": [{"title": "no id"}]}

        with pytest.raises(ShapeError):
            RecipeService(client).list(ListQuery())

    def test_get_by_id_accepts_bare_author_id(self, client):
        client.get.return_value = {**RECIPE_PAYLOAD, "author": "u9"}

        recipe = RecipeService(client).get_by_id("r1")

        client.get.assert_called_once_with("/recipes/r1")
        assert recipe.author.id == "u9"

    def test_create_posts_camel_case_body(self, client):
        client.post.return_value = RECIPE_PAYLOAD
        draft = RecipeDraft(
            title="Soup",
            description="Warm",
            cooking_time=30,
            servings=2,
            ingredients=["water"],
            instructions=["Boil"],
        )

        RecipeService(client).create(draft)

        path, body = client.post.call_args.args
        assert path == "/recipes"
        assert body["cookingTime"] == 30
        assert "cooking_time" not in body

    def test_update_puts_to_recipe(self, client):
        client.put.return_value = RECIPE_PAYLOAD
        draft = RecipeDraft(
            title="Soup", description="Warm", cooking_time=30, servings=2, ingredients=["a"], instructions=["b"]
        )

        RecipeService(client).update("r1", draft)

        assert client.put.call_args.args[0] == "/recipes/r1"

    def test_toggle_like_returns_server_copy(self, client):
        client.post.return_value = {**RECIPE_PAYLOAD, "likes": ["u2", {"_id": "u3"}]}

        recipe = RecipeService(client).toggle_like("r1")

        client.post.assert_called_once_with("/recipes/r1/like")
        assert recipe.likes == ["u2", "u3"]

    def test_delete(self, client):
        client.delete.return_value = None

        RecipeService(client).delete("r1")

        client.delete.assert_called_once_with("/recipes/r1")


class TestAuthService:
    """Tests for AuthService."""

    def test_login_with_nested_user(self, client):
        client.post.return_value = {"token": "t1", "user": {"_id": "u1", "username": "alice", "role": "user"}}

        identity = AuthService(client).login(Credentials(email="a@example.com", password="pw"))

        client.post.assert_called_once_with("/auth/login", {"email": "a@example.com", "password": "pw"})
        assert identity.token == "t1"
        assert identity.username == "alice"

    def test_register_with_flat_payload(self, client):
        client.post.return_value = {"token": "t2", "_id": "u2", "username": "bob"}

        identity = AuthService(client).register(
            RegistrationProfile(username="bob", email="b@example.com", password="pw")
        )

        assert client.post.call_args.args[0] == "/auth/register"
        assert identity.id == "u2"
        assert identity.token == "t2"

    def test_missing_token_is_shape_error(self, client):
        client.post.return_value = {"user": {"_id": "u1", "username": "alice"}}

        with pytest.raises(ShapeError):
            AuthService(client).login(Credentials(email="a@example.com", password="pw"))

    def test_fetch_current_identity(self, client):
        client.get.return_value = {"user": {"_id": "u1", "username": "alice", "role": "admin"}}

        identity = AuthService(client).fetch_current_identity()

        client.get.assert_called_once_with("/auth/me")
        assert identity.is_admin
        assert identity.token is None


class TestAIService:
    """Tests for AIService."""

    def test_suggest_cleans_ingredients(self, client):
        client.post.return_value = {"suggestions": [{"dishName": "Omelette", "cuisine": "French"}]}

        suggestions = AIService(client).suggest([" Eggs ", "eggs", "", "cheese"])

        client.post.assert_called_once_with("/ai/suggest", {"ingredients": ["Eggs", "cheese"]})
        assert suggestions[0].dish_name == "Omelette"

    def test_suggest_without_ingredients_makes_no_request(self, client):
        with pytest.raises(ValidationError, match="at least one ingredient"):
            AIService(client).suggest(["  "])

        client.post.assert_not_called()

    @pytest.mark.parametrize("payload", [{"suggestions": []}, {}, None, {"suggestions": [{"cuisine": "Thai"}]}])
    def test_suggest_without_usable_suggestions(self, client, payload):
        client.post.return_value = payload

        with pytest.raises(ShapeError, match=NO_SUGGESTIONS_MESSAGE):
            AIService(client).suggest(["eggs"])

    def test_detail(self, client):
        client.post.return_value = {
            "title": "Omelette",
            "description": "Classic French omelette",
            "ingredients": ["2 eggs"],
            "instructions": ["Whisk", "Fry"],
            "cookingTime": 10,
            "servings": 1,
            "tips": ["Low heat"],
        }

        draft = AIService(client).detail("Omelette", "French", ["eggs"])

        client.post.assert_called_once_with(
            "/ai/detail", {"dishName": "Omelette", "cuisine": "French", "ingredients": ["eggs"]}
        )
        assert draft.tips == ["Low heat"]
        assert draft.to_recipe_draft().cooking_time == 10

    def test_detail_missing_instructions(self, client):
        client.post.return_value = {"title": "Omelette", "ingredients": ["eggs"]}

        with pytest.raises(ShapeError, match=INVALID_DETAIL_MESSAGE):
            AIService(client).detail("Omelette", "French", ["eggs"])
