"""
Tests for the wire models' invariants and helpers.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from recipeshare.models import Identity, ListQuery, RecipeDraft, SortKey


class TestRecipeDraft:
    """Tests for RecipeDraft invariants."""

    def test_rejects_non_positive_numbers(self):
        with pytest.raises(PydanticValidationError):
            RecipeDraft(title="a", description="b", cooking_time=0, servings=1, ingredients=["x"], instructions=["y"])

    def test_rejects_empty_lists(self):
        with pytest.raises(PydanticValidationError):
            RecipeDraft(title="a", description="b", cooking_time=5, servings=1, ingredients=[], instructions=["y"])

    def test_rejects_blank_entries(self):
        with pytest.raises(PydanticValidationError, match="All instructions must be filled"):
            RecipeDraft(title="a", description="b", cooking_time=5, servings=1, ingredients=["x"], instructions=[" "])

    def test_accepts_wire_aliases(self):
        draft = RecipeDraft.model_validate({
            "title": "a",
            "description": "b",
            "cookingTime": 5,
            "servings": 1,
            "ingredients": ["x"],
            "instructions": ["y"],
        })

        assert draft.cooking_time == 5


class TestRecipe:
    """Tests for Recipe helpers."""

    def test_permissions(self, recipe_factory):
        recipe = recipe_factory("r1", author_id="u1")
        author = Identity.model_validate({"_id": "u1", "username": "a"})
        other = Identity.model_validate({"_id": "u2", "username": "b"})
        admin = Identity.model_validate({"_id": "u3", "username": "c", "role": "admin"})

        assert recipe.can_be_edited_by(author)
        assert not recipe.can_be_edited_by(other)
        assert recipe.can_be_edited_by(admin)
        assert not recipe.can_be_edited_by(None)

    def test_likes(self, recipe_factory):
        recipe = recipe_factory("r1", likes=["u2"])

        assert recipe.like_count == 1
        assert recipe.is_liked_by(Identity.model_validate({"_id": "u2", "username": "b"}))
        assert not recipe.is_liked_by(None)


class TestListQuery:
    """Tests for ListQuery."""

    def test_defaults(self):
        assert ListQuery().to_params() == {"page": 1, "limit": 12, "sort": "createdAt", "order": "desc", "search": ""}

    @pytest.mark.parametrize(
        "key, field", [("date", "createdAt"), ("title", "title"), ("cookingTime", "cookingTime"), ("popularity", "likes")]
    )
    def test_sort_fields(self, key, field):
        assert ListQuery(sort_key=SortKey(key)).to_params()["sort"] == field

    def test_page_must_be_positive(self):
        with pytest.raises(PydanticValidationError):
            ListQuery(page=0)

    def test_is_immutable(self):
        query = ListQuery()

        with pytest.raises(PydanticValidationError):
            query.page = 2
