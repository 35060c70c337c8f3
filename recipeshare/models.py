"""
Domain models for the RecipeShare client.

These pydantic models are the explicit shapes of every payload the client sends
to or receives from the backend. Facades parse responses into these models so a
malformed payload fails at the boundary instead of leaking missing fields into
view state.

# NOTE: The backend speaks camelCase with Mongo-style ids (`_id`, `cookingTime`,
    `createdAt`). Models expose snake_case attributes and accept either the wire
    alias or the attribute name on input. Use `model_dump(by_alias=True)` to
    build request bodies.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _require_non_blank(items: List[str], label: str) -> List[str]:
    """Strip entries and reject blank ones."""
    cleaned = [item.strip() for item in items]
    if any(not item for item in cleaned):
        raise ValueError(f"All {label} must be filled")
    return cleaned


class WireModel(BaseModel):
    """Base model accepting both wire aliases and attribute names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Identity(WireModel):
    """
    The authenticated user held by the session store.

    `token` is only present on identities returned by login/register; the
    /auth/me endpoint returns the identity without it.
    """

    id: str = Field(..., alias="_id", description="Backend user identifier")
    username: str = Field(..., description="Display name")
    email: Optional[str] = Field(None, description="Login email, when the backend returns it")
    role: Literal["user", "admin"] = Field("user", description="Authorization role")
    token: Optional[str] = Field(None, description="Bearer credential")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class Author(WireModel):
    """Reference to the user who created a recipe."""

    id: str = Field(..., alias="_id")
    username: str = ""


class RecipeDraft(WireModel):
    """
    Body sent when creating or updating a recipe.

    Invariants: cooking time and servings are positive integers, and both
    ingredient and instruction lists are non-empty with no blank entries.
    """

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    cooking_time: int = Field(..., alias="cookingTime", gt=0, description="Minutes")
    servings: int = Field(..., gt=0)
    ingredients: List[str] = Field(..., min_length=1)
    instructions: List[str] = Field(..., min_length=1)

    @field_validator("title", "description")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("ingredients")
    @classmethod
    def _check_ingredients(cls, value: List[str]) -> List[str]:
        return _require_non_blank(value, "ingredients")

    @field_validator("instructions")
    @classmethod
    def _check_instructions(cls, value: List[str]) -> List[str]:
        return _require_non_blank(value, "instructions")

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the backend's camelCase body."""
        return self.model_dump(by_alias=True)


class Recipe(WireModel):
    """A persisted recipe as returned by the backend."""

    id: str = Field(..., alias="_id")
    title: str
    description: str = ""
    cooking_time: int = Field(..., alias="cookingTime", gt=0)
    servings: int = Field(..., gt=0)
    ingredients: List[str] = Field(..., min_length=1)
    instructions: List[str] = Field(..., min_length=1)
    likes: List[str] = Field(default_factory=list, description="Ids of users who liked the recipe")
    author: Author
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    @field_validator("author", mode="before")
    @classmethod
    def _author_from_id(cls, value: Any) -> Any:
        # Unpopulated references arrive as a bare id string
        if isinstance(value, str):
            return {"_id": value}
        return value

    @field_validator("likes", mode="before")
    @classmethod
    def _like_ids(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [item.get("_id") if isinstance(item, dict) else item for item in value]
        return value

    @property
    def like_count(self) -> int:
        return len(self.likes)

    def is_liked_by(self, identity: Optional[Identity]) -> bool:
        return identity is not None and identity.id in self.likes

    def can_be_edited_by(self, identity: Optional[Identity]) -> bool:
        """Only the author or an admin may edit or delete a recipe."""
        if identity is None:
            return False
        return identity.is_admin or identity.id == self.author.id


class Pagination(WireModel):
    """Paging metadata returned alongside a recipe list."""

    total_pages: int = Field(0, alias="totalPages", ge=0)
    page: Optional[int] = None
    total: Optional[int] = None


class RecipePage(WireModel):
    """One page of the recipe library."""

    recipes: List[Recipe] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


class SortKey(str, Enum):
    """Library sort options and the backend field each one sorts on."""

    DATE = "date"
    TITLE = "title"
    COOKING_TIME = "cookingTime"
    POPULARITY = "popularity"

    @property
    def api_field(self) -> str:
        return _SORT_FIELDS[self]


_SORT_FIELDS = {
    SortKey.DATE: "createdAt",
    SortKey.TITLE: "title",
    SortKey.COOKING_TIME: "cookingTime",
    SortKey.POPULARITY: "likes",
}


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ListQuery(BaseModel):
    """
    Parameters of the recipe library view.

    Immutable: controllers derive a new query with `model_copy(update=...)` so an
    in-flight fetch always keeps the exact query it was issued for.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(1, ge=1)
    page_size: int = Field(12, ge=1)
    sort_key: SortKey = SortKey.DATE
    sort_order: SortOrder = SortOrder.DESC
    search_text: str = ""

    def to_params(self) -> Dict[str, Any]:
        """Query-string parameters for GET /recipes."""
        return {
            "page": self.page,
            "limit": self.page_size,
            "sort": self.sort_key.api_field,
            "order": self.sort_order.value,
            "search": self.search_text.strip(),
        }


class Suggestion(WireModel):
    """A candidate dish proposed by the AI assistant. Never persisted."""

    dish_name: str = Field(..., alias="dishName", min_length=1)
    cuisine: str = Field(..., min_length=1)
    brief_description: str = Field("", alias="briefDescription")
    additional_ingredients_needed: List[str] = Field(default_factory=list, alias="additionalIngredientsNeeded")


class DetailedRecipeDraft(WireModel):
    """A full recipe generated by the AI assistant, saved only on request."""

    title: str = Field(..., min_length=1)
    description: str = ""
    ingredients: List[str] = Field(..., min_length=1)
    instructions: List[str] = Field(..., min_length=1)
    cooking_time: Optional[int] = Field(None, alias="cookingTime")
    servings: Optional[int] = None
    tips: List[str] = Field(default_factory=list)

    def to_recipe_draft(self) -> RecipeDraft:
        """
        Promote to a savable draft (tips are not part of a recipe).

        Raises:
            pydantic.ValidationError: If the generated values break recipe invariants
        """
        return RecipeDraft(
            title=self.title,
            description=self.description,
            cooking_time=self.cooking_time,
            servings=self.servings,
            ingredients=list(self.ingredients),
            instructions=list(self.instructions),
        )


class Credentials(WireModel):
    """Login request body."""

    email: str
    password: str


class RegistrationProfile(WireModel):
    """Registration request body."""

    username: str
    email: str
    password: str
