"""
Recipe library controller.

Holds the ListQuery of the library view and the state rendered from it. Every
query mutation schedules a fetch; free-text search is debounced so typing
"eggplant" issues one request instead of eight.

Ordering rule: each scheduled fetch gets a monotonically increasing sequence
number, and a response is applied only if its sequence is still the latest
issued. A slow response for an old query can never overwrite newer state,
whatever order the responses arrive in.

Likes are confirmed-only: the list changes after the server answers, and only
the single affected entry is replaced. Fetches and like requests draw from one
issue clock; a confirmed like issued after a fetch was sent wins over that
fetch's copy of the recipe, whichever response arrives last.
"""

import asyncio
import itertools
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterable, Optional, Set, Tuple, Union

from recipeshare import navigation
from recipeshare.config import LibraryConfig
from recipeshare.errors import ClientError, describe_error
from recipeshare.models import ListQuery, Recipe, SortKey, SortOrder
from recipeshare.navigation import Navigator
from recipeshare.services.recipes import RecipeService
from recipeshare.session import SessionStore

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load recipes"
LIKE_FAILED_MESSAGE = "Failed to update like"


class ListStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class ListState:
    """
    What the library view renders.

    On FAILED the previously loaded recipes are kept so the view can keep
    showing them next to the error.
    """

    status: ListStatus = ListStatus.IDLE
    recipes: Tuple[Recipe, ...] = ()
    total_pages: int = 0
    error: Optional[str] = None
    like_error: Optional[str] = None

    def with_recipe(self, updated: Recipe) -> "ListState":
        """Replace the entry with the same id, keeping its position and every other entry."""
        for index, recipe in enumerate(self.recipes):
            if recipe.id == updated.id:
                recipes = self.recipes[:index] + (updated,) + self.recipes[index + 1:]
                return replace(self, recipes=recipes, like_error=None)
        return self


class LibraryController:
    """
    Debounced, paginated, sortable fetch-and-render state machine.

    Mutation methods must be called from inside a running event loop; they
    return the scheduled task (or None when the query did not change).
    """

    def __init__(
        self,
        recipes: RecipeService,
        session: SessionStore,
        navigator: Navigator,
        page_size: Optional[int] = None,
        debounce_seconds: Optional[float] = None,
    ) -> None:
        self._recipes = recipes
        self._session = session
        self._navigator = navigator
        self.query = ListQuery(page_size=page_size or LibraryConfig.get_page_size())
        self.debounce_seconds = (
            debounce_seconds if debounce_seconds is not None else LibraryConfig.get_search_debounce_seconds()
        )
        self.state = ListState()
        self._seq = 0
        self._timer: Optional[asyncio.Task] = None
        self._tasks: Set[asyncio.Task] = set()
        self._clock = itertools.count(1)
        # recipe id -> (issue tick, confirmed recipe)
        self._confirmed_likes: Dict[str, Tuple[int, Recipe]] = {}

    @property
    def sequence(self) -> int:
        """Sequence number of the latest scheduled fetch."""
        return self._seq

    # -- query mutations -------------------------------------------------

    def set_search(self, text: str) -> Optional[asyncio.Task]:
        return self._update(debounce=True, search_text=text)

    def set_sort_key(self, key: Union[SortKey, str]) -> Optional[asyncio.Task]:
        return self._update(sort_key=SortKey(key), page=1)

    def set_sort_order(self, order: Union[SortOrder, str]) -> Optional[asyncio.Task]:
        return self._update(sort_order=SortOrder(order), page=1)

    def set_page(self, page: int) -> Optional[asyncio.Task]:
        if page < 1:
            raise ValueError(f"page must be at least 1, got: {page}")
        return self._update(page=page)

    def refresh(self) -> asyncio.Task:
        """Re-fetch the current query immediately."""
        return self._schedule(0)

    def _update(self, debounce: bool = False, **changes) -> Optional[asyncio.Task]:
        query = self.query.model_copy(update=changes)
        if query == self.query:
            return None
        self.query = query
        return self._schedule(self.debounce_seconds if debounce else 0)

    def _schedule(self, delay: float) -> asyncio.Task:
        # A debounced fetch still waiting out its window is superseded outright
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._seq += 1
        task = asyncio.get_running_loop().create_task(self._fetch(self._seq, self.query, delay))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        self._timer = task if delay > 0 else None
        return task

    async def _fetch(self, seq: int, query: ListQuery, delay: float) -> None:
        if delay > 0:
            await asyncio.sleep(delay)
            if self._timer is asyncio.current_task():
                self._timer = None
        if seq != self._seq:
            logger.debug("Query #%d superseded before it was sent", seq)
            return

        self.state = replace(self.state, status=ListStatus.LOADING, error=None)
        issued = next(self._clock)
        try:
            page = await asyncio.to_thread(self._recipes.list, query)
        except ClientError as e:
            if seq != self._seq:
                logger.debug("Ignoring failure of stale query #%d: %s", seq, e)
                return
            self.state = replace(
                self.state,
                status=ListStatus.FAILED,
                error=describe_error(e, LOAD_FAILED_MESSAGE),
            )
            return

        if seq != self._seq:
            logger.debug("Discarding stale response for query #%d (latest is #%d)", seq, self._seq)
            return
        self.state = ListState(
            status=ListStatus.LOADED,
            recipes=self._with_confirmed_likes(page.recipes, issued),
            total_pages=page.pagination.total_pages,
        )

    def _with_confirmed_likes(self, recipes: Iterable[Recipe], issued: int) -> Tuple[Recipe, ...]:
        """Overlay likes confirmed after the fetch issued at `issued` was sent."""
        self._confirmed_likes = {
            recipe_id: entry for recipe_id, entry in self._confirmed_likes.items() if entry[0] > issued
        }
        return tuple(
            self._confirmed_likes[recipe.id][1] if recipe.id in self._confirmed_likes else recipe
            for recipe in recipes
        )

    async def settle(self) -> None:
        """
        Wait until every scheduled fetch has finished or been cancelled.

        Raises:
            Exception: The first unexpected (non-client) error raised by a fetch
        """
        while True:
            pending = [task for task in self._tasks if not task.done()]
            if not pending:
                return
            results = await asyncio.gather(*pending, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    raise result

    # -- likes -------------------------------------------------------------

    async def toggle_like(self, recipe_id: str) -> Optional[Recipe]:
        """
        Like or unlike a recipe in the loaded page.

        Anonymous users are sent to login without a request. On success the
        server's copy replaces the matching entry; on failure the list is left
        untouched and `state.like_error` is set.

        Returns:
            The updated recipe, or None if nothing changed
        """
        if not self._session.is_authenticated:
            self._navigator.go(navigation.LOGIN)
            return None
        issued = next(self._clock)
        try:
            updated = await asyncio.to_thread(self._recipes.toggle_like, recipe_id)
        except ClientError as e:
            logger.warning("Toggling like on %s failed: %s", recipe_id, e)
            self.state = replace(self.state, like_error=describe_error(e, LIKE_FAILED_MESSAGE))
            return None

        known = self._confirmed_likes.get(recipe_id)
        if known is not None and known[0] > issued:
            logger.debug("Ignoring like confirmation for %s superseded by a later toggle", recipe_id)
            return updated
        self._confirmed_likes[recipe_id] = (issued, updated)
        self.state = self.state.with_recipe(updated)
        return updated
