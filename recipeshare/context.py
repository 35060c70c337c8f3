"""
Application wiring.

build_context() assembles storage, session store, HTTP adapter, facades and
controllers in dependency order:

    storage -> SessionStore -> ApiClient -> facades -> controllers
"""

from dataclasses import dataclass
from typing import Optional

from recipeshare.account import AccountController
from recipeshare.assistant import AssistantWizard
from recipeshare.config import StorageConfig
from recipeshare.detail import RecipeDetailController
from recipeshare.editor import RecipeEditor
from recipeshare.guards import Gate, gate_for
from recipeshare.http_client import ApiClient
from recipeshare.library import LibraryController
from recipeshare.navigation import Navigator
from recipeshare.services import AIService, AuthService, RecipeService
from recipeshare.session import SessionStore
from recipeshare.storage import JsonFileStorage, KeyValueStorage


@dataclass
class AppContext:
    """Everything one client (one user, one browser session) needs."""

    storage: KeyValueStorage
    session: SessionStore
    navigator: Navigator
    client: ApiClient
    auth: AuthService
    recipes: RecipeService
    ai: AIService

    def library(self) -> LibraryController:
        return LibraryController(self.recipes, self.session, self.navigator)

    def assistant(self) -> AssistantWizard:
        return AssistantWizard(self.ai, self.recipes, self.navigator)

    def editor(self) -> RecipeEditor:
        return RecipeEditor(self.recipes, self.session, self.navigator)

    def detail(self) -> RecipeDetailController:
        return RecipeDetailController(self.recipes, self.session, self.navigator)

    def account(self) -> AccountController:
        return AccountController(self.auth, self.session, self.navigator)

    def gate(self, route: str) -> Optional[Gate]:
        return gate_for(route, self.session, self.navigator)


def build_context(
    storage: Optional[KeyValueStorage] = None,
    navigator: Optional[Navigator] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    bootstrap: bool = True,
) -> AppContext:
    """
    Create a fully wired client.

    Args:
        storage: Token storage (defaults to the JSON file from StorageConfig)
        navigator: Navigation collaborator (defaults to a recording Navigator)
        base_url: Backend URL override
        timeout: Request timeout override
        bootstrap: Restore the session from a persisted token right away
    """
    storage = storage if storage is not None else JsonFileStorage(StorageConfig.get_storage_path())
    navigator = navigator if navigator is not None else Navigator()
    session = SessionStore(storage)
    client = ApiClient(session, navigator, base_url=base_url, timeout=timeout)
    context = AppContext(
        storage=storage,
        session=session,
        navigator=navigator,
        client=client,
        auth=AuthService(client),
        recipes=RecipeService(client),
        ai=AIService(client),
    )
    if bootstrap:
        session.bootstrap(context.auth)
    return context
