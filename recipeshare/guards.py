"""
Route guards.

A gate decides whether a view may render for the current session. When it may
not, the gate redirects through the navigator and returns False so the view
can stop rendering.
"""

from abc import ABC, abstractmethod
from typing import Optional

from recipeshare import navigation
from recipeshare.navigation import Navigator
from recipeshare.session import SessionStore

PROTECTED_VIEWS = {navigation.ADD_RECIPE, navigation.AI_ASSISTANT, "recipe_edit"}
ANONYMOUS_ONLY_VIEWS = {navigation.LOGIN, navigation.REGISTER}


class Gate(ABC):
    """Common interface of the two gate variants."""

    redirect_to: str

    def __init__(self, session: SessionStore, navigator: Navigator) -> None:
        self.session = session
        self.navigator = navigator

    @abstractmethod
    def _permits(self) -> bool:
        pass

    def allows(self) -> bool:
        """Return True if the view may render; otherwise redirect and return False."""
        if self._permits():
            return True
        self.navigator.go(self.redirect_to)
        return False


class AuthenticatedGate(Gate):
    """Requires a logged-in user; sends everyone else to the login view."""

    redirect_to = navigation.LOGIN

    def _permits(self) -> bool:
        return self.session.is_authenticated


class AnonymousGate(Gate):
    """Requires no logged-in user; sends logged-in users home."""

    redirect_to = navigation.HOME

    def _permits(self) -> bool:
        return not self.session.is_authenticated


def gate_for(route: str, session: SessionStore, navigator: Navigator) -> Optional[Gate]:
    """
    Pick the gate protecting a route.

    Returns:
        AuthenticatedGate for add/edit recipe and the AI assistant,
        AnonymousGate for login/register, None for public routes.
    """
    view, _params = navigation.parse_route(route)
    if view in PROTECTED_VIEWS:
        return AuthenticatedGate(session, navigator)
    if view in ANONYMOUS_ONLY_VIEWS:
        return AnonymousGate(session, navigator)
    return None
