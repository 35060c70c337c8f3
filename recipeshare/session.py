"""
Session/identity store.

The SessionStore is the single source of truth for who is logged in. It holds at
most one Identity (Authenticated) or none (Anonymous), persists the credential
token under the `token` storage key, and notifies subscribers on every
transition so guards and navigation can react.

Lifecycle:
- bootstrap(): at startup, restore the identity from a persisted token
- login(): after a successful login or registration
- logout(): explicit user action
- expire(): the HTTP adapter received a 401 for any request
"""

import logging
import threading
from typing import TYPE_CHECKING, Callable, List, Optional

from recipeshare.errors import ClientError, NetworkError
from recipeshare.models import Identity
from recipeshare.storage import TOKEN_KEY, KeyValueStorage

if TYPE_CHECKING:
    from recipeshare.services.auth import AuthService

logger = logging.getLogger(__name__)

SessionListener = Callable[[Optional[Identity]], None]


class SessionStore:
    """
    Process-wide holder of the current identity.

    Transitions may be triggered from worker threads (the adapter runs inside
    asyncio.to_thread), so state changes are serialized with a lock. Listeners
    are called outside the lock.
    """

    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage
        self._identity: Optional[Identity] = None
        self._listeners: List[SessionListener] = []
        self._lock = threading.Lock()

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    @property
    def token(self) -> Optional[str]:
        """The persisted credential, consulted on every outbound request."""
        return self._storage.get(TOKEN_KEY)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a callback for session transitions.

        Args:
            listener: Called with the new Identity, or None when the session ends

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, identity: Optional[Identity]) -> None:
        for listener in list(self._listeners):
            listener(identity)

    def login(self, identity: Identity) -> None:
        """
        Enter the Authenticated state.

        Raises:
            ValueError: If the identity carries no token and none is persisted
        """
        with self._lock:
            if identity.token:
                self._storage.set(TOKEN_KEY, identity.token)
            elif not self._storage.get(TOKEN_KEY):
                raise ValueError("Cannot authenticate an identity without a token")
            else:
                identity = identity.model_copy(update={"token": self._storage.get(TOKEN_KEY)})
            self._identity = identity
        logger.info("Session authenticated as %s", identity.username)
        self._notify(identity)

    def logout(self) -> None:
        """Leave the Authenticated state and forget the persisted token."""
        with self._lock:
            was_authenticated = self._identity is not None
            self._identity = None
            self._storage.remove(TOKEN_KEY)
        if was_authenticated:
            logger.info("Session ended")
            self._notify(None)

    def expire(self) -> None:
        """Tear the session down after the backend rejected the credentials."""
        logger.info("Credentials rejected by backend; clearing session")
        self.logout()

    def bootstrap(self, auth: "AuthService") -> Optional[Identity]:
        """
        Restore the session from a persisted token.

        A network failure leaves the token in place so a later bootstrap can
        retry; any other failure clears it.

        Args:
            auth: Facade used to call GET /auth/me

        Returns:
            The restored identity, or None if the session stays anonymous
        """
        if self._identity is not None or not self.token:
            return self._identity
        try:
            identity = auth.fetch_current_identity()
        except NetworkError as e:
            logger.warning("Could not restore session, backend unreachable: %s", e)
            return None
        except ClientError as e:
            logger.info("Persisted token is no longer valid: %s", e)
            self._storage.remove(TOKEN_KEY)
            return None
        self.login(identity)
        return self._identity
