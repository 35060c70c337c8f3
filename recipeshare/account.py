"""
Login, registration and logout flows.

The facade only talks to the backend; this controller validates the forms,
moves the SessionStore into or out of the Authenticated state and navigates.
"""

import asyncio
from typing import Optional

from recipeshare import navigation
from recipeshare.errors import ClientError, ValidationError, describe_error
from recipeshare.models import Credentials, Identity, RegistrationProfile
from recipeshare.navigation import Navigator
from recipeshare.services.auth import AuthService
from recipeshare.session import SessionStore


class AccountController:
    """Drives the login and register views and the logout action."""

    def __init__(self, auth: AuthService, session: SessionStore, navigator: Navigator) -> None:
        self._auth = auth
        self._session = session
        self._navigator = navigator
        self.error: Optional[str] = None

    async def login(self, email: str, password: str) -> Optional[Identity]:
        self.error = None
        try:
            if not email.strip() or not password:
                raise ValidationError("Email and password are required")
            credentials = Credentials(email=email.strip(), password=password)
            identity = await asyncio.to_thread(self._auth.login, credentials)
        except (ValidationError, ClientError) as e:
            self.error = describe_error(e, "Failed to log in")
            return None
        self._session.login(identity)
        self._navigator.go(navigation.HOME)
        return identity

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        confirm_password: Optional[str] = None,
    ) -> Optional[Identity]:
        self.error = None
        try:
            if not username.strip() or not email.strip() or not password:
                raise ValidationError("Username, email and password are required")
            if confirm_password is not None and confirm_password != password:
                raise ValidationError("Passwords do not match")
            profile = RegistrationProfile(username=username.strip(), email=email.strip(), password=password)
            identity = await asyncio.to_thread(self._auth.register, profile)
        except (ValidationError, ClientError) as e:
            self.error = describe_error(e, "Failed to register")
            return None
        self._session.login(identity)
        self._navigator.go(navigation.HOME)
        return identity

    def logout(self) -> None:
        self._session.logout()
        self._navigator.go(navigation.HOME)
