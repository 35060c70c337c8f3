"""Auth facade: /auth/register, /auth/login, /auth/me."""

from typing import Any

from recipeshare.errors import ShapeError
from recipeshare.models import Credentials, Identity, RegistrationProfile
from recipeshare.services.base import BaseService

INVALID_AUTH_RESPONSE = "Invalid authentication response received"


class AuthService(BaseService):
    """Account endpoints. Session state is not touched here; see AccountController."""

    def _identity_with_token(self, payload: Any) -> Identity:
        # {token, user: {...}} or a flat {token, _id, username, ...}
        if not isinstance(payload, dict) or not payload.get("token"):
            raise ShapeError(INVALID_AUTH_RESPONSE)
        user = payload.get("user", payload)
        if not isinstance(user, dict):
            raise ShapeError(INVALID_AUTH_RESPONSE)
        return self._parse(Identity, {**user, "token": payload["token"]}, INVALID_AUTH_RESPONSE)

    def register(self, profile: RegistrationProfile) -> Identity:
        payload = self.client.post("/auth/register", profile.model_dump())
        return self._identity_with_token(payload)

    def login(self, credentials: Credentials) -> Identity:
        payload = self.client.post("/auth/login", credentials.model_dump())
        return self._identity_with_token(payload)

    def fetch_current_identity(self) -> Identity:
        payload = self.client.get("/auth/me")
        if isinstance(payload, dict) and isinstance(payload.get("user"), dict):
            payload = payload["user"]
        return self._parse(Identity, payload, INVALID_AUTH_RESPONSE)
