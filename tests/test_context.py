"""
Tests for build_context() wiring.
"""

from unittest.mock import Mock, patch

from recipeshare.assistant import AssistantWizard
from recipeshare.context import build_context
from recipeshare.guards import AuthenticatedGate
from recipeshare.library import LibraryController
from recipeshare.storage import TOKEN_KEY, MemoryStorage


class TestBuildContext:
    """Tests for build_context()."""

    def test_components_share_session_and_navigator(self, navigator):
        context = build_context(storage=MemoryStorage(), navigator=navigator, base_url="http://api.test")

        assert context.client.session is context.session
        assert context.client.navigator is navigator
        assert context.auth.client is context.client
        assert context.recipes.client is context.client
        assert isinstance(context.library(), LibraryController)
        assert isinstance(context.assistant(), AssistantWizard)
        assert isinstance(context.gate("/add-recipe"), AuthenticatedGate)
        assert context.gate("/recipes") is None

    @patch("recipeshare.http_client.requests.request")
    def test_bootstrap_restores_session(self, mock_request):
        """Test a persisted token is validated against /auth/me on startup."""
        response = Mock()
        response.status_code = 200
        response.content = b"{...}"
        response.json.return_value = {"user": {"_id": "u1", "username": "alice"}}
        mock_request.return_value = response

        context = build_context(storage=MemoryStorage({TOKEN_KEY: "stored"}), base_url="http://api.test")

        assert context.session.is_authenticated
        assert context.session.identity.token == "stored"
        args, kwargs = mock_request.call_args
        assert args == ("GET", "http://api.test/auth/me")
        assert kwargs["headers"]["Authorization"] == "Bearer stored"

    @patch("recipeshare.http_client.requests.request")
    def test_no_bootstrap_request_without_token(self, mock_request):
        context = build_context(storage=MemoryStorage(), base_url="http://api.test")

        assert not context.session.is_authenticated
        mock_request.assert_not_called()
