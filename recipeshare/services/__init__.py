"""
Typed facades over the backend's REST resources.

Each facade wraps one endpoint family and returns parsed models. Calls are
single-attempt; errors propagate to the caller as recipeshare.errors exceptions.
"""

from recipeshare.services.ai import AIService
from recipeshare.services.auth import AuthService
from recipeshare.services.recipes import RecipeService

__all__ = ["AIService", "AuthService", "RecipeService"]
