"""
Base class for backend facades.

Facades share one ApiClient and one rule: a payload that does not parse into the
expected model is a ShapeError, never a half-filled object.
"""

import logging
from typing import Any, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from recipeshare.errors import ShapeError
from recipeshare.http_client import ApiClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseService:
    """
    Common plumbing for all facades.

    Attributes:
        client: Adapter used for every request
    """

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    @staticmethod
    def _parse(model: Type[ModelT], payload: Any, message: str) -> ModelT:
        """
        Validate a response payload against a model.

        Args:
            model: Expected pydantic model
            payload: Decoded JSON body
            message: User-facing text for the ShapeError on mismatch

        Raises:
            ShapeError: If the payload does not match the model
        """
        if not isinstance(payload, dict):
            logger.warning("Expected %s object, got %s", model.__name__, type(payload).__name__)
            raise ShapeError(message)
        try:
            return model.model_validate(payload)
        except PydanticValidationError as e:
            logger.warning("Malformed %s payload: %s", model.__name__, e)
            raise ShapeError(message) from e
