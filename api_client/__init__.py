"""Client layer for the remote tutorial collection API."""

from api_client.base import BaseTutorialClient
from api_client.errors import FALLBACK_ERROR_MESSAGE, to_error_message
from api_client.factory import get_tutorial_client
from api_client.rest import TutorialApiClient

__all__ = [
    "BaseTutorialClient",
    "TutorialApiClient",
    "FALLBACK_ERROR_MESSAGE",
    "to_error_message",
    "get_tutorial_client",
]
