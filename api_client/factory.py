"""Builds the tutorial client from configuration."""

import logging

from api_client.base import BaseTutorialClient
from config import resolve_api_base_url, settings

logger = logging.getLogger(__name__)

# Cache client instance
_tutorial_client: BaseTutorialClient | None = None


def get_tutorial_client(force_new: bool = False) -> BaseTutorialClient:
    """Get the configured tutorial API client.

    Args:
        force_new: If True, create a new instance instead of using cached.
    """
    global _tutorial_client

    if _tutorial_client is not None and not force_new:
        return _tutorial_client

    from api_client.rest import TutorialApiClient

    base_url = resolve_api_base_url(settings)
    _tutorial_client = TutorialApiClient(base_url=base_url, timeout=settings.request_timeout)
    logger.info("Using tutorial API at %s", base_url)
    return _tutorial_client
