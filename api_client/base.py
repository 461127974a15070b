"""Abstract base class for tutorial API clients."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from models import Tutorial, TutorialId


class BaseTutorialClient(ABC):
    """Operations the dashboard needs from the tutorial backend.

    Implementations: TutorialApiClient (HTTP). Tests use in-memory fakes.
    """

    @abstractmethod
    async def list(self, title: Optional[str] = None) -> list[Tutorial]:
        """Return all tutorials, filtered by title when one is given."""
        ...

    @abstractmethod
    async def list_published(self) -> list[Tutorial]:
        """Return only published tutorials."""
        ...

    @abstractmethod
    async def get(self, tutorial_id: TutorialId) -> Tutorial:
        ...

    @abstractmethod
    async def create(self, fields: dict[str, Any]) -> dict:
        """Create a tutorial from {title, description, published}.

        Returns:
            The created tutorial or the server's acknowledgement.
        """
        ...

    @abstractmethod
    async def update(self, tutorial_id: TutorialId, fields: dict[str, Any]) -> dict:
        ...

    @abstractmethod
    async def delete(self, tutorial_id: TutorialId) -> dict:
        ...

    @abstractmethod
    async def delete_all(self) -> dict:
        ...
