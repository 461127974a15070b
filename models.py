"""Tutorial record and the form buffers the dashboard edits."""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional, Union

TutorialId = Union[int, str]


@dataclass
class Tutorial:
    """A tutorial as returned by the backend."""

    id: Optional[TutorialId]
    title: str = ""
    description: str = ""
    published: bool = False
    raw: dict = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict) -> "Tutorial":
        return cls(
            id=data.get("id"),
            title=data.get("title") or "",
            description=data.get("description") or "",
            published=bool(data.get("published")),
            raw=dict(data),
        )

    def to_dict(self) -> dict[str, Any]:
        """Server fields as received, with the normalized ones on top."""
        return {
            **self.raw,
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "published": self.published,
        }


@dataclass
class TutorialForm:
    """Unsaved editable fields of a tutorial."""

    title: str = ""
    description: str = ""
    published: bool = False

    @classmethod
    def from_tutorial(cls, tutorial: Tutorial) -> "TutorialForm":
        return cls(
            title=tutorial.title or "",
            description=tutorial.description or "",
            published=bool(tutorial.published),
        )

    @property
    def has_title(self) -> bool:
        return bool(self.title.strip())

    def payload(self) -> dict[str, Any]:
        """Request body with title and description trimmed."""
        return {
            "title": self.title.strip(),
            "description": self.description.strip(),
            "published": self.published,
        }

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
