"""Dashboard controller — owns all UI state and drives the tutorial API.

Every user action is a method here. Each one mutates the explicit
DashboardState, calls the API client, and folds the outcome back into
collection, status and error state. After any transition that can change
the selection or the collection, _reconcile() re-derives the edit buffer.
"""

import inspect
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Awaitable, Callable, Optional, Union

from api_client.base import BaseTutorialClient
from api_client.errors import to_error_message
from models import Tutorial, TutorialForm, TutorialId

logger = logging.getLogger(__name__)

CREATE_TITLE_REQUIRED = "A title is required to create a tutorial."
UPDATE_TITLE_REQUIRED = "A title is required to update a tutorial."
DELETE_PROMPT = "Delete this tutorial? This cannot be undone."
DELETE_ALL_PROMPT = "Delete every tutorial in the database? This action is permanent."

STATUS_CREATED = "Tutorial created successfully."
STATUS_UPDATED = "Tutorial updated."
STATUS_DELETED = "Tutorial deleted."
STATUS_ALL_DELETED = "All tutorials were deleted."

# Pending action names
ACTION_CREATE = "create"
ACTION_UPDATE = "update"
ACTION_DELETE = "delete"
ACTION_DELETE_ALL = "deleteAll"

Confirm = Callable[[str], Union[bool, Awaitable[bool]]]


def decline(prompt: str) -> bool:
    """Confirmation that always answers no."""
    return False


@dataclass
class DashboardState:
    tutorials: list[Tutorial] = field(default_factory=list)
    selected_id: Optional[TutorialId] = None
    create_form: TutorialForm = field(default_factory=TutorialForm)
    edit_form: TutorialForm = field(default_factory=TutorialForm)
    search_term: str = ""
    applied_search: str = ""
    show_published_only: bool = False
    loading: bool = False
    pending_action: str = ""
    error: str = ""
    status: str = ""

    @property
    def selected_tutorial(self) -> Optional[Tutorial]:
        if self.selected_id is None:
            return None
        for tutorial in self.tutorials:
            if tutorial.id == self.selected_id:
                return tutorial
        return None

    def is_busy(self, action: str) -> bool:
        return self.pending_action == action

    def to_dict(self) -> dict[str, Any]:
        return {
            "tutorials": [t.to_dict() for t in self.tutorials],
            "selected_id": self.selected_id,
            "create_form": self.create_form.to_dict(),
            "edit_form": self.edit_form.to_dict(),
            "search_term": self.search_term,
            "applied_search": self.applied_search,
            "show_published_only": self.show_published_only,
            "loading": self.loading,
            "pending_action": self.pending_action,
            "error": self.error,
            "status": self.status,
        }


class DashboardController:
    """Action handlers for the tutorial dashboard."""

    def __init__(
        self,
        client: BaseTutorialClient,
        confirm: Confirm = decline,
        state: Optional[DashboardState] = None,
    ):
        self.client = client
        self.confirm = confirm
        self.state = state or DashboardState()

    # ── Derivation ─────────────────────────────────────

    def _reconcile(self) -> None:
        """Keep selection and edit buffer consistent with the collection."""
        state = self.state
        if state.selected_id is None:
            return
        selected = state.selected_tutorial
        if selected is None:
            state.selected_id = None
            state.edit_form = TutorialForm()
        else:
            state.edit_form = TutorialForm.from_tutorial(selected)

    def _find(self, tutorial_id: TutorialId) -> Optional[Tutorial]:
        for tutorial in self.state.tutorials:
            if tutorial.id == tutorial_id or str(tutorial.id) == str(tutorial_id):
                return tutorial
        return None

    # ── Loading and filters ───────────────────────────

    async def load(self) -> None:
        """Replace the collection with a fresh snapshot for the current filters."""
        state = self.state
        state.loading = True
        try:
            if state.show_published_only:
                tutorials = await self.client.list_published()
            else:
                tutorials = await self.client.list(state.applied_search or None)
            state.tutorials = list(tutorials)
            state.error = ""
            self._reconcile()
        except Exception as e:
            state.error = to_error_message(e)
            logger.warning("Loading tutorials failed: %s", state.error)
        finally:
            state.loading = False

    async def refresh(self) -> None:
        await self.load()

    async def _apply_filters(
        self,
        applied_search: Optional[str] = None,
        show_published_only: Optional[bool] = None,
    ) -> bool:
        """Commit filter values; reload once if any of them changed."""
        state = self.state
        changed = False
        if applied_search is not None and applied_search != state.applied_search:
            state.applied_search = applied_search
            changed = True
        if show_published_only is not None and show_published_only != state.show_published_only:
            state.show_published_only = show_published_only
            changed = True
        if changed:
            await self.load()
        return changed

    def set_search_term(self, term: str) -> None:
        self.state.search_term = term

    async def submit_search(self) -> None:
        await self._apply_filters(applied_search=self.state.search_term.strip())

    async def set_published_only(self, enabled: bool) -> None:
        await self._apply_filters(show_published_only=bool(enabled))

    async def clear_filters(self) -> None:
        """Drop the search and the published-only toggle.

        With published-only on, switching it off is the one reload. Otherwise
        the collection is reloaded explicitly with empty filters.
        """
        state = self.state
        state.search_term = ""
        if state.show_published_only:
            await self._apply_filters(applied_search="", show_published_only=False)
        else:
            state.applied_search = ""
            await self.load()

    # ── Selection and form buffers ────────────────────

    def select(self, tutorial_id: Optional[TutorialId]) -> None:
        """Select a tutorial by id; None deselects."""
        state = self.state
        if tutorial_id is None:
            state.selected_id = None
            state.edit_form = TutorialForm()
            return
        match = self._find(tutorial_id)
        state.selected_id = match.id if match is not None else tutorial_id
        self._reconcile()

    def update_create_form(self, **fields: Any) -> None:
        self.state.create_form = replace(self.state.create_form, **fields)

    def update_edit_form(self, **fields: Any) -> None:
        self.state.edit_form = replace(self.state.edit_form, **fields)

    # ── Mutations ─────────────────────────────────────

    def is_busy(self, action: str) -> bool:
        return self.state.is_busy(action)

    @asynccontextmanager
    async def _pending(self, action: str):
        self.state.pending_action = action
        try:
            yield
        finally:
            self.state.pending_action = ""

    async def _ask(self, confirm: Optional[Confirm], prompt: str) -> bool:
        answer = (confirm or self.confirm)(prompt)
        if inspect.isawaitable(answer):
            answer = await answer
        return bool(answer)

    async def create(self) -> None:
        state = self.state
        if not state.create_form.has_title:
            state.error = CREATE_TITLE_REQUIRED
            return

        async with self._pending(ACTION_CREATE):
            try:
                await self.client.create(state.create_form.payload())
                state.create_form = TutorialForm()
                state.status = STATUS_CREATED
                state.error = ""
                logger.info("Tutorial created")
                await self.load()
            except Exception as e:
                state.error = to_error_message(e)
                logger.warning("Create failed: %s", state.error)

    async def update(self) -> None:
        state = self.state
        tutorial_id = state.selected_id
        if tutorial_id is None:
            return
        if not state.edit_form.has_title:
            state.error = UPDATE_TITLE_REQUIRED
            return

        async with self._pending(ACTION_UPDATE):
            try:
                await self.client.update(tutorial_id, state.edit_form.payload())
                state.status = STATUS_UPDATED
                state.error = ""
                logger.info("Tutorial %s updated", tutorial_id)
                await self.load()
            except Exception as e:
                state.error = to_error_message(e)
                logger.warning("Update of tutorial %s failed: %s", tutorial_id, state.error)

    async def delete(self, confirm: Optional[Confirm] = None) -> None:
        state = self.state
        tutorial_id = state.selected_id
        if tutorial_id is None:
            return
        if not await self._ask(confirm, DELETE_PROMPT):
            return

        async with self._pending(ACTION_DELETE):
            try:
                await self.client.delete(tutorial_id)
                state.status = STATUS_DELETED
                state.error = ""
                state.selected_id = None
                state.edit_form = TutorialForm()
                logger.info("Tutorial %s deleted", tutorial_id)
                await self.load()
            except Exception as e:
                state.error = to_error_message(e)
                logger.warning("Delete of tutorial %s failed: %s", tutorial_id, state.error)

    async def delete_all(self, confirm: Optional[Confirm] = None) -> None:
        state = self.state
        if not state.tutorials:
            return
        if not await self._ask(confirm, DELETE_ALL_PROMPT):
            return

        async with self._pending(ACTION_DELETE_ALL):
            try:
                await self.client.delete_all()
                state.status = STATUS_ALL_DELETED
                state.error = ""
                state.selected_id = None
                state.edit_form = TutorialForm()
                logger.info("All tutorials deleted")
                await self.load()
            except Exception as e:
                state.error = to_error_message(e)
                logger.warning("Delete all failed: %s", state.error)
