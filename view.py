"""View model builder for the tutorial dashboard.

Converts DashboardState into the plain dicts the page template renders:
copy for the feedback row, list cards, and the label/disabled pair of
every control.
"""

from __future__ import annotations

from typing import Any

from controller import (
    ACTION_CREATE,
    ACTION_DELETE,
    ACTION_DELETE_ALL,
    ACTION_UPDATE,
    DashboardState,
)
from models import Tutorial

DESCRIPTION_PREVIEW_CHARS = 60


def result_count_copy(state: DashboardState) -> str:
    count = len(state.tutorials)
    if state.show_published_only:
        return f"Published tutorials ({count})"
    if state.applied_search:
        return f'Results for "{state.applied_search}" ({count})'
    return f"All tutorials ({count})"


def list_summary(state: DashboardState) -> str:
    if state.tutorials:
        return f"{len(state.tutorials)} tutorial(s) loaded."
    return "No tutorials to show."


def build_card(tutorial: Tutorial, selected_id: Any = None) -> dict:
    """One list entry: title, meta line and status badge."""
    preview = tutorial.description[:DESCRIPTION_PREVIEW_CHARS] if tutorial.description else "No description"
    return {
        "id": tutorial.id,
        "title": tutorial.title or "Untitled tutorial",
        "meta": f"ID #{tutorial.id} - {preview}",
        "badge": "Published" if tutorial.published else "Draft",
        "badge_class": "published" if tutorial.published else "draft",
        "active": selected_id is not None and tutorial.id == selected_id,
    }


def _button(label: str, busy_label: str, busy: bool, disabled: bool = False) -> dict:
    return {"label": busy_label if busy else label, "disabled": busy or disabled}


def build_controls(state: DashboardState) -> dict:
    """Labels and disabled flags for every control on the page."""
    has_filters = bool(state.search_term or state.applied_search or state.show_published_only)
    return {
        "delete_all": _button(
            "Delete All", "Clearing...", state.is_busy(ACTION_DELETE_ALL), disabled=not state.tutorials
        ),
        "refresh": _button("Refresh", "Refreshing...", state.loading),
        "search_input": {"disabled": state.show_published_only},
        "search": {"label": "Search", "disabled": state.show_published_only},
        "reset": {"label": "Reset", "disabled": not has_filters},
        "create": _button("Create tutorial", "Creating...", state.is_busy(ACTION_CREATE)),
        "update": _button("Save changes", "Saving...", state.is_busy(ACTION_UPDATE)),
        "delete": _button("Delete", "Deleting...", state.is_busy(ACTION_DELETE)),
    }


def build_detail_heading(state: DashboardState) -> dict:
    if state.selected_id is not None:
        return {
            "title": "Edit Tutorial",
            "lede": "Update the content, change status, or delete the record.",
        }
    return {
        "title": "Select a Tutorial",
        "lede": "Pick a tutorial from the list to update its details.",
    }


def build_dashboard_view(state: DashboardState) -> dict:
    """Everything the dashboard page shows, derived from the state."""
    return {
        "result_count": result_count_copy(state),
        "summary": list_summary(state),
        "status": state.status,
        "error": state.error,
        "cards": [build_card(t, state.selected_id) for t in state.tutorials],
        "controls": build_controls(state),
        "detail": build_detail_heading(state),
        "has_selection": state.selected_id is not None,
    }
