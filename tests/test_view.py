"""Tests for the dashboard view model."""

from controller import DashboardState
from models import Tutorial
from view import build_card, build_controls, build_dashboard_view, list_summary, result_count_copy


def make_state(**kwargs):
    tutorials = kwargs.pop("tutorials", [
        Tutorial(id=1, title="A", description="", published=False),
        Tutorial(id=2, title="", description="x" * 80, published=True),
    ])
    return DashboardState(tutorials=tutorials, **kwargs)


def test_result_count_copy_variants():
    assert result_count_copy(make_state()) == "All tutorials (2)"
    assert result_count_copy(make_state(applied_search="py")) == 'Results for "py" (2)'
    assert result_count_copy(make_state(applied_search="py", show_published_only=True)) == "Published tutorials (2)"


def test_list_summary():
    assert list_summary(make_state()) == "2 tutorial(s) loaded."
    assert list_summary(make_state(tutorials=[])) == "No tutorials to show."


def test_card_for_draft_without_description():
    card = build_card(Tutorial(id=1, title="A", description="", published=False))

    assert card["title"] == "A"
    assert card["meta"] == "ID #1 - No description"
    assert card["badge"] == "Draft"
    assert card["active"] is False


def test_card_for_untitled_published_tutorial():
    card = build_card(Tutorial(id=2, title="", description="x" * 80, published=True), selected_id=2)

    assert card["title"] == "Untitled tutorial"
    assert card["meta"] == "ID #2 - " + "x" * 60
    assert card["badge"] == "Published"
    assert card["active"] is True


def test_controls_idle():
    controls = build_controls(make_state())

    assert controls["delete_all"] == {"label": "Delete All", "disabled": False}
    assert controls["refresh"] == {"label": "Refresh", "disabled": False}
    assert controls["search"]["disabled"] is False
    assert controls["reset"]["disabled"] is True
    assert controls["create"] == {"label": "Create tutorial", "disabled": False}


def test_controls_busy_labels():
    assert build_controls(make_state(pending_action="deleteAll"))["delete_all"] == {
        "label": "Clearing...",
        "disabled": True,
    }
    assert build_controls(make_state(loading=True))["refresh"] == {"label": "Refreshing...", "disabled": True}
    assert build_controls(make_state(pending_action="create"))["create"]["label"] == "Creating..."
    assert build_controls(make_state(pending_action="update"))["update"]["label"] == "Saving..."
    assert build_controls(make_state(pending_action="delete"))["delete"] == {"label": "Deleting...", "disabled": True}


def test_delete_all_disabled_when_empty():
    assert build_controls(make_state(tutorials=[]))["delete_all"]["disabled"] is True


def test_published_only_disables_search():
    controls = build_controls(make_state(show_published_only=True))

    assert controls["search_input"]["disabled"] is True
    assert controls["search"]["disabled"] is True
    assert controls["reset"]["disabled"] is False


def test_reset_enabled_by_live_search_term():
    assert build_controls(make_state(search_term="a"))["reset"]["disabled"] is False


def test_detail_heading_follows_selection():
    assert build_dashboard_view(make_state())["detail"]["title"] == "Select a Tutorial"
    view = build_dashboard_view(make_state(selected_id=1))
    assert view["detail"]["title"] == "Edit Tutorial"
    assert view["has_selection"] is True
    assert [c["active"] for c in view["cards"]] == [True, False]


def test_is_busy_names_the_pending_action():
    state = make_state(pending_action="update")

    assert state.is_busy("update") is True
    assert state.is_busy("create") is False
    assert build_controls(state)["update"]["disabled"] is True
    assert build_controls(state)["create"]["disabled"] is False
