"""Tutorial Dashboard — server-rendered page and its form actions."""

import logging
from typing import Optional

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse, RedirectResponse
from jinja2 import DictLoader, Environment, select_autoescape

from routes import get_controller
from view import build_dashboard_view

logger = logging.getLogger(__name__)

dashboard_router = APIRouter()

BASE_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{% block title %}Tutorial Dashboard{% endblock %}</title>
    <style>
        :root {
            --color-bg: #f6f7fb;
            --color-panel: #ffffff;
            --color-border: #e2e4ee;
            --color-text: #1f2333;
            --color-muted: #6b7280;
            --color-primary: #4f46e5;
            --color-success: #16a34a;
            --color-danger: #dc2626;
            --radius: 10px;
        }

        * { box-sizing: border-box; }

        body {
            margin: 0;
            font-family: -apple-system, BlinkMacSystemFont, 'Inter', sans-serif;
            background: var(--color-bg);
            color: var(--color-text);
        }

        .app-shell { max-width: 1200px; margin: 0 auto; padding: 32px 24px; }
        .app-header { display: flex; justify-content: space-between; align-items: flex-end; gap: 16px; }
        .eyebrow { text-transform: uppercase; font-size: 12px; letter-spacing: .08em; color: var(--color-primary); margin: 0; }
        .lede { color: var(--color-muted); }
        .header-actions, .form-actions, .search-bar { display: flex; gap: 8px; }
        .header-actions form { margin: 0; }

        button {
            border: none;
            border-radius: var(--radius);
            padding: 8px 14px;
            background: var(--color-primary);
            color: #fff;
            font-weight: 600;
            cursor: pointer;
        }
        button.ghost { background: transparent; color: var(--color-text); border: 1px solid var(--color-border); }
        button.danger { background: var(--color-danger); }
        button:disabled { opacity: .5; cursor: not-allowed; }

        .feedback-row { display: flex; gap: 8px; margin: 16px 0; flex-wrap: wrap; }
        .status-chip { padding: 4px 10px; border-radius: 999px; font-size: 13px; }
        .status-chip.muted { background: #eceef6; color: var(--color-muted); }
        .status-chip.success { background: #dcfce7; color: var(--color-success); }
        .status-chip.error { background: #fee2e2; color: var(--color-danger); }

        .app-grid { display: grid; grid-template-columns: 1fr 1fr; gap: 24px; }
        .panel { background: var(--color-panel); border: 1px solid var(--color-border); border-radius: var(--radius); padding: 20px; }
        .panel-header { display: flex; justify-content: space-between; align-items: flex-start; }
        .panel-header form { margin: 0; }

        .tutorial-list { list-style: none; padding: 0; margin: 0; display: grid; gap: 8px; }
        .tutorial-list form { margin: 0; }
        .tutorial-card {
            width: 100%;
            display: flex;
            justify-content: space-between;
            text-align: left;
            background: transparent;
            color: var(--color-text);
            border: 1px solid var(--color-border);
        }
        .tutorial-card.active { border-color: var(--color-primary); background: #eef2ff; }
        .tutorial-title { margin: 0; font-weight: 600; }
        .tutorial-meta { margin: 4px 0 0; color: var(--color-muted); font-weight: 400; font-size: 13px; }
        .badge { align-self: center; padding: 2px 8px; border-radius: 999px; font-size: 12px; }
        .badge.published { background: #dcfce7; color: var(--color-success); }
        .badge.draft { background: #eceef6; color: var(--color-muted); }

        .stack { margin-bottom: 24px; }
        .form-card { display: grid; gap: 12px; border: 1px solid var(--color-border); border-radius: var(--radius); padding: 16px; }
        .form-card label { display: grid; gap: 4px; }
        .form-card label.checkbox { display: flex; align-items: center; gap: 8px; }
        input[type=text], textarea { padding: 8px; border: 1px solid var(--color-border); border-radius: 8px; font: inherit; }
        .placeholder { color: var(--color-muted); }
    </style>
</head>
<body>
    <div class="app-shell">
        {% block content %}{% endblock %}
    </div>
</body>
</html>
"""

DASHBOARD_HTML = """
{% extends "base.html" %}
{% block content %}
<header class="app-header">
    <div>
        <p class="eyebrow">FastAPI + httpx</p>
        <h1>Tutorial Dashboard</h1>
        <p class="lede">Manage the tutorials stored by your backend API.</p>
    </div>
    <div class="header-actions">
        <form method="post" action="/tutorials/delete-all">
            <button type="submit" class="ghost" {% if view.controls.delete_all.disabled %}disabled{% endif %}>
                {{ view.controls.delete_all.label }}
            </button>
        </form>
        <form method="post" action="/refresh">
            <button type="submit" {% if view.controls.refresh.disabled %}disabled{% endif %}>
                {{ view.controls.refresh.label }}
            </button>
        </form>
    </div>
</header>

<div class="feedback-row">
    <span class="status-chip muted">{{ view.result_count }}</span>
    {% if view.status %}<span class="status-chip success">{{ view.status }}</span>{% endif %}
    {% if view.error %}<span class="status-chip error">{{ view.error }}</span>{% endif %}
</div>

<section class="app-grid">
    <div class="panel list-panel">
        <div class="panel-header">
            <div>
                <h2>Library</h2>
                <p>Browse and filter tutorials.</p>
            </div>
            <form method="post" action="/filters/published" class="toggle">
                <input type="hidden" name="published_only" value="{{ '' if state.show_published_only else 'on' }}">
                <button type="submit" class="ghost">
                    {{ '☑' if state.show_published_only else '☐' }} Published only
                </button>
            </form>
        </div>

        <form class="search-bar" method="post" action="/search">
            <input type="text" name="search_term" placeholder="Search by title"
                   value="{{ state.search_term }}" {% if view.controls.search_input.disabled %}disabled{% endif %}>
            <button type="submit" {% if view.controls.search.disabled %}disabled{% endif %}>
                {{ view.controls.search.label }}
            </button>
            <button type="submit" class="ghost" formaction="/filters/clear"
                    {% if view.controls.reset.disabled %}disabled{% endif %}>
                {{ view.controls.reset.label }}
            </button>
        </form>

        <div class="list-summary"><p>{{ view.summary }}</p></div>

        <ul class="tutorial-list">
            {% for card in view.cards %}
            <li>
                <form method="post" action="/select">
                    <input type="hidden" name="tutorial_id" value="{{ card.id }}">
                    <button type="submit" class="tutorial-card{% if card.active %} active{% endif %}">
                        <div>
                            <p class="tutorial-title">{{ card.title }}</p>
                            <p class="tutorial-meta">{{ card.meta }}</p>
                        </div>
                        <span class="badge {{ card.badge_class }}">{{ card.badge }}</span>
                    </button>
                </form>
            </li>
            {% endfor %}
        </ul>
    </div>

    <div class="panel detail-panel">
        <section class="stack">
            <div>
                <h2>Create Tutorial</h2>
                <p>Add new tutorials directly into your database.</p>
            </div>
            <form class="form-card" method="post" action="/tutorials">
                <label>
                    <span>Title</span>
                    <input type="text" name="title" value="{{ state.create_form.title }}">
                </label>
                <label>
                    <span>Description</span>
                    <textarea name="description" rows="3">{{ state.create_form.description }}</textarea>
                </label>
                <label class="checkbox">
                    <input type="checkbox" name="published" {% if state.create_form.published %}checked{% endif %}>
                    <span>Mark as published</span>
                </label>
                <button type="submit" {% if view.controls.create.disabled %}disabled{% endif %}>
                    {{ view.controls.create.label }}
                </button>
            </form>
        </section>

        <section class="stack">
            <div>
                <h2>{{ view.detail.title }}</h2>
                <p>{{ view.detail.lede }}</p>
            </div>
            {% if view.has_selection %}
            <form class="form-card" method="post" action="/tutorials/selected">
                <label>
                    <span>Title</span>
                    <input type="text" name="title" value="{{ state.edit_form.title }}">
                </label>
                <label>
                    <span>Description</span>
                    <textarea name="description" rows="4">{{ state.edit_form.description }}</textarea>
                </label>
                <label class="checkbox">
                    <input type="checkbox" name="published" {% if state.edit_form.published %}checked{% endif %}>
                    <span>Published</span>
                </label>
                <div class="form-actions">
                    <button type="submit" {% if view.controls.update.disabled %}disabled{% endif %}>
                        {{ view.controls.update.label }}
                    </button>
                    <button type="submit" class="ghost" formaction="/select">Cancel</button>
                    <button type="submit" class="danger" formaction="/tutorials/selected/delete"
                            {% if view.controls.delete.disabled %}disabled{% endif %}>
                        {{ view.controls.delete.label }}
                    </button>
                </div>
            </form>
            {% else %}
            <div class="form-card placeholder">
                <p>Choose a tutorial on the left to see its details here.</p>
            </div>
            {% endif %}
        </section>
    </div>
</section>
{% endblock %}
"""

CONFIRM_HTML = """
{% extends "base.html" %}
{% block title %}Confirm — Tutorial Dashboard{% endblock %}
{% block content %}
<div class="panel">
    <h2>Please confirm</h2>
    <p>{{ prompt }}</p>
    <div class="form-actions">
        <form method="post" action="{{ action }}">
            <input type="hidden" name="confirmed" value="yes">
            <button type="submit" class="danger">Yes</button>
        </form>
        <form method="post" action="{{ action }}">
            <input type="hidden" name="confirmed" value="no">
            <button type="submit" class="ghost">No</button>
        </form>
    </div>
</div>
{% endblock %}
"""

templates = Environment(
    loader=DictLoader({
        "base.html": BASE_HTML,
        "dashboard.html": DASHBOARD_HTML,
        "confirm.html": CONFIRM_HTML,
    }),
    autoescape=select_autoescape(default_for_string=True, default=True),
)


class FormConfirmation:
    """Confirmation answered by a posted `confirmed` field.

    With no answer posted, the prompt is recorded so the page can ask it.
    """

    def __init__(self, answer: Optional[str]):
        self.answer = answer
        self.prompt: Optional[str] = None

    def __call__(self, prompt: str) -> bool:
        self.prompt = prompt
        return self.answer == "yes"

    @property
    def needs_prompt(self) -> bool:
        return self.answer is None and self.prompt is not None


def _back_to_dashboard() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


def _confirm_page(prompt: str, action: str) -> HTMLResponse:
    html = templates.get_template("confirm.html").render(prompt=prompt, action=action)
    return HTMLResponse(html)


@dashboard_router.get("/", response_class=HTMLResponse)
async def dashboard():
    controller = get_controller()
    state = controller.state
    html = templates.get_template("dashboard.html").render(
        state=state,
        view=build_dashboard_view(state),
    )
    return HTMLResponse(html)


@dashboard_router.post("/search")
async def search(search_term: str = Form("")):
    controller = get_controller()
    if not controller.state.show_published_only:
        controller.set_search_term(search_term)
        await controller.submit_search()
    return _back_to_dashboard()


@dashboard_router.post("/filters/clear")
async def clear_filters():
    await get_controller().clear_filters()
    return _back_to_dashboard()


@dashboard_router.post("/filters/published")
async def toggle_published(published_only: str = Form("")):
    await get_controller().set_published_only(bool(published_only))
    return _back_to_dashboard()


@dashboard_router.post("/refresh")
async def refresh():
    await get_controller().refresh()
    return _back_to_dashboard()


@dashboard_router.post("/select")
async def select(tutorial_id: str = Form("")):
    get_controller().select(tutorial_id or None)
    return _back_to_dashboard()


@dashboard_router.post("/tutorials")
async def create_tutorial(
    title: str = Form(""),
    description: str = Form(""),
    published: Optional[str] = Form(None),
):
    controller = get_controller()
    controller.update_create_form(title=title, description=description, published=bool(published))
    await controller.create()
    return _back_to_dashboard()


@dashboard_router.post("/tutorials/selected")
async def update_tutorial(
    title: str = Form(""),
    description: str = Form(""),
    published: Optional[str] = Form(None),
):
    controller = get_controller()
    if controller.state.selected_id is not None:
        controller.update_edit_form(title=title, description=description, published=bool(published))
        await controller.update()
    return _back_to_dashboard()


@dashboard_router.post("/tutorials/selected/delete")
async def delete_tutorial(confirmed: Optional[str] = Form(None)):
    confirmation = FormConfirmation(confirmed)
    await get_controller().delete(confirm=confirmation)
    if confirmation.needs_prompt:
        return _confirm_page(confirmation.prompt, action="/tutorials/selected/delete")
    return _back_to_dashboard()


@dashboard_router.post("/tutorials/delete-all")
async def delete_all_tutorials(confirmed: Optional[str] = Form(None)):
    confirmation = FormConfirmation(confirmed)
    await get_controller().delete_all(confirm=confirmation)
    if confirmation.needs_prompt:
        return _confirm_page(confirmation.prompt, action="/tutorials/delete-all")
    return _back_to_dashboard()
