"""HTML rendering of the fact sharing page.

Each function renders one component of the page from session state and
returns an HTML fragment. User supplied values are always escaped.
"""

from html import escape

from .categories import ALL_CATEGORIES, CATEGORIES, CategoryFilter, category_color
from .models import Fact, VoteKey
from .state.notifications import Notification
from .state.sessions import FactsSession
from .state.submission_form import SubmissionForm
from .validation import is_valid_url

APP_TITLE = "Today I Learned"
EMPTY_LIST_MESSAGE = "No facts found for this category yet. Create one! 😏"
DISPUTED_MARKER = "[⚡DISPUTED]"

_VOTE_LABELS: dict[VoteKey, str] = {
    VoteKey.INTERESTING: "👍",
    VoteKey.MINDBLOWING: "🤯",
    VoteKey.FALSE: "⛔️",
}


def _disabled(flag: bool) -> str:
    return " disabled" if flag else ""


def _active(flag: bool) -> str:
    return " active" if flag else ""


def render_header(show_form: bool, title: str = APP_TITLE) -> str:
    label = "Close" if show_form else "Share a fact"
    return (
        '<header class="header">'
        f'<div class="logo"><h1>{escape(title)}</h1></div>'
        '<form method="post" action="/form/toggle">'
        f'<button class="btn btn-large btn-open">{label}</button>'
        "</form>"
        "</header>"
    )


def render_notifications(notifications: list[Notification]) -> str:
    if not notifications:
        return ""
    items = "".join(
        f'<p class="notification">{escape(n.message)}</p>'
        for n in notifications
    )
    return f'<div class="notifications" role="alert">{items}</div>'


def render_form(form: SubmissionForm) -> str:
    """Render the submission form with its current draft."""
    disabled = _disabled(form.is_submitting)
    options = ['<option value="">Choose category:</option>']
    for info in CATEGORIES:
        selected = " selected" if form.category == info.name.value else ""
        options.append(
            f'<option value="{info.name.value}"{selected}>'
            f"{info.name.value.upper()}</option>"
        )
    errors = "".join(
        f'<li class="form-error">{escape(error)}</li>' for error in form.errors
    )

    return (
        '<form class="fact-form" method="post" action="/facts">'
        '<input type="text" name="text" placeholder="Share a fact with the world..." '
        f'value="{escape(form.text)}"{disabled} />'
        f"<span>{form.remaining_characters}</span>"
        '<input type="text" name="source" placeholder="Trustworthy source..." '
        f'value="{escape(form.source)}"{disabled} />'
        f'<select name="category"{disabled}>{"".join(options)}</select>'
        f'<button class="btn btn-large"{disabled}>Post</button>'
        + (f'<ul class="form-errors">{errors}</ul>' if errors else "")
        + "</form>"
    )


def render_category_filter(current: CategoryFilter) -> str:
    """Render the "All" option followed by one button per category."""
    items = [
        '<li class="category">'
        f'<a class="btn btn-all-categories{_active(current == ALL_CATEGORIES)}" '
        f'href="/?category={ALL_CATEGORIES}">All</a>'
        "</li>"
    ]
    for info in CATEGORIES:
        items.append(
            '<li class="category">'
            f'<a class="btn btn-category{_active(current == info.name)}" '
            f'style="background-color: {info.color}" '
            f'href="/?category={info.name.value}">{info.name.value}</a>'
            "</li>"
        )
    return f"<aside><ul>{''.join(items)}</ul></aside>"


def render_loader() -> str:
    return '<p class="message">Loading...</p>'


def _render_source(source: str) -> str:
    # Stored rows are not validated, only http(s) sources become links.
    if not is_valid_url(source):
        return f'<span class="source">({escape(source)})</span>'
    return (
        f'<a class="source" href="{escape(source)}" target="_blank" '
        'rel="noopener noreferrer">(Source)</a>'
    )


def render_fact(fact: Fact, is_updating: bool = False) -> str:
    """Render a single fact item with its vote buttons."""
    disputed = (
        f'<span class="disputed">{DISPUTED_MARKER}</span>' if fact.is_disputed else ""
    )
    buttons = "".join(
        f'<form method="post" action="/facts/{fact.id}/votes/{vote.value}">'
        f"<button{_disabled(is_updating)}>{label} {fact.votes_for(vote)}</button>"
        "</form>"
        for vote, label in _VOTE_LABELS.items()
    )
    return (
        '<li class="fact">'
        f"<p>{disputed}{escape(fact.text)}"
        f"{_render_source(fact.source)}</p>"
        f'<span class="tag" style="background-color: {category_color(fact.category)}">'
        f"{fact.category.value}</span>"
        f'<div class="vote-buttons">{buttons}</div>'
        "</li>"
    )


def render_fact_list(facts: list[Fact], session: FactsSession | None = None) -> str:
    if not facts:
        return f'<p class="message">{EMPTY_LIST_MESSAGE}</p>'

    items = "".join(
        render_fact(fact, session.is_updating(fact.id) if session else False)
        for fact in facts
    )
    return (
        f'<section><ul class="facts-list">{items}</ul>'
        f"<p>There are {len(facts)} facts in the list.</p></section>"
    )


def render_page(session: FactsSession, title: str = APP_TITLE) -> str:
    """Render the whole page and drain the session's notifications."""
    collection = session.collection
    body = render_loader() if collection.is_loading else render_fact_list(
        collection.facts, session
    )
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8" />'
        '<meta name="viewport" content="width=device-width, initial-scale=1" />'
        f"<title>{escape(title)}</title>"
        '<link rel="stylesheet" href="/static/styles.css" />'
        "</head><body>"
        + render_header(session.form.is_open, title)
        + render_notifications(session.notifications.drain())
        + (render_form(session.form) if session.form.is_open else "")
        + '<main class="main">'
        + render_category_filter(collection.current_category)
        + body
        + "</main></body></html>"
    )
