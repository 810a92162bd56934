"""Tests for the HTML components."""

import pytest

from til.features.facts.categories import ALL_CATEGORIES, Category
from til.features.facts.models import Fact
from til.features.facts.rendering import (
    render_category_filter,
    render_fact,
    render_fact_list,
    render_form,
    render_header,
    render_notifications,
)
from til.features.facts.state import NotificationCenter, SubmissionForm


def make_fact(**overrides) -> Fact:
    values = {
        "id": 5,
        "text": "Honey never spoils",
        "source": "https://example.com/honey",
        "category": Category.HISTORY,
        "votes_interesting": 3,
        "votes_mindblowing": 2,
        "votes_false": 1,
    }
    values.update(overrides)
    return Fact(**values)


def test_fact_shows_counts_tag_and_source() -> None:
    html = render_fact(make_fact())

    assert "Honey never spoils" in html
    assert 'href="https://example.com/honey"' in html
    assert "background-color: #f97316" in html
    assert "👍 3" in html
    assert "🤯 2" in html
    assert "⛔️ 1" in html
    assert 'action="/facts/5/votes/interesting"' in html
    assert "DISPUTED" not in html
    assert "disabled" not in html


def test_fact_escapes_user_content() -> None:
    html = render_fact(make_fact(text="<script>alert(1)</script>"))

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_http_source_is_a_link() -> None:
    html = render_fact(make_fact(source="https://example.com/honey"))

    assert '<a class="source" href="https://example.com/honey"' in html


@pytest.mark.parametrize(
    "source", ["javascript:alert(1)", "data:text/html,hi", "not a url"]
)
def test_non_http_source_is_not_a_link(source: str) -> None:
    html = render_fact(make_fact(source=source, category=Category.SCIENCE))

    assert "<a " not in html
    assert "href=" not in html
    assert f'<span class="source">({source})</span>' in html


def test_updating_fact_disables_all_vote_buttons() -> None:
    html = render_fact(make_fact(), is_updating=True)

    assert html.count("<button disabled>") == 3


def test_fact_list_counts_facts() -> None:
    html = render_fact_list([make_fact(id=1), make_fact(id=2)])

    assert "There are 2 facts in the list." in html


def test_empty_fact_list() -> None:
    html = render_fact_list([])

    assert "No facts found for this category yet. Create one!" in html


def test_category_filter_offers_all_and_every_category() -> None:
    html = render_category_filter(ALL_CATEGORIES)

    assert 'href="/?category=all"' in html
    for category in Category:
        assert f'href="/?category={category.value}"' in html
    assert html.count(" active") == 1


def test_header_toggle_label() -> None:
    assert "Share a fact" in render_header(show_form=False)
    assert "Close" in render_header(show_form=True)


def test_form_disables_inputs_while_submitting() -> None:
    form = SubmissionForm(
        create_fact=None, collection=None, notifications=NotificationCenter()
    )
    form.update_draft(text="abc", source="https://example.com", category="news")
    form.is_submitting = True

    html = render_form(form)

    assert html.count(" disabled") == 4
    assert "<span>197</span>" in html
    assert '<option value="news" selected>NEWS</option>' in html


def test_notifications_are_escaped() -> None:
    center = NotificationCenter()
    center.error("<b>oops</b>")

    html = render_notifications(center.drain())

    assert 'role="alert"' in html
    assert "&lt;b&gt;oops&lt;/b&gt;" in html
    assert render_notifications([]) == ""
