"""Tests for ViewTemplate – list items and footer labels."""

import pytest

from todo_store import TodoRecord
from todo_view import ViewTemplate


@pytest.fixture
def view() -> ViewTemplate:
    return ViewTemplate()


class TestRenderList:
    def test_empty_list(self, view):
        assert view.render_list([]) == ""

    def test_completed_record(self, view):
        html = view.render_list([{"id": 1, "title": "x", "completed": True}])
        assert html == (
            '<li data-id="1" class="completed">'
            '<div class="view">'
            '<input class="toggle" type="checkbox" checked>'
            "<label>x</label>"
            '<button class="destroy"></button>'
            "</div>"
            "</li>"
        )

    def test_active_record(self, view):
        html = view.render_list([{"id": 2, "title": "y", "completed": False}])
        assert 'class=""' in html
        assert "completed" not in html
        assert "checked" not in html
        assert "<label>y</label>" in html

    def test_preserves_order(self, view):
        html = view.render_list([
            {"id": 1, "title": "first"},
            {"id": 2, "title": "second"},
        ])
        assert html.index("first") < html.index("second")
        assert html.count("<li ") == 2

    def test_accepts_todo_records(self, view):
        html = view.render_list([TodoRecord(id=5, title="typed", completed=True)])
        assert 'data-id="5"' in html
        assert "checked" in html

    def test_title_is_escaped(self, view):
        html = view.render_list([{"id": 1, "title": "<img src=x onerror=alert(1)>"}])
        assert "<img" not in html
        assert "&lt;img src=x onerror=alert(1)&gt;" in html

    def test_placeholder_in_title_is_literal(self, view):
        html = view.render_list([
            {"id": 3, "title": "{{id}} {{#if completed}}boom{{/if}}", "completed": True},
        ])
        assert "<label>{{id}} {{#if completed}}boom{{/if}}</label>" in html

    def test_custom_item_template(self):
        view = ViewTemplate(item_template="<p>{{title}}</p>")
        assert view.render_list([{"title": "a"}, {"title": "b"}]) == "<p>a</p><p>b</p>"


class TestLabels:
    def test_singular(self, view):
        assert view.remaining_count_label(1) == "<strong>1</strong> item left"

    @pytest.mark.parametrize("count", [0, 2, 17])
    def test_plural(self, view, count):
        assert view.remaining_count_label(count) == f"<strong>{count}</strong> items left"

    def test_clear_completed_hidden_when_none(self, view):
        assert view.clear_completed_button_label(0) == ""

    def test_clear_completed_shown(self, view):
        assert view.clear_completed_button_label(3) == "Clear completed"
