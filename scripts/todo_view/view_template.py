"""HTML fragments for the todo list view.

Pure string rendering: no I/O, no state beyond the item template.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from todo_store.todo_record import TodoRecord
from utils.template_render import render

DEFAULT_ITEM_TEMPLATE = (
    '<li data-id="{{id}}" class="{{#if completed}}completed{{/if}}">'
    '<div class="view">'
    '<input class="toggle" type="checkbox"{{#if completed}} checked{{/if}}>'
    "<label>{{title}}</label>"
    '<button class="destroy"></button>'
    "</div>"
    "</li>"
)


def _item_context(record: TodoRecord | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(record, TodoRecord):
        return {"id": record.id, "title": record.title, "completed": record.completed}
    return {
        "id": record.get("id"),
        "title": record.get("title", ""),
        "completed": bool(record.get("completed")),
    }


class ViewTemplate:
    """Renders todo records and the footer labels as HTML strings."""

    def __init__(self, item_template: str = DEFAULT_ITEM_TEMPLATE) -> None:
        self.item_template = item_template

    def render_list(self, records: Iterable[TodoRecord | Mapping[str, Any]]) -> str:
        """Concatenate one ``<li>`` per record, in order.

        Completed records get ``class="completed"`` and a checked toggle.
        Ids and titles are HTML-escaped.

        Example::

            ViewTemplate().render_list([{"id": 1, "title": "x", "completed": True}])
        """
        return "".join(
            render(self.item_template, _item_context(record)) for record in records
        )

    def remaining_count_label(self, active_count: int) -> str:
        """``<strong>N</strong> item(s) left``, singular only for exactly one."""
        plural = "" if active_count == 1 else "s"
        return f"<strong>{active_count}</strong> item{plural} left"

    def clear_completed_button_label(self, completed_count: int) -> str:
        """Label for the clear button, empty when nothing is completed."""
        if completed_count > 0:
            return "Clear completed"
        return ""
