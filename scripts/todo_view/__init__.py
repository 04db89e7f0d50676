"""HTML rendering for todo records."""

from .view_template import DEFAULT_ITEM_TEMPLATE, ViewTemplate
