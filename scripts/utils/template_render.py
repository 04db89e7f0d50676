"""Simple template renderer with basic Handlebars-like syntax.

Supports:
  {{variable}}             - HTML-escaped variable substitution
  {{#if var}}...{{/if}}    - Conditional blocks

Variables are substituted in a single final pass and are not rescanned, so
text such as ``{{title}}`` inside a value is emitted literally.
"""

from __future__ import annotations

import re
from typing import Any

# ---------------------------------------------------------------------------
# Regex patterns
# ---------------------------------------------------------------------------

_VAR_RE = re.compile(r"\{\{(?!#|/)([a-zA-Z_]\w*)\}\}")
_IF_RE = re.compile(
    r"\{\{#if\s+(\w+)\}\}(.*?)\{\{/if\}\}", re.DOTALL
)

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "`": "&#x60;",
})


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def escape_html(value: Any) -> str:
    """Escape HTML special characters, backtick included, in *value*."""
    return str(value).translate(_HTML_ESCAPES)


def _is_truthy(value: Any) -> bool:
    """Handlebars-style truthiness (empty list / None / False / '' are falsy)."""
    if value is None:
        return False
    if isinstance(value, (list, dict, str)) and len(value) == 0:
        return False
    return bool(value)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def render(template: str, context: dict[str, Any]) -> str:
    """Render a template string against a context dict.

    Args:
        template: Template text.
        context: Dict of variables available inside the template.

    Returns:
        The rendered string.
    """

    # {{#if var}}...{{/if}}
    def _replace_if(m: re.Match) -> str:
        if _is_truthy(context.get(m.group(1))):
            return m.group(2)
        return ""

    template = _IF_RE.sub(_replace_if, template)

    # {{variable}}
    def _replace_var(m: re.Match) -> str:
        val = context.get(m.group(1))
        if val is None:
            return ""
        return escape_html(val)

    return _VAR_RE.sub(_replace_var, template)
