"""Tests for the Handlebars-like template renderer."""

from utils.template_render import escape_html, render


def test_variable_substitution():
    assert render("Hello {{name}}!", {"name": "world"}) == "Hello world!"


def test_missing_variable_renders_empty():
    assert render("[{{nope}}]", {}) == "[]"


def test_variables_are_escaped():
    out = render("<b>{{title}}</b>", {"title": '<script>alert("x")</script>'})
    assert out == "<b>&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;</b>"


def test_substituted_value_not_rescanned():
    out = render("{{a}}|{{b}}", {"a": "{{b}}", "b": "B"})
    assert out == "{{b}}|B"


def test_if_block():
    tpl = "[{{#if done}}yes {{name}}{{/if}}]"
    assert render(tpl, {"done": True, "name": "n"}) == "[yes n]"
    assert render(tpl, {"done": False, "name": "n"}) == "[]"
    assert render(tpl, {"done": [], "name": "n"}) == "[]"


def test_two_if_blocks_are_independent():
    tpl = "{{#if a}}A{{/if}}-{{#if b}}B{{/if}}"
    assert render(tpl, {"a": 1, "b": 0}) == "A-"


def test_escape_html_covers_all_specials():
    assert escape_html("&<>\"'`") == "&amp;&lt;&gt;&quot;&#x27;&#x60;"
    assert escape_html(42) == "42"
