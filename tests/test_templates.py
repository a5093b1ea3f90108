"""Tests for the {{placeholder}} template engine."""

from __future__ import annotations

import pytest

from prompt_forge.errors import TemplateError
from prompt_forge.templates import (
    extract_placeholders,
    find_malformed_braces,
    new_template,
    render_template,
)


class TestExtractPlaceholders:
    def test_distinct_in_first_occurrence_order(self) -> None:
        assert extract_placeholders("{{a}} and {{a}} and {{b}}") == ["a", "b"]

    def test_order_follows_content_not_alphabet(self) -> None:
        assert extract_placeholders("{{zeta}} {{alpha}} {{zeta}} {{mid}}") == ["zeta", "alpha", "mid"]

    def test_no_placeholders(self) -> None:
        assert extract_placeholders("Plain text with {single} braces") == []
        assert extract_placeholders("") == []

    def test_tokens_taken_verbatim(self) -> None:
        assert extract_placeholders("{{ name }} {{first-name!}}") == [" name ", "first-name!"]

    def test_non_greedy(self) -> None:
        assert extract_placeholders("{{a}}x{{b}}") == ["a", "b"]

    def test_empty_braces_are_not_placeholders(self) -> None:
        assert extract_placeholders("{{}} {{x}}") == ["x"]


class TestRenderTemplate:
    def test_missing_value_uses_bracket_fallback(self) -> None:
        assert render_template("Hi {{name}}", {}) == "Hi [name]"

    def test_supplied_value(self) -> None:
        assert render_template("Hi {{name}}", {"name": "Sam"}) == "Hi Sam"

    def test_empty_value_uses_fallback(self) -> None:
        assert render_template("Hi {{name}}", {"name": ""}) == "Hi [name]"

    def test_every_occurrence_replaced(self) -> None:
        content = "{{who}} met {{who}} at {{place}}; {{who}} left."
        rendered = render_template(content, {"who": "Ada"})
        assert rendered == "Ada met Ada at [place]; Ada left."

    def test_values_are_not_rescanned(self) -> None:
        rendered = render_template("{{a}} {{b}}", {"a": "{{b}}", "b": "B"})
        assert rendered == "{{b}} B"

    def test_pure_function_of_content_and_values(self) -> None:
        content = "Write about {{topic}} for {{platform}}"
        values = {"topic": "tea"}
        assert render_template(content, values) == render_template(content, dict(values))

    def test_unknown_values_ignored(self) -> None:
        assert render_template("{{a}}", {"a": "1", "zzz": "2"}) == "1"


class TestTemplateValidation:
    def test_well_formed(self) -> None:
        assert find_malformed_braces("{{a}} and {single} and {{b}}") == []

    def test_unclosed_open(self) -> None:
        assert find_malformed_braces("Hello {{name") == ["unclosed {{"]

    def test_unclosed_open_after_placeholder(self) -> None:
        assert find_malformed_braces("{{a}} then {{b") == ["unclosed {{"]

    def test_lone_close_is_allowed(self) -> None:
        assert find_malformed_braces("Hello name}}") == []

    def test_empty_placeholder_is_malformed(self) -> None:
        assert find_malformed_braces("{{}}") == ["empty {{}}"]

    def test_nested_json_without_placeholders(self) -> None:
        content = 'Respond with {"a": {"b": 1}}'
        assert find_malformed_braces(content) == []
        assert new_template("Json", content).content == content

    def test_nested_json_with_placeholder(self) -> None:
        content = 'Return JSON like {"user": {"name": "{{name}}"}}'
        template = new_template("Json", content)
        assert extract_placeholders(template.content) == ["name"]
        assert render_template(template.content, {"name": "Ada"}) == 'Return JSON like {"user": {"name": "Ada"}}'

    def test_new_template_trims_and_ids(self) -> None:
        template = new_template("  Blog  ", "  Post about {{topic}}  ", now_ms=1000)
        assert template.id == "tpl-1000"
        assert template.name == "Blog"
        assert template.content == "Post about {{topic}}"

    def test_new_template_keeps_given_id(self) -> None:
        template = new_template("Blog", "x", template_id="tpl-7", existing_ids=["tpl-7"])
        assert template.id == "tpl-7"

    def test_new_template_avoids_id_collision(self) -> None:
        template = new_template("Blog", "x", existing_ids=["tpl-5"], now_ms=5)
        assert template.id == "tpl-6"

    @pytest.mark.parametrize("name,content", [("", "x"), ("name", "   ")])
    def test_new_template_requires_name_and_content(self, name, content) -> None:
        with pytest.raises(TemplateError):
            new_template(name, content)

    def test_new_template_rejects_malformed(self) -> None:
        with pytest.raises(TemplateError, match="unclosed"):
            new_template("Broken", "Hello {{name")
