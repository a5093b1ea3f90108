"""Template engine for ``{{placeholder}}`` prompt templates.

Placeholders are the literal text between ``{{`` and ``}}`` (no nesting, no
escaping). Rendering substitutes all placeholders in a single pass, so
substituted values are never scanned for further placeholders.
"""

from __future__ import annotations

import re
from typing import Mapping

from prompt_forge.errors import TemplateError
from prompt_forge.models import PromptTemplate, now_millis

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^{}]+?)\}\}")


def extract_placeholders(content: str) -> list[str]:
    """Return the distinct placeholder tokens of ``content`` in first-occurrence order."""
    seen: dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(content):
        seen.setdefault(match.group(1), None)
    return list(seen)


def render_template(content: str, values: Mapping[str, str]) -> str:
    """Fill every placeholder with its value, or ``[token]`` when missing or empty."""

    def substitute(match: re.Match) -> str:
        token = match.group(1)
        return values.get(token) or f"[{token}]"

    return PLACEHOLDER_PATTERN.sub(substitute, content)


def find_malformed_braces(content: str) -> list[str]:
    """Return the placeholder problems in ``content``.

    Only an empty ``{{}}`` and a ``{{`` never closed later count; a lone
    ``}}`` is left alone since nested JSON objects end that way.
    """
    problems = []
    if "{{}}" in content:
        problems.append("empty {{}}")
    remainder = PLACEHOLDER_PATTERN.sub("", content)
    last_open = remainder.rfind("{{")
    if last_open != -1 and "}}" not in remainder[last_open + 2:]:
        problems.append("unclosed {{")
    return problems


def validate_template_content(content: str) -> None:
    problems = find_malformed_braces(content)
    if problems:
        raise TemplateError(
            f"Template has {' and '.join(problems)}. "
            "Use {{variable}} with a non-empty name for each placeholder."
        )


def new_template(
    name: str,
    content: str,
    template_id: str | None = None,
    existing_ids=(),
    now_ms: int | None = None,
) -> PromptTemplate:
    """Build a template from form input; passing ``template_id`` edits an existing one."""
    name = name.strip()
    content = content.strip()
    if not name or not content:
        raise TemplateError("A template needs both a name and content.")
    validate_template_content(content)

    if template_id is None:
        taken = set(existing_ids)
        stamp = now_ms if now_ms is not None else now_millis()
        template_id = f"tpl-{stamp}"
        while template_id in taken:
            stamp += 1
            template_id = f"tpl-{stamp}"
    return PromptTemplate(id=template_id, name=name, content=content)
