"""Application state container.

``AppState`` holds everything the UI shows and is the only place it changes.
Each mutation that touches a persisted collection hands the whole collection
to the ``save(key, data)`` callable it was built with.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from prompt_forge.constants import (
    DEFAULT_INTENSITY,
    DEFAULT_THEME,
    HISTORY_LIMIT,
    LOCAL_STORAGE_CUSTOM_STYLES,
    LOCAL_STORAGE_HISTORY,
    LOCAL_STORAGE_TEMPLATES,
    LOCAL_STORAGE_THEME,
)
from prompt_forge.errors import EnhancementError
from prompt_forge.llm import enhance_prompt
from prompt_forge.models import EnhancementResult, HistoryItem, PromptTemplate, StyleDefinition, now_millis
from prompt_forge.styles import (
    DEFAULT_STYLE,
    INTENSITY_STYLE_IDS,
    PREDEFINED_STYLES,
    find_style,
    new_custom_style,
)
from prompt_forge.templates import extract_placeholders, new_template, render_template

logger = logging.getLogger(__name__)


def _discard(key, data) -> None:
    pass


@dataclass
class AppState:
    save: Callable = _discard
    theme: str = DEFAULT_THEME
    custom_styles: list[StyleDefinition] = field(default_factory=list)
    templates: list[PromptTemplate] = field(default_factory=list)
    history: list[HistoryItem] = field(default_factory=list)
    selected_style_id: str = DEFAULT_STYLE.id
    intensity: int = DEFAULT_INTENSITY
    input_text: str = ""
    active_template_id: str | None = None
    template_values: dict[str, str] = field(default_factory=dict)
    template_attached: bool = False
    result: EnhancementResult | None = None
    error: str | None = None

    @classmethod
    def from_snapshot(cls, snapshot: dict, save: Callable = _discard) -> "AppState":
        return cls(
            save=save,
            theme=snapshot["theme"],
            custom_styles=list(snapshot["custom_styles"]),
            templates=list(snapshot["templates"]),
            history=list(snapshot["history"]),
        )

    # Styles

    @property
    def all_styles(self) -> list[StyleDefinition]:
        return [*PREDEFINED_STYLES, *self.custom_styles]

    @property
    def selected_style(self) -> StyleDefinition:
        return find_style(self.all_styles, self.selected_style_id) or DEFAULT_STYLE

    def select_style(self, style_id: str) -> None:
        if find_style(self.all_styles, style_id) is None:
            raise KeyError(style_id)
        self.selected_style_id = style_id

    def add_custom_style(self, name: str, instruction: str, now_ms: int | None = None) -> StyleDefinition:
        style = new_custom_style(
            name,
            instruction,
            existing_ids=[s.id for s in self.custom_styles],
            now_ms=now_ms,
        )
        self.custom_styles = [*self.custom_styles, style]
        self.selected_style_id = style.id
        self.save(LOCAL_STORAGE_CUSTOM_STYLES, self.custom_styles)
        return style

    def delete_custom_style(self, style_id: str) -> None:
        if find_style(self.custom_styles, style_id) is None:
            raise KeyError(style_id)
        self.custom_styles = [s for s in self.custom_styles if s.id != style_id]
        if self.selected_style_id == style_id:
            self.selected_style_id = DEFAULT_STYLE.id
        self.save(LOCAL_STORAGE_CUSTOM_STYLES, self.custom_styles)

    @property
    def intensity_adjustable(self) -> bool:
        return self.selected_style_id in INTENSITY_STYLE_IDS

    def set_intensity(self, intensity: int) -> None:
        self.intensity = intensity

    # Templates and input text

    @property
    def active_template(self) -> PromptTemplate | None:
        for template in self.templates:
            if template.id == self.active_template_id:
                return template
        return None

    @property
    def placeholders(self) -> list[str]:
        template = self.active_template
        return extract_placeholders(template.content) if template else []

    def save_template(self, name: str, content: str, template_id: str | None = None, now_ms: int | None = None) -> PromptTemplate:
        """Create a template, or replace the one with ``template_id``."""
        template = new_template(
            name,
            content,
            template_id=template_id,
            existing_ids=[t.id for t in self.templates],
            now_ms=now_ms,
        )
        if any(t.id == template.id for t in self.templates):
            self.templates = [template if t.id == template.id else t for t in self.templates]
        else:
            self.templates = [*self.templates, template]
        self.save(LOCAL_STORAGE_TEMPLATES, self.templates)

        if template.id == self.active_template_id and self.template_attached:
            self.input_text = render_template(template.content, self.template_values)
        return template

    def delete_template(self, template_id: str) -> None:
        self.templates = [t for t in self.templates if t.id != template_id]
        if self.active_template_id == template_id:
            self.active_template_id = None
            self.template_values = {}
            self.template_attached = False
            self.input_text = ""
        self.save(LOCAL_STORAGE_TEMPLATES, self.templates)

    def select_template(self, template_id: str) -> None:
        template = next((t for t in self.templates if t.id == template_id), None)
        if template is None:
            raise KeyError(template_id)
        self.active_template_id = template_id
        self.template_values = {}
        self.template_attached = True
        self.input_text = render_template(template.content, self.template_values)

    def set_template_value(self, token: str, value: str) -> None:
        self.template_values = {**self.template_values, token: value}
        template = self.active_template
        if template is not None and self.template_attached:
            self.input_text = render_template(template.content, self.template_values)

    def edit_input(self, text: str) -> None:
        """Free-text edit; the input no longer follows the template's values."""
        self.input_text = text
        self.template_attached = False

    def use_example(self, text: str) -> None:
        self.edit_input(text)

    def reset_input(self) -> None:
        self.edit_input("")

    # Enhancement and history

    def enhance(self, enhancer: Callable = enhance_prompt) -> bool:
        """Run one enhancement of the current input; returns whether it succeeded."""
        if not self.input_text.strip():
            return False

        style = self.selected_style
        self.error = None
        try:
            result = enhancer(self.input_text, style, self.intensity)
        except EnhancementError as e:
            self.error = str(e)
            return False

        self.result = result
        self.record_result(style, result)
        return True

    def record_result(self, style: StyleDefinition, result: EnhancementResult, now_ms: int | None = None) -> HistoryItem:
        stamp = now_ms if now_ms is not None else now_millis()
        if self.history and self.history[0].timestamp >= stamp:
            stamp = self.history[0].timestamp + 1
        item = HistoryItem.create(style, result, now_ms=stamp)
        self.history = [item, *self.history][:HISTORY_LIMIT]
        self.save(LOCAL_STORAGE_HISTORY, self.history)
        return item

    def clear_history(self) -> None:
        self.history = []
        self.save(LOCAL_STORAGE_HISTORY, None)

    def restore_history_item(self, item_id: str) -> None:
        for item in self.history:
            if item.id == item_id:
                break
        else:
            raise KeyError(item_id)

        self.result = item.result
        self.error = None
        self.edit_input(item.result.original)
        if find_style(self.all_styles, item.style_id) is not None:
            self.selected_style_id = item.style_id
        else:
            logger.info("Style %s from history no longer exists", item.style_id)

    # Theme

    def toggle_theme(self) -> None:
        self.theme = "dark" if self.theme == "light" else "light"
        self.save(LOCAL_STORAGE_THEME, self.theme)
