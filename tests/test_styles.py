"""Tests for predefined styles and custom style creation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from prompt_forge.errors import StyleError
from prompt_forge.styles import (
    DEFAULT_STYLE,
    EXAMPLES,
    INTENSITY_LABELS,
    PREDEFINED_STYLES,
    examples_for,
    find_style,
    new_custom_style,
)


def test_predefined_ids_unique_and_not_custom() -> None:
    ids = [style.id for style in PREDEFINED_STYLES]
    assert len(ids) == len(set(ids)) == 9
    assert not any(style.is_custom for style in PREDEFINED_STYLES)
    assert DEFAULT_STYLE.id == "creative"


def test_predefined_styles_are_immutable() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_STYLE.name = "Changed"


def test_examples_fall_back_to_creative() -> None:
    assert examples_for("image_gen") == EXAMPLES["image_gen"]
    assert examples_for("custom-123") == EXAMPLES["creative"]


def test_find_style() -> None:
    assert find_style(PREDEFINED_STYLES, "academic").name == "Academic"
    assert find_style(PREDEFINED_STYLES, "missing") is None


def test_intensity_labels_cover_range() -> None:
    assert [INTENSITY_LABELS[i] for i in range(1, 6)] == ["Subtle", "Light", "Balanced", "High", "Extreme"]


class TestNewCustomStyle:
    def test_trims_fields(self) -> None:
        style = new_custom_style("  Pirate ", " Talk like a pirate. ", now_ms=7)
        assert style.id == "custom-7"
        assert style.name == "Pirate"
        assert style.instruction == "Talk like a pirate."
        assert style.is_custom is True

    def test_id_collision_bumps_suffix(self) -> None:
        style = new_custom_style("A", "a", existing_ids=["custom-7", "custom-8"], now_ms=7)
        assert style.id == "custom-9"

    @pytest.mark.parametrize("name,instruction", [("", "x"), ("x", ""), ("  ", "  ")])
    def test_requires_name_and_instruction(self, name, instruction) -> None:
        with pytest.raises(StyleError):
            new_custom_style(name, instruction)
