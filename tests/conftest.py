"""Shared fixtures: an in-memory store and canned enhancement results."""

from __future__ import annotations

from functools import partial

import pytest

from prompt_forge.models import EnhancementResult
from prompt_forge.state import AppState
from prompt_forge.storage import save_snapshot


class FakeStore:
    """Dict-backed stand-in for the browser's localStorage."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.writes: list[str] = []

    def write(self, key: str, value: str) -> None:
        self.data[key] = value
        self.writes.append(key)

    def remove(self, key: str) -> None:
        self.data.pop(key, None)
        self.writes.append(key)


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def state(store) -> AppState:
    return AppState(save=partial(save_snapshot, store))


def make_result(original: str = "hello", enhanced: str = "Hello there.") -> EnhancementResult:
    return EnhancementResult(
        original=original,
        enhanced=enhanced,
        explanation="Added a greeting.",
        key_changes=["Capitalized", "Added punctuation"],
        tips=["Be specific."],
    )


@pytest.fixture
def result() -> EnhancementResult:
    return make_result()


@pytest.fixture
def result_factory():
    return make_result
