"""Data models shared by the engine, the client and the UI.

Field aliases keep the camelCase keys used in stored snapshots.
"""

from __future__ import annotations

import time

from pydantic import BaseModel, ConfigDict, Field


def now_millis() -> int:
    return int(time.time() * 1000)


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_storage(self) -> dict:
        return self.model_dump(by_alias=True)


class StyleDefinition(_Model):
    id: str
    name: str
    instruction: str
    is_custom: bool = Field(default=False, alias="isCustom")


class PromptTemplate(_Model):
    id: str
    name: str
    content: str


class EnhancementResult(_Model):
    original: str
    enhanced: str
    explanation: str
    key_changes: list[str] = Field(alias="keyChanges")
    tips: list[str]


class HistoryItem(_Model):
    id: str
    timestamp: int
    style_id: str = Field(alias="styleId")
    style_name: str = Field(alias="styleName")
    result: EnhancementResult

    @classmethod
    def create(cls, style: StyleDefinition, result: EnhancementResult, now_ms: int | None = None) -> "HistoryItem":
        timestamp = now_ms if now_ms is not None else now_millis()
        return cls(
            id=str(timestamp),
            timestamp=timestamp,
            style_id=style.id,
            style_name=style.name,
            result=result,
        )
