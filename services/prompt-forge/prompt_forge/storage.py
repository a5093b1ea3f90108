"""Browser localStorage persistence.

Each collection is stored as a whole snapshot under a fixed key and replaced
on every change. Reads happen once per session; writes are queued during a
script run and flushed as a single injected script, so a ``st.rerun()`` right
after a mutation does not lose them.
"""

from __future__ import annotations

import json
import logging

import streamlit as st
from pydantic import TypeAdapter
from streamlit_js_eval import streamlit_js_eval

from prompt_forge.constants import (
    DEFAULT_THEME,
    HISTORY_LIMIT,
    LOCAL_STORAGE_CUSTOM_STYLES,
    LOCAL_STORAGE_HISTORY,
    LOCAL_STORAGE_KEYS,
    LOCAL_STORAGE_TEMPLATES,
    LOCAL_STORAGE_THEME,
    PENDING_WRITES,
    PREFERS_DARK,
    THEMES,
)
from prompt_forge.models import HistoryItem, PromptTemplate, StyleDefinition
from prompt_forge.styles import PREDEFINED_STYLES

logger = logging.getLogger(__name__)


class BrowserLocalStore:
    def __init__(self, session_state=None):
        self._session = session_state if session_state is not None else st.session_state
        if PENDING_WRITES not in self._session:
            self._session[PENDING_WRITES] = []

    def read_all(self) -> dict | None:
        """Fetch every known key at once.

        Returns ``None`` while the browser has not answered yet; the component
        triggers a rerun once it does.
        """
        keys = json.dumps(list(LOCAL_STORAGE_KEYS))
        result = streamlit_js_eval(
            js_expressions=(
                f"JSON.stringify(Object.assign(Object.fromEntries({keys}.map(k => [k, localStorage.getItem(k)])), "
                f"{{{PREFERS_DARK}: window.matchMedia('(prefers-color-scheme: dark)').matches}}))"
            ),
            key="get_local_storage",
        )
        if result is None:
            return None
        try:
            raw = json.loads(result)
        except (TypeError, ValueError):
            logger.warning("Couldn't read localStorage snapshot: %r", result)
            return {}
        return raw if isinstance(raw, dict) else {}

    def write(self, key: str, value: str) -> None:
        self._session[PENDING_WRITES].append(("set", key, value))

    def remove(self, key: str) -> None:
        self._session[PENDING_WRITES].append(("remove", key, None))

    def pending(self) -> list:
        return list(self._session[PENDING_WRITES])

    def flush(self) -> None:
        ops = self._session[PENDING_WRITES]
        if not ops:
            return
        st.components.v1.html(render_local_storage_script(ops), height=0)
        self._session[PENDING_WRITES] = []


def render_local_storage_script(ops) -> str:
    lines = []
    for action, key, value in ops:
        if action == "set":
            lines.append(f"localStorage.setItem({json.dumps(key)}, {json.dumps(value)});")
        else:
            lines.append(f"localStorage.removeItem({json.dumps(key)});")
    body = "\n".join(lines).replace("</", "<\\/")
    return f"""
    <script>
    (function() {{
        {body}
    }})();
    </script>
    """


def _load_list(raw_value, model, label: str) -> list:
    if not raw_value:
        return []
    try:
        return TypeAdapter(list[model]).validate_json(raw_value)
    except ValueError as e:
        logger.warning("Ignoring malformed %s in localStorage: %s", label, e)
        return []


def load_snapshot(raw: dict | None) -> dict:
    """Turn the raw localStorage values into typed collections, dropping anything malformed."""
    raw = raw or {}

    theme = raw.get(LOCAL_STORAGE_THEME)
    if theme not in THEMES:
        if theme is not None:
            logger.warning("Ignoring unknown theme %r", theme)
        theme = "dark" if raw.get(PREFERS_DARK) is True else DEFAULT_THEME

    history = _load_list(raw.get(LOCAL_STORAGE_HISTORY), HistoryItem, "history")[:HISTORY_LIMIT]

    taken = {style.id for style in PREDEFINED_STYLES}
    custom_styles = []
    for style in _load_list(raw.get(LOCAL_STORAGE_CUSTOM_STYLES), StyleDefinition, "custom styles"):
        if style.id in taken:
            logger.warning("Dropping stored custom style with duplicate id %s", style.id)
            continue
        taken.add(style.id)
        custom_styles.append(style if style.is_custom else style.model_copy(update={"is_custom": True}))

    templates = []
    template_ids = set()
    for template in _load_list(raw.get(LOCAL_STORAGE_TEMPLATES), PromptTemplate, "templates"):
        if template.id in template_ids:
            continue
        template_ids.add(template.id)
        templates.append(template)

    return {
        "theme": theme,
        "history": history,
        "custom_styles": custom_styles,
        "templates": templates,
    }


def save_snapshot(store, key: str, data) -> None:
    """Replace the stored snapshot for ``key``; ``None`` removes it."""
    if data is None:
        store.remove(key)
    elif isinstance(data, str):
        store.write(key, data)
    else:
        if key == LOCAL_STORAGE_HISTORY:
            data = data[:HISTORY_LIMIT]
        store.write(key, json.dumps([item.to_storage() for item in data]))
