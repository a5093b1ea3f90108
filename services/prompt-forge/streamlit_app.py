from __future__ import annotations

import logging
import os
from functools import partial

import streamlit as st

from prompt_forge.constants import (
    APP_STATE,
    STORED_SNAPSHOT,
)
from prompt_forge.history import (
    render_history,
    sync_local_storage_to_session,
)
from prompt_forge.state import AppState
from prompt_forge.storage import BrowserLocalStore, load_snapshot, save_snapshot
from prompt_forge.ui_components import (
    render_comparison_card,
    render_examples,
    render_header,
    render_input,
    render_intensity,
    render_style_selector,
    render_template_selector,
    render_theme,
)

logging.basicConfig(
    level=os.getenv("PROMPT_FORGE_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def render_main() -> None:
    st.set_page_config(page_title="PromptForge AI", layout="wide")

    store = BrowserLocalStore()

    # Restore saved styles, templates, history and theme once per session
    if APP_STATE not in st.session_state:
        if st.session_state.get(STORED_SNAPSHOT) is None:
            sync_local_storage_to_session(store)
        if st.session_state[STORED_SNAPSHOT] is None:
            st.caption("Loading your saved styles and history…")
            return
        snapshot = load_snapshot(st.session_state[STORED_SNAPSHOT])
        st.session_state[APP_STATE] = AppState.from_snapshot(snapshot, save=partial(save_snapshot, store))

    state = st.session_state[APP_STATE]

    render_theme(state.theme)
    render_header(state)

    with st.container(border=True):
        render_style_selector(state)
        if state.intensity_adjustable:
            render_intensity(state)
        render_examples(state)
        render_template_selector(state)
        render_input(state)

        col_enhance, col_reset = st.columns([4, 1])
        with col_enhance:
            enhance_clicked = st.button(
                "Enhance Writing",
                key="enhance_btn",
                type="primary",
                width='stretch',
                disabled=not state.input_text.strip(),
            )
        with col_reset:
            st.button("Reset", key="reset_btn", width='stretch', on_click=state.reset_input)

        if enhance_clicked:
            with st.spinner("Forging perfection…"):
                state.enhance()

        if state.error:
            st.error(state.error)

    if state.result:
        st.write('---')
        st.write('## Transformation Result')
        render_comparison_card(state.result)

    render_history(state)

    store.flush()


if __name__ == "__main__":
    render_main()
