import json
import datetime
import streamlit as st

from prompt_forge.constants import (
    CONFIRM_CLEAR_HISTORY,
    STORED_SNAPSHOT,
)


def sync_local_storage_to_session(store):
    st.session_state[STORED_SNAPSHOT] = store.read_all()


def render_copy_button(text, label="Copy", key="copy"):
    safe_text = json.dumps(text).replace("</", "<\\/")
    html_code = f"""
        <style>
            #{key} {{
                font-family: 'Source Sans Pro', sans-serif;
                align-items: center;
                background-color: rgb(33, 46, 69);
                border: 1px solid rgb(49, 65, 88);
                border-radius: 8px;
                color: rgb(226, 232, 240);
                cursor: pointer;
                display: inline-flex;
                font-size: 14px;
                height: 36px;
                justify-content: center;
                padding: 4px 12px;
                user-select: none;
            }}
        </style>
        <button id="{key}">{label}</button>

        <script>
        const btn = document.getElementById('{key}');
        btn.addEventListener('click', async () => {{
            try {{
                await navigator.clipboard.writeText({safe_text});
                btn.innerText = "Copied";
                setTimeout(() => {{ btn.innerText = "{label}"; }}, 2000);
            }} catch (err) {{
                console.error("Clipboard copy failed:", err);
                btn.innerText = "Failed :(";
            }}
        }});
        </script>
    """

    st.components.v1.html(html_code, height=46)


def _ask_clear_history():
    st.session_state[CONFIRM_CLEAR_HISTORY] = True


def _cancel_clear_history():
    st.session_state[CONFIRM_CLEAR_HISTORY] = False


def _clear_history(state):
    state.clear_history()
    st.session_state[CONFIRM_CLEAR_HISTORY] = False


def render_clear_history(state) -> None:
    if not st.session_state.get(CONFIRM_CLEAR_HISTORY, False):
        st.button("Clear All", key="clear_history_btn", on_click=_ask_clear_history)
        return

    st.warning("This action will permanently delete all your previous enhancement activities.")
    col_cancel, col_confirm = st.columns([1, 1])
    with col_cancel:
        st.button("Cancel", key="cancel_clear_history_btn", width='stretch', on_click=_cancel_clear_history)
    with col_confirm:
        st.button(
            "Clear All",
            key="confirm_clear_history_btn",
            type="primary",
            width='stretch',
            on_click=_clear_history,
            args=(state,),
        )


def render_history(state) -> None:
    if len(state.history) == 0:
        return

    st.write('---')
    col_title, col_clear = st.columns([4, 1])
    with col_title:
        st.write('### Recent Forge Activity')
    with col_clear:
        render_clear_history(state)

    columns = st.columns(3)
    for i, item in enumerate(state.history):
        with columns[i % 3]:
            with st.container(border=True):
                when = datetime.datetime.fromtimestamp(item.timestamp / 1000).strftime('%Y-%m-%d@%H:%M')
                st.caption(f"{item.style_name} · {when}")
                enhanced = item.result.enhanced
                st.markdown(enhanced if len(enhanced) <= 240 else enhanced[:240] + "…")
                st.button(
                    "Recover",
                    key=f"recover_btn_{item.id}",
                    width='stretch',
                    on_click=state.restore_history_item,
                    args=(item.id,),
                )
