from __future__ import annotations

import streamlit as st

from prompt_forge.constants import (
    INPUT_TEXT,
    MAX_INTENSITY,
    MIN_INTENSITY,
    TEMPLATE_EDIT_ID,
)
from prompt_forge.errors import StyleError, TemplateError
from prompt_forge.history import render_copy_button
from prompt_forge.styles import INTENSITY_LABELS, examples_for

DARK_THEME_CSS = """
<style>
    .stApp { background-color: #020617; color: #e2e8f0; }
    .stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label, .stApp span { color: #e2e8f0; }
    .stApp textarea, .stApp input { background-color: #0f172a; color: #f1f5f9; }
</style>
"""


def render_theme(theme) -> None:
    if theme == "dark":
        st.markdown(DARK_THEME_CSS, unsafe_allow_html=True)


def render_header(state) -> None:
    col_title, col_toggle = st.columns([6, 1])
    with col_title:
        st.title("PromptForge AI")
    with col_toggle:
        st.button(
            "🌙 Dark" if state.theme == "light" else "☀️ Light",
            key="toggle_theme_btn",
            width='stretch',
            on_click=state.toggle_theme,
        )
    st.markdown("### Elevate Your Prompts & Stories")
    st.text("Transform rough ideas into compelling narratives and highly-optimized AI prompts.")


def render_style_selector(state) -> None:
    def select_style():
        state.select_style(st.session_state['style_choice'])

    styles = state.all_styles
    labels = {style.id: f"{style.name} ✦" if style.is_custom else style.name for style in styles}
    st.session_state['style_choice'] = state.selected_style.id
    st.radio(
        "Select Enhancement Target",
        options=list(labels),
        format_func=lambda style_id: labels[style_id],
        key='style_choice',
        horizontal=True,
        on_change=select_style,
    )

    if state.custom_styles:
        with st.expander("Manage custom styles", expanded=False):
            for style in state.custom_styles:
                col_name, col_delete = st.columns([4, 1])
                with col_name:
                    st.markdown(f"**{style.name}**: {style.instruction}")
                with col_delete:
                    st.button(
                        "Delete",
                        key=f"delete_style_btn_{style.id}",
                        width='stretch',
                        on_click=state.delete_custom_style,
                        args=(style.id,),
                    )

    render_custom_style_form(state)


def render_custom_style_form(state) -> None:
    with st.expander("Create custom style", expanded=False):
        with st.form(key='custom_style_form', clear_on_submit=True):
            name = st.text_input("Style Name", placeholder="e.g., Pirate Speak")
            instruction = st.text_area(
                "Instructions for AI",
                placeholder="Describe how the text should be rewritten...",
                height=120,
            )
            submit_button = st.form_submit_button("Save Style", width='stretch')

            if submit_button:
                try:
                    state.add_custom_style(name, instruction)
                except StyleError as e:
                    st.error(str(e))
                else:
                    st.rerun()


def render_intensity(state) -> None:
    def set_intensity():
        state.set_intensity(st.session_state['intensity_value'])

    st.session_state['intensity_value'] = state.intensity
    st.slider(
        f"Intensity: {INTENSITY_LABELS[state.intensity]} (Level {state.intensity}/{MAX_INTENSITY})",
        min_value=MIN_INTENSITY,
        max_value=MAX_INTENSITY,
        step=1,
        key='intensity_value',
        on_change=set_intensity,
        help="Factual on the left, flourished on the right.",
    )


def render_examples(state) -> None:
    st.caption("Quick Start: Try an example")
    examples = examples_for(state.selected_style.id)
    columns = st.columns(len(examples))
    for i, (column, example) in enumerate(zip(columns, examples)):
        with column:
            st.button(
                example if len(example) <= 40 else example[:40] + "…",
                key=f"example_btn_{i}",
                help=example,
                width='stretch',
                on_click=state.use_example,
                args=(example,),
            )


def render_template_selector(state) -> None:
    st.markdown("#### Templates")
    if state.templates:
        columns = st.columns(min(len(state.templates), 4))
        for i, template in enumerate(state.templates):
            with columns[i % len(columns)]:
                is_active = template.id == state.active_template_id
                st.button(
                    template.name,
                    key=f"select_template_btn_{template.id}",
                    type="primary" if is_active else "secondary",
                    width='stretch',
                    on_click=state.select_template,
                    args=(template.id,),
                )
                col_edit, col_delete = st.columns([1, 1])
                with col_edit:
                    if st.button("Edit", key=f"edit_template_btn_{template.id}", width='stretch'):
                        st.session_state[TEMPLATE_EDIT_ID] = template.id
                        st.rerun()
                with col_delete:
                    st.button(
                        "Delete",
                        key=f"delete_template_btn_{template.id}",
                        width='stretch',
                        on_click=state.delete_template,
                        args=(template.id,),
                    )

    render_template_form(state)
    render_template_values(state)


def render_template_form(state) -> None:
    edit_id = st.session_state.get(TEMPLATE_EDIT_ID)
    editing = next((t for t in state.templates if t.id == edit_id), None)

    with st.expander("Edit template" if editing else "New template", expanded=editing is not None):
        with st.form(key=f"template_form_{editing.id if editing else 'new'}", clear_on_submit=True):
            name = st.text_input(
                "Template Name",
                value=editing.name if editing else "",
                placeholder="e.g., Marketing Copy",
            )
            content = st.text_area(
                "Template Structure (use {{variable}} syntax)",
                value=editing.content if editing else "",
                placeholder="Write a short story about {{character}} in a {{setting}}...",
                height=120,
            )
            st.caption('Example: "Help me write a {{topic}} post for {{platform}} about {{detail}}."')
            col_cancel, col_save = st.columns([1, 1])
            with col_save:
                submit_button = st.form_submit_button("Save Template", width='stretch')
            with col_cancel:
                cancel_button = st.form_submit_button("Cancel", width='stretch', disabled=editing is None)

            if cancel_button:
                st.session_state[TEMPLATE_EDIT_ID] = None
                st.rerun()

            if submit_button:
                try:
                    template = state.save_template(name, content, template_id=editing.id if editing else None)
                except TemplateError as e:
                    st.error(str(e))
                else:
                    st.session_state[TEMPLATE_EDIT_ID] = None
                    if editing is None:
                        state.select_template(template.id)
                    st.rerun()


def render_template_values(state) -> None:
    template = state.active_template
    if template is None:
        return

    placeholders = state.placeholders
    if not placeholders:
        st.caption(f"'{template.name}' has no variables.")
        return

    if not state.template_attached:
        st.caption("The text was edited by hand; select the template again to fill its variables.")

    columns = st.columns(min(len(placeholders), 3))
    for i, token in enumerate(placeholders):
        widget_key = f"template_value_{template.id}_{token}"
        st.session_state[widget_key] = state.template_values.get(token, "")

        def set_value(token=token, widget_key=widget_key):
            state.set_template_value(token, st.session_state[widget_key])

        with columns[i % len(columns)]:
            st.text_input(
                token,
                key=widget_key,
                placeholder=f"[{token}]",
                disabled=not state.template_attached,
                on_change=set_value,
            )


def render_input(state) -> None:
    def edit_input():
        state.edit_input(st.session_state[INPUT_TEXT])

    st.session_state[INPUT_TEXT] = state.input_text
    st.text_area(
        "Text to enhance",
        key=INPUT_TEXT,
        height=200,
        placeholder="Enter your prompt, story fragment, or text to enhance...",
        on_change=edit_input,
    )
    st.caption(f"{len(state.input_text)} characters")


def render_comparison_card(result) -> None:
    col_original, col_enhanced = st.columns([1, 1])
    with col_original:
        st.markdown("#### Original")
        st.text(result.original)
    with col_enhanced:
        st.markdown("#### Enhanced")
        st.markdown(result.enhanced)
        render_copy_button(result.enhanced, label="Copy enhanced", key="copy-enhanced")

    st.markdown("#### What changed")
    st.markdown(result.explanation)

    col_changes, col_tips = st.columns([1, 1])
    with col_changes:
        st.markdown("#### Key changes")
        st.markdown("\n".join(f"- {change}" for change in result.key_changes) or "_None listed._")
    with col_tips:
        st.markdown("#### Tips")
        st.markdown("\n".join(f"- {tip}" for tip in result.tips) or "_None listed._")
