"""Streamlit frontend for the unit converter.

Single screen: enter a value, toggle the direction, or pick a unit pair.
"""

import streamlit as st

from pages.components.converter_fields import render_converter_fields
from unit_converter.converter import (
    category_options,
    initialize,
    select_category,
    toggle_direction,
)
from unit_converter.logging_utils import setup_logger

st.set_page_config(
    page_title="Unit Converter",
    page_icon="📏",
    layout="centered",
)

# Initialize session state once per session
if 'converter_state' not in st.session_state:
    setup_logger()
    st.session_state.converter_state = initialize()
if 'input_text' not in st.session_state:
    st.session_state.input_text = ""


def _on_change_direction():
    st.session_state.converter_state = toggle_direction(st.session_state.converter_state)


def _on_select_category():
    st.session_state.converter_state = select_category(
        st.session_state.converter_state, st.session_state.category_choice
    )


st.title("📏 Unit Converter")

render_converter_fields(st.session_state.converter_state)

st.button("⇄ Change", on_click=_on_change_direction)

options = dict(category_options())
st.radio(
    "Measurement",
    options=list(options.keys()),
    format_func=lambda category: options[category],
    index=list(options.keys()).index(st.session_state.converter_state.category),
    key="category_choice",
    on_change=_on_select_category,
    horizontal=True,
)
