"""Converter field components for Streamlit pages."""

import streamlit as st
from unit_converter.converter import convert, destination_label, source_label
from unit_converter.models import ModelState


def render_converter_fields(state: ModelState, input_key: str = "input_text"):
    """Render the source input and the converted output side by side.

    Args:
        state: Current converter state
        input_key: Session state key holding the source text
    """
    col1, col2 = st.columns(2)
    with col1:
        st.text_input(source_label(state), key=input_key)
    with col2:
        result = convert(state, st.session_state.get(input_key, ""))
        # Keyed by state so the disabled field refreshes on every change
        st.text_input(
            destination_label(state),
            value=result,
            disabled=True,
            key=f"output_{state.category.value}_{state.reversed}_{result}",
        )
