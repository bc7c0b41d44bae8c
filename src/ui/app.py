"""Streamlit web application for Tokyo ramen recommendations."""

import asyncio
import logging

import streamlit as st

from src.config import get_settings
from src.form.options import MAX_PRICE_OPTIONS, MIN_PRICE_OPTIONS, District, RamenType
from src.form.price import parse_price
from src.form.state import FormState
from src.rendering import FencedCode
from src.rendering.markup import block_to_html
from src.ui.controller import SubmissionController
from src.ui.state import Failure, Pending, SubmissionOutcome, Success
from src.ui.utils import format_price, split_into_columns

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Page configuration
st.set_page_config(
    page_title="東京ラーメンレコ麺ド",
    page_icon="🍜",
    layout="centered",
)


def init_session_state():
    """Initialize session state variables."""
    if "form" not in st.session_state:
        st.session_state.form = FormState()
    if "controller" not in st.session_state:
        st.session_state.controller = SubmissionController()


def toggle_district(district: District):
    st.session_state.form = st.session_state.form.toggle_district(district)


def toggle_ramen_type(ramen_type: RamenType):
    st.session_state.form = st.session_state.form.toggle_ramen_type(ramen_type)


def render_district_section():
    """Render ward checkboxes in a three-column grid."""
    st.subheader("📍 場所（複数選択可）")
    form: FormState = st.session_state.form
    columns = st.columns(3)
    for column, districts in zip(columns, split_into_columns(list(District), 3)):
        with column:
            for district in districts:
                st.checkbox(
                    district.value,
                    value=form.districts.contains(district),
                    key=f"district-{district.name}",
                    on_change=toggle_district,
                    args=(district,),
                )


def render_price_section():
    """Render minimum and maximum price selectors."""
    st.subheader("💴 価格帯（円）")
    form: FormState = st.session_state.form
    col1, col2 = st.columns(2)
    with col1:
        min_price = st.selectbox(
            "最低金額",
            options=MIN_PRICE_OPTIONS,
            index=MIN_PRICE_OPTIONS.index(form.price_range.min_price),
            format_func=format_price,
        )
    with col2:
        max_price = st.selectbox(
            "最高金額",
            options=MAX_PRICE_OPTIONS,
            index=MAX_PRICE_OPTIONS.index(form.price_range.max_price),
            format_func=format_price,
        )
    st.session_state.form = form.with_min_price(
        parse_price(min_price, MIN_PRICE_OPTIONS)
    ).with_max_price(parse_price(max_price, MAX_PRICE_OPTIONS))


def render_ramen_type_section():
    """Render ramen type checkboxes."""
    st.subheader("🍥 ラーメンの種類")
    form: FormState = st.session_state.form
    columns = st.columns(3)
    for column, ramen_types in zip(columns, split_into_columns(list(RamenType), 3)):
        with column:
            for ramen_type in ramen_types:
                st.checkbox(
                    ramen_type.value,
                    value=form.ramen_types.contains(ramen_type),
                    key=f"ramen-{ramen_type.name}",
                    on_change=toggle_ramen_type,
                    args=(ramen_type,),
                )


def submit_form():
    """Submit the current selections and wait for the recommendation."""
    controller: SubmissionController = st.session_state.controller
    status_container = st.empty()

    def show_status(outcome: SubmissionOutcome):
        if isinstance(outcome, Pending):
            status_container.info(outcome.message)
        else:
            status_container.empty()

    unsubscribe = controller.subscribe(show_status)
    try:
        asyncio.run(controller.submit_and_wait(st.session_state.form))
    finally:
        unsubscribe()


def render_outcome():
    """Render the error box or the rendered recommendation."""
    outcome = st.session_state.controller.outcome

    if isinstance(outcome, Failure):
        st.error(outcome.reason)
    elif isinstance(outcome, Success):
        st.divider()
        st.caption("AIからの結果")
        for block in outcome.render():
            if isinstance(block, FencedCode):
                st.code(block.text, language=block.language)
            else:
                # Markup is escaped by block_to_html
                st.markdown(block_to_html(block), unsafe_allow_html=True)


def main():
    """Main application entry point."""
    init_session_state()

    st.title("🍜 東京ラーメンレコ麺ド")

    render_district_section()
    render_price_section()
    render_ramen_type_section()

    if st.button("🍜 レコメンドを聞く！", type="primary", use_container_width=True):
        submit_form()

    render_outcome()


if __name__ == "__main__":
    main()
