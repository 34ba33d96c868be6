"""
streamlit_app.py
======================

Streamlit entry point for the AZ-204 practice quiz.

    streamlit run frontend/az204_quiz_ui/streamlit_app.py

One QuizSession lives in st.session_state per browser session; stats reset
only when the page is reloaded.
"""

from __future__ import annotations

import logging

import streamlit as st

from az204_quiz_ui.api_client import QuizApiClient
from az204_quiz_ui.config import load_ui_settings
from az204_quiz_ui.presentation import build_question_view
from az204_quiz_ui.state import QuizPhase, QuizSession
from az204_quiz_ui.ui import (
    render_error,
    render_header,
    render_loading,
    render_question_card,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("quiz.ui")


@st.cache_resource
def get_api_client() -> QuizApiClient:
    settings = load_ui_settings()
    logger.info(f"Using quiz API at {settings.api_base_url}")
    return QuizApiClient(settings.api_base_url, timeout=settings.timeout)


def get_session() -> QuizSession:
    if "quiz_session" not in st.session_state:
        st.session_state["quiz_session"] = QuizSession()
    return st.session_state["quiz_session"]


def main() -> None:
    st.set_page_config(page_title="AZ-204 Practice Quiz", page_icon="☁️")

    session = get_session()
    fetch = get_api_client().fetch_random_question

    render_header(session.stats)

    # first visit
    if session.phase is QuizPhase.IDLE:
        with st.spinner("Loading question..."):
            session.load_question(fetch)

    if session.phase is QuizPhase.LOADING:
        render_loading()
        return

    if session.phase is QuizPhase.ERROR:
        if render_error(session.error):
            with st.spinner("Loading question..."):
                session.retry(fetch)
            st.rerun()
        return

    view = build_question_view(session)
    if view is None:
        return

    result = render_question_card(view, key=f"q{session.generation}")

    if result["selected"] is not None and result["selected"] != session.selected_answer:
        session.select(result["selected"])

    if result["clicked_submit"]:
        session.submit()
        st.rerun()

    skipped = not view.show_result and st.button("Get New Question", key="quiz_new_question")
    if result["clicked_next"] or skipped:
        with st.spinner("Loading question..."):
            session.next_question(fetch)
        st.rerun()


main()
