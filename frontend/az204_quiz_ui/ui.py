"""
ui.py
======================

Streamlit components for the quiz page.

Only drawing and input collection lives here. Each render function returns
what the user did ("which option was picked", "was submit pressed") and the
caller feeds that into the QuizSession.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import streamlit as st

from .presentation import QuestionView
from .state import Stats

# option status -> Streamlit colored-text markup
_STATUS_MARKUP = {
    "correct": ":green[**✔ {text}**]",
    "incorrect": ":red[**✘ {text}**]",
    "selected": "**{text}**",
    "neutral": "{text}",
}


def render_header(stats: Stats) -> None:
    st.title("AZ-204 Practice Quiz")
    st.caption("Azure Developer Associate Certification Practice")

    if stats.total > 0:
        col_correct, col_total, col_accuracy = st.columns(3)
        col_correct.metric("Correct", stats.correct)
        col_total.metric("Total", stats.total)
        col_accuracy.metric("Accuracy", f"{stats.accuracy}%")


def render_loading() -> None:
    st.info("Loading question...")


def render_error(message: str) -> bool:
    """Error box with a retry button. Returns True when retry was pressed."""
    st.error(message)
    return st.button("Try Again", key="quiz_retry")


def render_question_card(view: QuestionView, key: str) -> Dict[str, Any]:
    """
    Draw one question and return the user's input:

        {
          "selected": Optional[str],   # option currently picked in the radio
          "clicked_submit": bool,
          "clicked_next": bool,
        }
    """
    selected: Optional[str] = None
    clicked_submit = False
    clicked_next = False

    with st.container(border=True):
        col_topic, col_skill = st.columns([1, 2])
        col_topic.markdown(f"`{view.topic}`")
        col_skill.caption(f"*{view.skill_area}*")

        st.subheader(view.prompt)

        if not view.show_result:
            texts = [opt.text for opt in view.options]
            current = next((i for i, opt in enumerate(view.options) if opt.selected), None)
            selected = st.radio(
                "Choose one answer",
                texts,
                index=current,
                key=f"{key}_options",
                label_visibility="collapsed",
            )
            clicked_submit = st.button(
                "Submit Answer",
                key=f"{key}_submit",
                type="primary",
                disabled=selected is None,
            )
        else:
            for opt in view.options:
                st.markdown(_STATUS_MARKUP[opt.status].format(text=opt.text))

            if view.is_correct:
                st.success(view.result_label)
            else:
                st.error(view.result_label)
            st.markdown(f"**Explanation:** {view.explanation}")
            if view.correct_answer_text:
                st.markdown(f"**{view.correct_answer_text}**")

            clicked_next = st.button("Next Question", key=f"{key}_next", type="primary")

    return {
        "selected": selected,
        "clicked_submit": clicked_submit,
        "clicked_next": clicked_next,
    }
