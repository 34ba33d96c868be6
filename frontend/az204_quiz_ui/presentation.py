"""View-model for one question card. No rendering, no side effects."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

from .state import QuizSession

CORRECT_LABEL = "✅ Correct!"
INCORRECT_LABEL = "❌ Incorrect"


@dataclass(frozen=True)
class OptionView:
    text: str
    selected: bool
    disabled: bool
    status: str  # neutral | selected | correct | incorrect


@dataclass(frozen=True)
class QuestionView:
    topic: str
    skill_area: str
    prompt: str
    options: List[OptionView]
    submit_enabled: bool
    show_result: bool
    is_correct: bool
    result_label: Optional[str] = None
    explanation: Optional[str] = None
    correct_answer_text: Optional[str] = None
    show_next: bool = False


def _option_status(option: str, answer: str, selected: str, submitted: bool) -> str:
    if not submitted:
        return "selected" if option == selected else "neutral"
    if option == answer:
        return "correct"
    if option == selected:
        return "incorrect"
    return "neutral"


def build_question_view(session: QuizSession) -> Optional[QuestionView]:
    question = session.current_question
    if question is None:
        return None

    submitted = session.submitted
    options = [
        OptionView(
            text=opt,
            selected=opt == session.selected_answer,
            disabled=submitted,
            status=_option_status(opt, question.answer, session.selected_answer, submitted),
        )
        for opt in question.options
    ]

    view = QuestionView(
        topic=question.topic,
        skill_area=question.skill_area,
        prompt=question.question,
        options=options,
        submit_enabled=session.can_submit,
        show_result=submitted,
        is_correct=submitted and session.is_correct,
    )
    if not submitted:
        return view

    return replace(
        view,
        result_label=CORRECT_LABEL if session.is_correct else INCORRECT_LABEL,
        explanation=question.explanation,
        correct_answer_text=None if session.is_correct else f"Correct Answer: {question.answer}",
        show_next=True,
    )
