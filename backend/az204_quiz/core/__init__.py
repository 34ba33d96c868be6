# backend/az204_quiz/core/__init__.py
"""
Core package for the AZ-204 Quiz API.
Exposes the question model, the stores and the query service.
"""

from .errors import NotFound, QuizError, UpstreamFailure
from .question_service import QuestionService
from .question_store import (
    JsonQuestionStore,
    QuestionStore,
    SqlQuestionStore,
    create_store,
)
from .schemas import SKILL_AREAS, Question

__all__ = [
    "Question",
    "SKILL_AREAS",
    "QuestionStore",
    "JsonQuestionStore",
    "SqlQuestionStore",
    "create_store",
    "QuestionService",
    "QuizError",
    "NotFound",
    "UpstreamFailure",
]
