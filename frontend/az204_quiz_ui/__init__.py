"""
az204_quiz_ui
======================

Quiz client for the AZ-204 Quiz API.

- api_client: fetches random questions over HTTP (httpx)
- state: the quiz session state machine (fetch -> answer -> feedback -> next)
- presentation: pure view-model of a single question card
- ui / streamlit_app: Streamlit rendering and entry point
"""

from .api_client import FetchError, QuizApiClient
from .presentation import OptionView, QuestionView, build_question_view
from .state import QuizPhase, QuizSession, Stats

__all__ = [
    "FetchError",
    "QuizApiClient",
    "OptionView",
    "QuestionView",
    "build_question_view",
    "QuizPhase",
    "QuizSession",
    "Stats",
]
