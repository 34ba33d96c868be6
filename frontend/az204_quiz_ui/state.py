"""
state.py
======================

Quiz session state machine.

    IDLE -> LOADING -> ANSWERING -> SUBMITTED -> LOADING -> ...
    LOADING -> ERROR -> (retry) -> LOADING

Grading is local: the selected option is compared with the question's answer,
nothing is sent back to the API. Each fetch carries a generation token and only
the latest one is applied, so a slow earlier response cannot overwrite a newer
question.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from az204_quiz.core.schemas import Question

from .api_client import FetchError

logger = logging.getLogger("quiz.ui")

LOAD_ERROR_MESSAGE = "Failed to load question. Please try again."

Fetcher = Callable[[], Question]


class QuizPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ANSWERING = "answering"
    SUBMITTED = "submitted"
    ERROR = "error"


@dataclass
class Stats:
    correct: int = 0
    total: int = 0

    @property
    def accuracy(self) -> int:
        """Rounded percentage, 0 before the first answer."""
        if self.total == 0:
            return 0
        # halves round up
        return math.floor(self.correct * 100 / self.total + 0.5)


class QuizSession:
    def __init__(self) -> None:
        self.phase = QuizPhase.IDLE
        self.current_question: Optional[Question] = None
        self.selected_answer: str = ""
        self.submitted = False
        self.is_correct = False
        self.error: Optional[str] = None
        self.stats = Stats()
        self._generation = 0

    @property
    def generation(self) -> int:
        """Token of the most recent fetch."""
        return self._generation

    # ------------------------------------------------------------
    # Fetch lifecycle
    # ------------------------------------------------------------
    def begin_fetch(self) -> Optional[int]:
        """Enter LOADING and return the token for this fetch, or None if one is in flight."""
        if self.phase is QuizPhase.LOADING:
            logger.debug("Fetch already in flight; ignoring request")
            return None
        self._generation += 1
        self.phase = QuizPhase.LOADING
        self.error = None
        return self._generation

    def resolve_fetch(self, token: int, question: Question) -> bool:
        if token != self._generation:
            logger.debug(f"Dropping stale question id={question.id} (token {token})")
            return False
        self.current_question = question
        self.selected_answer = ""
        self.submitted = False
        self.is_correct = False
        self.phase = QuizPhase.ANSWERING
        return True

    def fail_fetch(self, token: int, message: str = LOAD_ERROR_MESSAGE) -> bool:
        if token != self._generation:
            return False
        self.error = message
        self.phase = QuizPhase.ERROR
        return True

    def load_question(self, fetch: Fetcher) -> None:
        token = self.begin_fetch()
        if token is None:
            return
        try:
            question = fetch()
        except FetchError:
            self.fail_fetch(token)
            return
        except Exception:
            logger.error("Unexpected error fetching question", exc_info=True)
            self.fail_fetch(token)
            return
        self.resolve_fetch(token, question)

    def retry(self, fetch: Fetcher) -> None:
        self.load_question(fetch)

    def next_question(self, fetch: Fetcher) -> None:
        self.load_question(fetch)

    # ------------------------------------------------------------
    # Answering
    # ------------------------------------------------------------
    def select(self, option: str) -> bool:
        """Record a selection. Ignored once submitted or for unknown options."""
        if self.phase is not QuizPhase.ANSWERING or self.submitted:
            return False
        if self.current_question is None or option not in self.current_question.options:
            return False
        self.selected_answer = option
        return True

    @property
    def can_submit(self) -> bool:
        return (
            self.phase is QuizPhase.ANSWERING
            and not self.submitted
            and bool(self.selected_answer)
        )

    def submit(self) -> Optional[bool]:
        """Grade the selection. Returns None when submitting is not allowed."""
        if not self.can_submit:
            return None
        self.is_correct = self.selected_answer == self.current_question.answer
        self.submitted = True
        self.stats.total += 1
        if self.is_correct:
            self.stats.correct += 1
        self.phase = QuizPhase.SUBMITTED
        return self.is_correct
