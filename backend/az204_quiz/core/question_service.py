# backend/az204_quiz/core/question_service.py

import logging
from typing import List

from .errors import NotFound
from .question_store import QuestionStore
from .schemas import Question

logger = logging.getLogger("quiz.service")


class QuestionService:
    """The three read operations the API exposes, on top of a read-only store."""

    def __init__(self, store: QuestionStore):
        self.store = store

    def list_all(self) -> List[Question]:
        return self.store.list_all()

    def pick_random(self) -> Question:
        question = self.store.pick_random()
        if question is None:
            raise NotFound("No questions available")
        logger.debug(f"Picked random question id={question.id}")
        return question

    def filter_by_topic(self, topic: str) -> List[Question]:
        matches = self.store.filter_by_topic(topic)
        if not matches:
            raise NotFound(f"No questions found for topic: {topic}")
        return matches

    def count(self) -> int:
        return self.store.count()
