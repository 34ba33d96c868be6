from __future__ import annotations

from typing import List

import pytest

from az204_quiz.core.schemas import Question


@pytest.fixture
def elastic_question() -> Question:
    return Question(
        id=1,
        topic="App Service",
        skill_area="Develop Azure compute solutions",
        question="Which plan supports pre-warmed instances for function apps?",
        options=["Free", "Shared", "PremiumV2", "Elastic Premium"],
        answer="Elastic Premium",
        explanation="Elastic Premium keeps pre-warmed instances ready to avoid cold starts.",
    )


@pytest.fixture
def swap_question() -> Question:
    return Question(
        id=2,
        topic="App Service",
        skill_area="Develop Azure compute solutions",
        question="Which operation exchanges a staging slot with production?",
        options=["Traffic Manager", "Swap", "Scale-Out", "Backup"],
        answer="Swap",
        explanation="A swap exchanges the slots after warming up the source slot.",
    )


class ScriptedFetcher:
    """Returns (or raises) the scripted results in order, recording each call."""

    def __init__(self, *results):
        self.results: List = list(results)
        self.calls = 0

    def __call__(self) -> Question:
        self.calls += 1
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def scripted_fetcher():
    return ScriptedFetcher
