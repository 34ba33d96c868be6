from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from az204_quiz.app import create_app
from az204_quiz.core.config import DEFAULT_QUESTIONS_PATH
from az204_quiz.core.question_store import JsonQuestionStore


# ====================
# Question fixtures
# ====================

def _make_record(**overrides: Any) -> Dict[str, Any]:
    record = {
        "id": 1,
        "topic": "App Service",
        "skillArea": "Develop Azure compute solutions",
        "question": "Which plan supports pre-warmed instances for function apps?",
        "options": ["Free", "Shared", "PremiumV2", "Elastic Premium"],
        "answer": "Elastic Premium",
        "explanation": "Elastic Premium keeps pre-warmed instances ready to avoid cold starts.",
    }
    record.update(overrides)
    return record


@pytest.fixture
def make_record():
    """Factory for a valid wire-format record; keyword overrides replace fields."""
    return _make_record


@pytest.fixture
def two_question_records() -> List[Dict[str, Any]]:
    return [
        _make_record(),
        _make_record(
            id=2,
            question="Which operation exchanges a staging slot with production?",
            options=["Traffic Manager", "Swap", "Scale-Out", "Backup"],
            answer="Swap",
            explanation="A swap exchanges the slots after warming up the source slot.",
        ),
    ]


@pytest.fixture
def bundled_records() -> List[Dict[str, Any]]:
    return json.loads(Path(DEFAULT_QUESTIONS_PATH).read_text(encoding="utf-8"))


@pytest.fixture
def two_question_store(two_question_records) -> JsonQuestionStore:
    return JsonQuestionStore.from_records(two_question_records)


@pytest.fixture
def bundled_store() -> JsonQuestionStore:
    return JsonQuestionStore.from_file(DEFAULT_QUESTIONS_PATH)


@pytest.fixture
def empty_store() -> JsonQuestionStore:
    return JsonQuestionStore([])


# ====================
# API client fixtures
# ====================

@pytest.fixture
def client(bundled_store) -> TestClient:
    return TestClient(create_app(store=bundled_store))


@pytest.fixture
def questions_file(tmp_path, two_question_records) -> Path:
    path = tmp_path / "questions.json"
    path.write_text(json.dumps(two_question_records), encoding="utf-8")
    return path
