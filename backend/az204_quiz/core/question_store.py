# backend/az204_quiz/core/question_store.py
"""
Read-only question stores.

Two backends share one interface:
- JsonQuestionStore: a JSON array on disk, loaded once into an immutable snapshot.
- SqlQuestionStore: a relational `questions` table reached through one shared
  SQLAlchemy connection pool. The `options` column holds a JSON-encoded array.

Both are populated (or connected) at startup and never written to afterwards.
"""

import json
import logging
import random
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError
from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
    func,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings
from .errors import UpstreamFailure
from .schemas import Question

logger = logging.getLogger("quiz.store")

# ------------------------------------------------------------
# SQL table layout
# ------------------------------------------------------------
metadata = MetaData()

questions_table = Table(
    "questions",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("topic", String(128), nullable=False, index=True),
    Column("skill_area", String(128), nullable=False),
    Column("question", Text, nullable=False),
    Column("options", Text, nullable=False),  # JSON-encoded list of 4 strings
    Column("answer", Text, nullable=False),
    Column("explanation", Text, nullable=False),
)


# ------------------------------------------------------------
# Interface
# ------------------------------------------------------------
class QuestionStore(ABC):
    @abstractmethod
    def list_all(self) -> List[Question]:
        """Every question, ascending id."""

    @abstractmethod
    def pick_random(self) -> Optional[Question]:
        """One question chosen uniformly at random, or None when empty."""

    @abstractmethod
    def filter_by_topic(self, topic: str) -> List[Question]:
        """Questions whose topic equals `topic` ignoring case."""

    @abstractmethod
    def count(self) -> int:
        ...

    def close(self) -> None:
        pass


def parse_records(records: Iterable[Mapping[str, Any]]) -> Tuple[Question, ...]:
    """Validate raw records and return them sorted by id. Rejects duplicate ids."""
    questions: List[Question] = []
    seen = set()
    for index, raw in enumerate(records):
        try:
            q = Question.model_validate(raw)
        except ValidationError as e:
            raise UpstreamFailure(f"Invalid question record #{index + 1}: {e}") from e
        if q.id in seen:
            raise UpstreamFailure(f"Duplicate question id: {q.id}")
        seen.add(q.id)
        questions.append(q)
    return tuple(sorted(questions, key=lambda q: q.id))


# ------------------------------------------------------------
# JSON file backend
# ------------------------------------------------------------
class JsonQuestionStore(QuestionStore):
    def __init__(self, questions: Iterable[Question]):
        self._questions: Tuple[Question, ...] = tuple(sorted(questions, key=lambda q: q.id))

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "JsonQuestionStore":
        return cls(parse_records(records))

    @classmethod
    def from_file(cls, path: Path) -> "JsonQuestionStore":
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise UpstreamFailure(f"Questions file not found: {path}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise UpstreamFailure(f"Could not read questions file {path}: {e}") from e

        if not isinstance(data, list):
            raise UpstreamFailure(f"Questions file {path} must contain a JSON array")

        store = cls.from_records(data)
        logger.info(f"Loaded {store.count()} questions from {path}")
        return store

    def list_all(self) -> List[Question]:
        return list(self._questions)

    def pick_random(self) -> Optional[Question]:
        if not self._questions:
            return None
        return random.choice(self._questions)

    def filter_by_topic(self, topic: str) -> List[Question]:
        wanted = topic.casefold()
        return [q for q in self._questions if q.topic.casefold() == wanted]

    def count(self) -> int:
        return len(self._questions)


# ------------------------------------------------------------
# SQL backend
# ------------------------------------------------------------
def row_to_question(row: Mapping[str, Any]) -> Question:
    try:
        options = json.loads(row["options"])
        return Question(
            id=row["id"],
            topic=row["topic"],
            skill_area=row["skill_area"],
            question=row["question"],
            options=options,
            answer=row["answer"],
            explanation=row["explanation"],
        )
    except (TypeError, json.JSONDecodeError, ValidationError) as e:
        raise UpstreamFailure(f"Malformed question row id={row.get('id')}: {e}") from e


def question_to_row(q: Question) -> dict:
    return {
        "id": q.id,
        "topic": q.topic,
        "skill_area": q.skill_area,
        "question": q.question,
        "options": json.dumps(q.options, ensure_ascii=False),
        "answer": q.answer,
        "explanation": q.explanation,
    }


def random_order(dialect_name: str):
    """Database-native random ordering; MySQL and MariaDB spell it rand()."""
    if dialect_name in ("mysql", "mariadb"):
        return func.rand()
    return func.random()


def create_db_engine(database_url: str, pool_size: int = 5) -> Engine:
    kwargs = {"pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        kwargs["pool_size"] = pool_size
    return create_engine(database_url, **kwargs)


class SqlQuestionStore(QuestionStore):
    def __init__(self, engine: Engine):
        self._engine = engine

    @classmethod
    def connect(cls, database_url: str, pool_size: int = 5) -> "SqlQuestionStore":
        store = cls(create_db_engine(database_url, pool_size))
        # fail fast if the database is unreachable or the table is missing
        total = store.count()
        logger.info(f"Connected to question database ({total} questions)")
        return store

    def _fetch(self, stmt) -> List[Question]:
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as e:
            logger.error(f"Question query failed: {e}")
            raise UpstreamFailure("Question database query failed") from e
        return [row_to_question(row) for row in rows]

    def list_all(self) -> List[Question]:
        return self._fetch(select(questions_table).order_by(questions_table.c.id))

    def pick_random(self) -> Optional[Question]:
        order = random_order(self._engine.dialect.name)
        rows = self._fetch(select(questions_table).order_by(order).limit(1))
        return rows[0] if rows else None

    def filter_by_topic(self, topic: str) -> List[Question]:
        stmt = (
            select(questions_table)
            .where(func.lower(questions_table.c.topic) == topic.lower())
            .order_by(questions_table.c.id)
        )
        return self._fetch(stmt)

    def count(self) -> int:
        try:
            with self._engine.connect() as conn:
                return conn.execute(
                    select(func.count()).select_from(questions_table)
                ).scalar_one()
        except SQLAlchemyError as e:
            logger.error(f"Question count failed: {e}")
            raise UpstreamFailure("Question database query failed") from e

    def close(self) -> None:
        self._engine.dispose()


# ------------------------------------------------------------
# Factory
# ------------------------------------------------------------
def create_store(settings: Settings) -> QuestionStore:
    if settings.question_source == "sql":
        return SqlQuestionStore.connect(settings.database_url, settings.db_pool_size)
    return JsonQuestionStore.from_file(settings.questions_path)
