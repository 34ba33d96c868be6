# backend/az204_quiz/seed.py
"""
Load a questions JSON file into the SQL `questions` table.

    python -m az204_quiz.seed --database-url sqlite:///questions.db
    python -m az204_quiz.seed --file my_questions.json --replace

The file is validated with the same rules the API applies before any row is
written. `options` are stored as a JSON-encoded array string.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sqlalchemy import delete, insert
from sqlalchemy.exc import SQLAlchemyError

from az204_quiz.core.config import load_settings
from az204_quiz.core.errors import UpstreamFailure
from az204_quiz.core.question_store import (
    JsonQuestionStore,
    create_db_engine,
    metadata,
    question_to_row,
    questions_table,
)

logger = logging.getLogger("quiz.seed")


def seed_database(database_url: str, questions_path: Path, replace: bool = False) -> int:
    """Create the table if needed and insert every question. Returns the row count written."""
    questions = JsonQuestionStore.from_file(questions_path).list_all()
    engine = create_db_engine(database_url)
    try:
        metadata.create_all(engine)
        with engine.begin() as conn:
            if replace:
                conn.execute(delete(questions_table))
            if questions:
                conn.execute(insert(questions_table), [question_to_row(q) for q in questions])
    finally:
        engine.dispose()
    logger.info(f"Seeded {len(questions)} questions into {database_url}")
    return len(questions)


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Seed the AZ-204 question database")
    parser.add_argument("--database-url", default=settings.database_url)
    parser.add_argument("--file", type=Path, default=settings.questions_path)
    parser.add_argument(
        "--replace", action="store_true", help="delete existing rows before inserting"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level)
    try:
        seed_database(args.database_url, args.file, replace=args.replace)
    except (UpstreamFailure, SQLAlchemyError) as e:
        logger.error(f"Seeding failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
