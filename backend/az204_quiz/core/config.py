# backend/az204_quiz/core/config.py

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# ------------------------------------------------------------
# Paths
# ------------------------------------------------------------
PACKAGE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_QUESTIONS_PATH = PACKAGE_DIR / "data" / "questions.json"

QUESTION_SOURCES = ("json", "sql")


# ------------------------------------------------------------
# Settings
# ------------------------------------------------------------
@dataclass(frozen=True)
class Settings:
    question_source: str = "json"
    questions_path: Path = DEFAULT_QUESTIONS_PATH
    database_url: str = "sqlite:///questions.db"
    db_pool_size: int = 5
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"

    def __post_init__(self):
        if self.question_source not in QUESTION_SOURCES:
            raise ValueError(
                f"QUESTION_SOURCE must be one of {QUESTION_SOURCES}, got {self.question_source!r}"
            )


def load_settings() -> Settings:
    """Read settings from the environment (and a local .env, if any)."""
    load_dotenv()
    return Settings(
        question_source=os.getenv("QUESTION_SOURCE", "json").strip().lower(),
        questions_path=Path(os.getenv("QUESTIONS_PATH", str(DEFAULT_QUESTIONS_PATH))),
        database_url=os.getenv("DATABASE_URL", "sqlite:///questions.db"),
        db_pool_size=int(os.getenv("DB_POOL_SIZE", "5")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3001")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
