"""Frontend settings, read from the environment (or a local .env)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class UiSettings:
    api_base_url: str = "http://localhost:3001"
    timeout: float = 10.0


def load_ui_settings() -> UiSettings:
    load_dotenv()
    return UiSettings(
        api_base_url=os.getenv("QUIZ_API_BASE_URL", "http://localhost:3001").rstrip("/"),
        timeout=float(os.getenv("QUIZ_API_TIMEOUT", "10")),
    )
