import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from az204_quiz.core.schemas import Question

logger = logging.getLogger("quiz.ui")

RANDOM_QUESTION_PATH = "/api/questions/random"


class FetchError(Exception):
    """Any failure to obtain a question: network, non-2xx or bad payload."""


class QuizApiClient:
    """Thin client for the one endpoint the quiz UI needs."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self._client = http_client or httpx.Client(
            base_url=base_url, timeout=timeout, transport=transport
        )

    def fetch_random_question(self) -> Question:
        try:
            response = self._client.get(RANDOM_QUESTION_PATH)
            response.raise_for_status()
            return Question.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            logger.error(f"Error fetching question: HTTP {e.response.status_code}")
            raise FetchError(f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Error fetching question: {e}")
            raise FetchError(str(e)) from e
        except (ValueError, ValidationError) as e:
            logger.error(f"Error decoding question: {e}")
            raise FetchError("Malformed question payload") from e

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "QuizApiClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
