# backend/az204_quiz/app.py

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from dotenv import load_dotenv

from az204_quiz import __version__
from az204_quiz.core.config import Settings, load_settings
from az204_quiz.core.errors import QuizError
from az204_quiz.core.question_service import QuestionService
from az204_quiz.core.question_store import QuestionStore, create_store
from az204_quiz.core.schemas import ApiInfo, ErrorResponse, HealthResponse, Question

# ------------------------------------------------------------
# Setup
# ------------------------------------------------------------
load_dotenv()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("quiz")

API_TITLE = "AZ-204 Quiz API"

ENDPOINTS = {
    "questions": "/api/questions",
    "randomQuestion": "/api/questions/random",
    "questionsByTopic": "/api/questions/topic/:topic",
    "health": "/api/health",
}


# ------------------------------------------------------------
# Middleware to log requests
# ------------------------------------------------------------
class LogRequestMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        # CORSMiddleware only answers requests that send an Origin header
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response


# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------
def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a trailing Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def get_service(request: Request) -> QuestionService:
    return request.app.state.service


def _server_error(message: str) -> JSONResponse:
    return JSONResponse(
        {"error": message},
        status_code=500,
        headers={"Access-Control-Allow-Origin": "*"},
    )


# ------------------------------------------------------------
# Application factory
# ------------------------------------------------------------
def create_app(
    store: Optional[QuestionStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the API. When `store` is given it is served as-is; otherwise the
    store named by `settings` is loaded at startup and a failure aborts it.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "service", None) is None:
            cfg = settings or load_settings()
            app.state.service = QuestionService(create_store(cfg))
            logger.info(f"Loaded {app.state.service.count()} questions ({cfg.question_source} store)")
        for name, path in ENDPOINTS.items():
            logger.info(f"Endpoint {name}: {path}")
        yield
        app.state.service.store.close()

    app = FastAPI(title=API_TITLE, version=__version__, lifespan=lifespan)
    app.state.service = QuestionService(store) if store is not None else None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LogRequestMiddleware)

    # --------------------------------------------------------
    # Exception handlers
    # --------------------------------------------------------
    @app.exception_handler(QuizError)
    async def quiz_error_handler(request: Request, exc: QuizError):
        if exc.status_code >= 500:
            logger.error(f"{request.url.path} failed: {exc.message}")
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return _server_error("Internal server error")

    # --------------------------------------------------------
    # Routes
    # --------------------------------------------------------
    @app.get("/", response_model=ApiInfo)
    def api_info():
        return {"message": API_TITLE, "version": __version__, "endpoints": ENDPOINTS}

    @app.get(
        "/api/questions",
        response_model=List[Question],
        responses={500: {"model": ErrorResponse}},
    )
    def list_questions(service: QuestionService = Depends(get_service)):
        try:
            return service.list_all()
        except Exception:
            logger.error("Error fetching questions", exc_info=True)
            return _server_error("Failed to fetch questions")

    @app.get(
        "/api/questions/random",
        response_model=Question,
        responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def random_question(service: QuestionService = Depends(get_service)):
        try:
            return service.pick_random()
        except QuizError as e:
            if e.status_code == 404:
                raise
            logger.error("Error fetching random question", exc_info=True)
            return _server_error("Failed to fetch random question")
        except Exception:
            logger.error("Error fetching random question", exc_info=True)
            return _server_error("Failed to fetch random question")

    @app.get(
        "/api/questions/topic/{topic}",
        response_model=List[Question],
        responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def questions_by_topic(topic: str, service: QuestionService = Depends(get_service)):
        try:
            return service.filter_by_topic(topic)
        except QuizError as e:
            if e.status_code == 404:
                raise
            logger.error("Error fetching questions by topic", exc_info=True)
            return _server_error("Failed to fetch questions by topic")
        except Exception:
            logger.error("Error fetching questions by topic", exc_info=True)
            return _server_error("Failed to fetch questions by topic")

    @app.get(
        "/api/health",
        response_model=HealthResponse,
        responses={500: {"model": ErrorResponse}},
    )
    def health(service: QuestionService = Depends(get_service)):
        try:
            count = service.count()
        except Exception:
            logger.error("Error checking health", exc_info=True)
            return _server_error("Failed to fetch health status")
        return {"status": "OK", "timestamp": utc_timestamp(), "questionsCount": count}

    return app


app = create_app()
