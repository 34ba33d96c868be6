# backend/az204_quiz/__main__.py

import logging

import uvicorn

from az204_quiz.core.config import load_settings

logger = logging.getLogger("quiz")


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"AZ-204 Quiz API server starting on port {settings.port}")
    logger.info(f"Health check: http://localhost:{settings.port}/api/health")
    uvicorn.run(
        "az204_quiz.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
