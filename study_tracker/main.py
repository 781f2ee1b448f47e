"""FastAPI application entry point."""

from study_tracker.application import create_app
from study_tracker.config import get_settings
from study_tracker.utils.logging import setup_logging

# Setup logging before creating app
setup_logging()

app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "study_tracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
