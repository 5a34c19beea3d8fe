"""Script to serve the course library with uvicorn."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import uvicorn  # noqa: E402

from course_library.infrastructure.config.settings import get_settings  # noqa: E402
from course_library.infrastructure.logging import get_logger  # noqa: E402

logger = get_logger(__name__)


def main() -> None:
    """Run the application on the configured host and port."""
    settings = get_settings()
    logger.info(f"Starting {settings.APP_NAME} on http://{settings.HOST}:{settings.PORT}/")
    logger.info(f"Files root: {settings.FILES_ROOT_PATH}")

    uvicorn.run(
        "course_library.interfaces.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    main()
