"""Tests for logging setup, formatters and correlation IDs."""

import json
import logging

import pytest

from course_library.infrastructure.config.settings import Settings
from course_library.infrastructure.logging import (
    configure_testing_logging,
    generate_correlation_id,
    get_correlation_id,
    get_logger,
    reset_correlation_id,
    set_correlation_id,
)
from course_library.infrastructure.logging.formatters import (
    DetailedFormatter,
    JSONFormatter,
    StructuredFormatter,
    get_formatter,
)
from course_library.interfaces.main import create_app


def _record(message: str = "stored 1 file(s)", **extra) -> logging.LogRecord:
    record = logging.LogRecord("course_library.test", logging.INFO, __file__, 10, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    output = json.loads(JSONFormatter().format(_record(catalog_path="anglais-1/td/2024", files=["a.pdf"])))

    assert output["level"] == "INFO"
    assert output["module"] == "course_library.test"
    assert output["message"] == "stored 1 file(s)"
    assert output["catalog_path"] == "anglais-1/td/2024"
    assert output["files"] == ["a.pdf"]


def test_json_formatter_stringifies_unserializable_extra():
    output = json.loads(JSONFormatter().format(_record(path=object())))

    assert isinstance(output["path"], str)


def test_structured_formatter_key_values():
    output = StructuredFormatter().format(_record(size=12, subject="anglais-1"))

    assert "level=INFO" in output
    assert 'message="stored 1 file(s)"' in output
    assert "size=12" in output
    assert 'subject="anglais-1"' in output


def test_detailed_formatter_appends_correlation_id():
    output = DetailedFormatter().format(_record(correlation_id="req-42"))

    assert output.endswith("[req-42]")


def test_get_formatter_is_case_insensitive():
    assert isinstance(get_formatter("JSON"), JSONFormatter)


def test_get_formatter_unknown():
    with pytest.raises(ValueError, match="Unknown format type"):
        get_formatter("xml")


def test_correlation_id_context():
    correlation_id = generate_correlation_id()
    token = set_correlation_id(correlation_id)
    try:
        assert get_correlation_id() == correlation_id
    finally:
        reset_correlation_id(token)

    assert get_correlation_id() is None


def test_get_logger_with_context():
    adapter = get_logger("course_library.test", catalog_path="anglais-1/td/2024")

    assert isinstance(adapter, logging.LoggerAdapter)
    assert adapter.extra["catalog_path"] == "anglais-1/td/2024"


def test_create_app_configures_logging_from_its_settings(files_root):
    """Test that the log level of the settings handed to the app reaches the root logger."""
    settings = Settings(
        FILES_ROOT=str(files_root), ENVIRONMENT="local", LOG_LEVEL="WARNING", LOG_CONSOLE_ENABLED=False
    )
    try:
        create_app(settings)
        assert logging.getLogger().level == logging.WARNING
    finally:
        configure_testing_logging()


@pytest.mark.asyncio
async def test_lifespan_creates_storage_root(app, files_root):
    """Test that application startup recreates a storage root removed after the app was built."""
    files_root.rmdir()

    async with app.router.lifespan_context(app):
        assert files_root.is_dir()
