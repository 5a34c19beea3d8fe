"""Test configuration and fixtures for the course library."""

import os
import tempfile
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Keep the module-level application away from the project's real files directory.
os.environ.setdefault("FILES_ROOT", tempfile.mkdtemp(prefix="course-library-tests-"))
os.environ.setdefault("ENVIRONMENT", "local")

from course_library.infrastructure.config.settings import Settings  # noqa: E402
from course_library.infrastructure.logging import configure_logging, configure_testing_logging  # noqa: E402
from course_library.infrastructure.storage import StorageRoot  # noqa: E402
from course_library.interfaces.main import create_app  # noqa: E402

configure_logging()
configure_testing_logging()

SUBJECT = "algorithmes-et-structures-de-donnees"
DOC_TYPE = "cours"
YEAR = "2024"


def build_pdf(size: int = 1024) -> bytes:
    """Build a PDF-looking payload of exactly ``size`` bytes."""
    header = b"%PDF-1.4\n"
    trailer = b"\n%%EOF"
    if size <= len(header) + len(trailer):
        return (header + trailer)[:size]
    return header + b"0" * (size - len(header) - len(trailer)) + trailer


@pytest.fixture
def files_root(tmp_path: Path) -> Path:
    """Storage root directory for one test."""
    return tmp_path / "files"


@pytest.fixture
def storage(files_root: Path) -> StorageRoot:
    """Storage root that exists on disk."""
    root = StorageRoot(files_root)
    root.ensure()
    return root


@pytest.fixture
def settings(files_root: Path) -> Settings:
    """Settings pointing the application at the test storage root."""
    return Settings(FILES_ROOT=str(files_root), ENVIRONMENT="local", LOG_REQUESTS=False)


@pytest.fixture
def app(settings: Settings):
    application = create_app(settings)
    # create_app reconfigures logging from the settings it is given.
    configure_testing_logging()
    return application


@pytest_asyncio.fixture(scope="function")
async def client(app):
    """HTTP client bound to a fresh application instance."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_pdf():
    """Factory for PDF payloads of a given size."""
    return build_pdf


@pytest.fixture
def catalog_fields() -> dict:
    return {"subject": SUBJECT, "type": DOC_TYPE, "year": YEAR}


@pytest.fixture
def catalog_dir(files_root: Path) -> Path:
    """Directory the catalog_fields triple is stored in."""
    return files_root / SUBJECT / DOC_TYPE / YEAR


@pytest_asyncio.fixture
async def uploaded_lecture(client: AsyncClient, catalog_fields: dict) -> dict:
    """Upload a 10 KB lecture1.pdf and return the stored file entry."""
    response = await client.post(
        "/upload",
        data=catalog_fields,
        files=[("pdfs", ("lecture1.pdf", build_pdf(10240), "application/pdf"))],
    )
    assert response.status_code == 200
    return response.json()["files"][0]
