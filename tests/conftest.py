"""Pytest configuration and fixtures."""

import io
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from storyboard import create_app
from storyboard.storage import MemoryBackend

# Smallest valid PNG header plus padding; content is never decoded
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


# ---------------------------------------------------------------------------
# App Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def app(tmp_path: Path, upload_dir: Path, backend: MemoryBackend):
    """App wired to temporary folders and an in-memory catalog backend."""
    app = create_app(
        {
            "TESTING": True,
            "UPLOAD_FOLDER": str(upload_dir),
            "DATA_FILE": str(tmp_path / "data.json"),
            "LOG_LEVEL": "WARNING",
            "LOG_DIR": None,
        },
        backend=backend,
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def catalog(app):
    return app.extensions["catalog"]


# ---------------------------------------------------------------------------
# Upload Helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def upload(client):
    """Post an upload form; keyword arguments override the defaults."""

    def _upload(
        title="Sunset",
        description="Over the bay",
        content=PNG_BYTES,
        filename="sunset.png",
        content_type="image/png",
        include_file=True,
    ):
        data = {}
        if title is not None:
            data["title"] = title
        if description is not None:
            data["description"] = description
        if include_file:
            data["image"] = (io.BytesIO(content), filename, content_type)
        return client.post("/api/upload", data=data, content_type="multipart/form-data")

    return _upload


def assert_counters_consistent(client) -> None:
    images = client.get("/api/images").get_json()
    stats = client.get("/api/stats").get_json()
    assert stats["totalImages"] == len(images)
    assert stats["totalFavorites"] == sum(1 for image in images if image["isFavorite"])
