from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from main import create_app
from registry import Collection, build_registry
from tests.constants import *
from tests.utils import make_collection, write_file


@pytest.fixture
def tmp_images_path(tmp_path: Path) -> Path:
    folder = tmp_path / "teto"
    folder.mkdir()
    write_file(folder, PNG_IMAGE, PNG_BYTES)
    write_file(folder, JPG_IMAGE, JPG_BYTES)
    write_file(folder, TEXT_FILE, b"not an image")
    (folder / SUBFOLDER).mkdir()
    write_file(folder / SUBFOLDER, "nested.png", PNG_BYTES)
    return folder

@pytest.fixture
def empty_images_path(tmp_path: Path) -> Path:
    folder = tmp_path / "empty"
    folder.mkdir()
    return folder

@pytest.fixture
def viewer_dir(tmp_path: Path) -> Path:
    folder = tmp_path / "pages"
    folder.mkdir()
    write_file(folder, TETO_WEB_PAGE, b"<html><body>teto viewer</body></html>")
    return folder

@pytest.fixture
def collections(tmp_images_path: Path, empty_images_path: Path, tmp_path: Path) -> list[Collection]:
    return [
        make_collection(tmp_images_path, id="teto", name="Kasane Teto"),
        make_collection(empty_images_path, id="empty", name="Empty Collection"),
        make_collection(tmp_path / "missing", id="missing", name="Missing Collection"),
        Collection(id="public", name="Public Root", directory=str(tmp_path), static_prefix=PUBLIC_PREFIX),
    ]

@pytest.fixture
def app(collections: list[Collection], viewer_dir: Path):
    return create_app(build_registry(collections), viewer_dir=viewer_dir)

@pytest.fixture(name="client")
def client_fixture(app):
    with TestClient(app) as client:
        yield client

@pytest_asyncio.fixture(name="async_client")
async def async_client_fixture(app):
    """Async test client fixture using httpx.AsyncClient."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
