import pytest
from fastapi.testclient import TestClient

from chirpy.main import create_app


@pytest.fixture
def fileserver_root(tmp_path):
    (tmp_path / "index.html").write_text("<html><body>Welcome to Chirpy</body></html>")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "logo.txt").write_text("chirp")
    return tmp_path


@pytest.fixture
def client(fileserver_root):
    return TestClient(create_app(fileserver_root=str(fileserver_root)))
