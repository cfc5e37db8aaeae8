import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

# Ensure local source package (src/curs) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("CURS_USER_AGENT", raising=False)
    monkeypatch.delenv("CURS_DISABLE_SSL_VERIFY", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://test.curs.local"


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A small binary file whose name maps to image/png."""
    file_path = tmp_path / "shim.png"
    file_path.write_bytes(PNG_BYTES)
    return file_path


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    file_path = tmp_path / "notes.txt"
    file_path.write_text("test content")
    return file_path
