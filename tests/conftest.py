import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

# Ensure local source package (src/outbound) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from outbound import clear_options_cache  # noqa: E402


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield tmp_dir


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clean timeout variables and cached options around each test.

    Variables are set before being deleted so monkeypatch also removes any
    value a dotenv file loads during the test.
    """
    for name in ("OUTBOUND_CONNECT_TIMEOUT_MILLIS", "OUTBOUND_READ_TIMEOUT_MILLIS"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    clear_options_cache()
    yield
    clear_options_cache()
