import sys
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

from gorgias._config import Config, RetryConfig
from gorgias._services import HttpClient

# Ensure local source package (src/gorgias) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clean environment variables before each test."""
    for name in (
        "GORGIAS_SUBDOMAIN",
        "GORGIAS_EMAIL",
        "GORGIAS_API_KEY",
        "GORGIAS_BASE_URL",
        "GORGIAS_TIMEOUT_MS",
    ):
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def base_url() -> str:
    return "https://acme.gorgias.com/api/"


@pytest.fixture
def config() -> Config:
    return Config(
        subdomain="acme",
        email="agent@acme.com",
        api_key="secret-key",
        retry=RetryConfig(base_delay_ms=0, max_delay_ms=0),
    )


@pytest.fixture
def http_client(config: Config) -> Generator[HttpClient, None, None]:
    client = HttpClient(config)
    yield client
    client.close()
