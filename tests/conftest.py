"""
Pytest configuration and shared fixtures for bearer_token_discovery tests.
"""
import logging
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

from bearer_token_discovery import DiscoveryConfig, TokenDiscovery


# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

TEST_UID = "4242"
TOKEN_FILE_NAME = f"bt_u{TEST_UID}"


class TokenDirs:
    """Sandboxed stand-ins for the directories the discovery chain reads."""

    def __init__(self, root: Path):
        self.files = root / "files"
        self.runtime = root / "runtime"
        self.fallback = root / "fallback"
        for d in (self.files, self.runtime, self.fallback):
            d.mkdir()

        self.bearer_token_file = self.files / "bt_test_file"
        self.runtime_token_file = self.runtime / TOKEN_FILE_NAME
        self.fallback_token_file = self.fallback / TOKEN_FILE_NAME

    def config(self) -> DiscoveryConfig:
        return DiscoveryConfig(fallback_dir=str(self.fallback))


@pytest.fixture
def token_dirs(tmp_path) -> TokenDirs:
    """Fixture with empty files/, runtime/ and fallback/ directories."""
    return TokenDirs(tmp_path)


@pytest.fixture
def make_discovery(token_dirs) -> Callable[..., TokenDiscovery]:
    """
    Fixture returning a factory for TokenDiscovery bound to the sandbox.
    The user id is fixed to TEST_UID.
    """
    def _make(environ: Optional[Dict[str, str]] = None, uid_provider=None) -> TokenDiscovery:
        return TokenDiscovery(
            environ=environ if environ is not None else {},
            uid_provider=uid_provider or (lambda: TEST_UID),
            config=token_dirs.config(),
        )

    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """
    Fixture that clears the discovery environment variables.
    Returns a function to set environment variables for testing.
    """
    for name in ("BEARER_TOKEN", "BEARER_TOKEN_FILE", "XDG_RUNTIME_DIR"):
        monkeypatch.delenv(name, raising=False)

    def _set_env(**kwargs: str) -> None:
        for key, value in kwargs.items():
            monkeypatch.setenv(key, value)

    return _set_env
