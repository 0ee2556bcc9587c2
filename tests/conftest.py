"""Pytest fixtures for pathtext tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="pathtext-tests-"))
os.environ["PATHTEXT_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")
os.environ.pop("PATHTEXT_PLATFORM", None)

from pathtext.config import PathTextConfig, get_config, set_config  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Generator


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def _mock_platform_system(monkeypatch, request):
    """Handle @pytest.mark.mock_platform_system("Windows") marker."""
    marker = request.node.get_closest_marker("mock_platform_system")
    if marker:
        target_platform = marker.args[0]
        monkeypatch.setattr("platform.system", lambda: target_platform)
        monkeypatch.delenv("PATHTEXT_PLATFORM", raising=False)


@pytest.fixture(autouse=True)
def _restore_config() -> Generator[None, None, None]:
    """CLI invocations replace the process-wide config; put it back afterwards."""
    saved = get_config()
    yield
    set_config(saved)


@pytest.fixture(autouse=True)
def config_dir(monkeypatch, tmp_path: Path) -> Path:
    """Give every test its own empty config directory."""
    path = tmp_path / "config"
    monkeypatch.setenv("PATHTEXT_CONFIG_DIR", str(path))
    return path


@pytest.fixture
def default_config() -> PathTextConfig:
    return PathTextConfig()
