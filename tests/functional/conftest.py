"""Shared fixtures for the CLI stories under `tests/functional/`."""

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner(tmp_path: Path) -> CliRunner:
    """A CliRunner whose flight recorder writes under tmp_path."""
    return CliRunner(env={"SERVKIT_LOG_PATH": str(tmp_path / "logs" / "latest.log")})
