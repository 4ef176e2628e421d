"""Global pytest fixtures and default marks for SERVKIT."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from servkit import lscolors
from servkit.config import LS_COLORS_ENV, NO_COLOR_ENV, NOTIFY_SOCKET_ENV

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test directory -> mark added to every test collected under it.
LAYER_MARKS = {
    "unit": pytest.mark.unit,
    "contract": pytest.mark.contract,
    "integration": pytest.mark.integration,
    "functional": pytest.mark.functional,
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each test with the layer it lives in, unless already marked."""
    for item in items:
        try:
            layer = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        mark = LAYER_MARKS.get(layer)
        if mark is None:
            continue
        if not any(marker.name == mark.name for marker in item.iter_markers()):
            item.add_marker(mark)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test without the host's LS_COLORS, NO_COLOR and NOTIFY_SOCKET.

    The process-wide LS_COLORS map is dropped before and after the test so it
    is rebuilt from whatever environment the test sets up.
    """
    for name in (LS_COLORS_ENV, NO_COLOR_ENV, NOTIFY_SOCKET_ENV):
        monkeypatch.delenv(name, raising=False)
    lscolors.reset()
    yield
    lscolors.reset()
