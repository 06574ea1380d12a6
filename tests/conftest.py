"""Global pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from subsetgen.logging import reset_logging, setup_root_logger


@pytest.fixture(autouse=True)
def _fresh_log_handler():
    """Rebind the package handler to the stderr of the test about to run.

    CLI runs point the handler at whatever ``sys.stderr`` was current (often a
    ``capsys`` buffer that is closed afterwards).
    """
    reset_logging()
    setup_root_logger()
    yield


@pytest.fixture
def set_cover_file(tmp_path: Path) -> Path:
    path = tmp_path / "setcover.yaml"
    path.write_text(
        "kind: set_cover\n"
        "name: five-element cover\n"
        "universe: 5\n"
        "families: [[4], [0, 1, 2], [1, 3], [2, 4], [0, 3, 4]]\n"
    )
    return path


@pytest.fixture
def subset_sum_file(tmp_path: Path) -> Path:
    path = tmp_path / "subsetsum.yaml"
    path.write_text("kind: subset_sum\nvalues: [3, 34, 4, 12, 5, 2]\ntarget: 9\n")
    return path
