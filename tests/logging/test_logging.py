"""Tests for subsetgen's logging setup."""

import logging
import sys
from io import StringIO

import pytest

from subsetgen import cli
from subsetgen.generator import SubsetGenerator
from subsetgen.logging import (
    ROOT_LOGGER_NAME,
    configure_cli_logging,
    get_logger,
    level_for_flags,
    reset_logging,
    setup_root_logger,
)


def _package_handlers() -> list:
    return logging.getLogger(ROOT_LOGGER_NAME).handlers


def test_module_loggers_inherit_package_level():
    setup_root_logger()
    for name in ("subsetgen.generator", "subsetgen.problems.set_cover"):
        assert get_logger(name).getEffectiveLevel() == logging.INFO


def test_default_handler_writes_to_stderr():
    reset_logging()
    setup_root_logger()
    handlers = _package_handlers()
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stderr


def test_setup_is_idempotent_until_reset():
    reset_logging()
    first = StringIO()
    setup_root_logger(stream=first)
    setup_root_logger(level=logging.DEBUG, stream=StringIO())

    assert len(_package_handlers()) == 1
    assert _package_handlers()[0].stream is first
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.INFO


@pytest.mark.parametrize(
    ("verbose", "quiet", "level"),
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_level_for_flags(verbose, quiet, level):
    assert level_for_flags(verbose, quiet) == level


def test_configure_cli_logging_rebinds_handler(capsys):
    assert configure_cli_logging(verbose=True) == logging.DEBUG
    get_logger("subsetgen.generator").debug("cursor advanced")
    assert "cursor advanced" in capsys.readouterr().err

    configure_cli_logging(quiet=True)
    get_logger("subsetgen.generator").info("hidden")
    assert "hidden" not in capsys.readouterr().err


def test_generator_session_logs_at_debug():
    reset_logging()
    capture = StringIO()
    setup_root_logger(level=logging.DEBUG, format_string="%(message)s", stream=capture)

    assert len(list(SubsetGenerator([1, 2]))) == 3
    assert capture.getvalue().splitlines() == [
        "Starting subset session over 2 items (include_empty=False)",
        "Subset session exhausted after 3 subsets",
    ]


def test_verbose_cli_keeps_logs_off_stdout(capsys):
    cli.main(["--verbose", "enumerate", "a", "b"])
    captured = capsys.readouterr()

    assert captured.out.splitlines() == ['["a"]', '["b"]', '["a", "b"]']
    assert "Debug logging enabled" in captured.err
    assert "Starting subset session over 2 items" in captured.err


def test_quiet_cli_suppresses_info(capsys):
    cli.main(["--quiet", "enumerate", "a"])
    captured = capsys.readouterr()

    assert captured.out == '["a"]\n'
    assert "Enumerating" not in captured.err
