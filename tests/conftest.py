"""
tests/conftest.py
=================
Shared fixtures: a console-free engine and a click runner isolated from
any pwquality.toml in the working directory.
"""
import logging

import pytest
from click.testing import CliRunner

from pwquality.core.engine import QualityEngine
from pwquality.shared.logger import QualityLogger


@pytest.fixture
def quiet_logger():
    return QualityLogger("tests", console_output=False)


@pytest.fixture
def engine(quiet_logger):
    return QualityEngine(logger=quiet_logger)


@pytest.fixture(autouse=True)
def reset_engine_logger():
    """Undo handler setup the CLI or a test applied to ``pwquality.engine``."""
    yield
    logger = logging.getLogger("pwquality.engine")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def relaxed_options():
    """Options that disable every class requirement and the entropy floor."""
    return {
        "minLength": 1,
        "requireUpper": False,
        "requireLower": False,
        "requireNumber": False,
        "requireSymbol": False,
        "minEntropy": 0,
    }


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return CliRunner()
