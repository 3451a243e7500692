"""Shared fixtures for PinPoint tests."""

import pytest

from shared.config import PinpointConfig
from shared.console import PinpointConsole


@pytest.fixture
def quiet_console():
    return PinpointConsole(quiet=True)


@pytest.fixture
def config(tmp_path):
    cfg = PinpointConfig()
    cfg.predictor.database = str(tmp_path / "observations.db")
    return cfg
