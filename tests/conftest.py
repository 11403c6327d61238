# tests/conftest.py
from __future__ import annotations

import pytest

from unifyerr.config import CaptureConfig, configure, reset_config


@pytest.fixture(autouse=True)
def capture_config():
    """Every test starts from code defaults, independent of ~/.unifyerr and env"""
    config = configure(CaptureConfig.default())
    yield config
    reset_config()


@pytest.fixture
def capture_disabled():
    return configure(CaptureConfig.disabled())
