"""Shared test fixtures."""

import logging

import pytest
from click.testing import CliRunner

from tsconv import Instant

SAMPLE_SECONDS = 1627497005
SAMPLE_NANOSECOND = 123456789
SAMPLE_TIME_NS = SAMPLE_SECONDS * 1_000_000_000 + SAMPLE_NANOSECOND


@pytest.fixture
def sample_instant():
    return Instant(SAMPLE_SECONDS, SAMPLE_NANOSECOND)


@pytest.fixture
def epoch():
    return Instant(0, 0)


@pytest.fixture
def frozen_clock(monkeypatch):
    """Pin the wall clock to the sample instant."""
    monkeypatch.setattr("tsconv._instant.time_nano", lambda: SAMPLE_TIME_NS)
    return SAMPLE_TIME_NS


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_tsconv_logger():
    """Undo the level the CLI sets on the package logger."""
    yield
    logging.getLogger("tsconv").setLevel(logging.NOTSET)
