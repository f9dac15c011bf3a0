"""Shared fixtures for the log_taxonomy test suite."""
from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from log_taxonomy.generation.pipeline import clear_cache
from log_taxonomy.kernel.model import EventDefinitionSource


@pytest.fixture
def sample_source() -> EventDefinitionSource:
    return EventDefinitionSource.from_pairs(
        "SampleEvents",
        {
            "APP_Startup": 1000,
            "APP_ReadConfiguration": 1001,
            "DB_Connection_Open": 2000,
            "DB_Connection_Close": 2001,
        },
        base_path="MyApp",
    )


@pytest.fixture
def category(request: pytest.FixtureRequest) -> Iterator[logging.Logger]:
    """A fresh, isolated category logger named after the running test."""
    logger = logging.getLogger(f"tests.category.{request.node.name}")
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def _fresh_generation_cache() -> Iterator[None]:
    clear_cache()
    yield
    clear_cache()
