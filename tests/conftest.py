# tests/conftest.py
from __future__ import annotations

import pytest

from trackmeta_parser.conf import ParserConfig
from trackmeta_parser.parser import TrackMetaParser


@pytest.fixture(scope="session")
def config() -> ParserConfig:
    """Default parser config for all tests."""
    return ParserConfig()


@pytest.fixture(scope="session")
def parser(config: ParserConfig) -> TrackMetaParser:
    """Parser instance for all tests."""
    return TrackMetaParser(config=config)
