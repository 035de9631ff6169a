"""Pytest configuration and fixtures."""

import pytest
from loguru import logger

from docmeta.metadata import Metadata, Property, ValueType


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep DOCMETA_* settings from the outer environment out of tests."""
    for name in ("DOCMETA_CONFIG", "DOCMETA_LOG_LEVEL", "DOCMETA_INPUT_ENCODING"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop any sinks a test installed (the CLI replaces them)."""
    yield
    logger.remove()


@pytest.fixture
def log_messages() -> list[str]:
    """Capture loguru records at DEBUG and above."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def metadata() -> Metadata:
    """Provide an empty Metadata container."""
    return Metadata()


@pytest.fixture
def text_prop() -> Property:
    return Property.text("title")


@pytest.fixture
def int_prop() -> Property:
    return Property.integer("Page-Count")


@pytest.fixture
def date_prop() -> Property:
    return Property.date("Creation-Date")


@pytest.fixture
def multi_int_prop() -> Property:
    return Property.multi_valued("tiff:BitsPerSample", ValueType.INTEGER)
