"""Pytest fixtures for romanizer tests."""

import json
import logging
from pathlib import Path

import pytest

from romanizer.models import Schema
from romanizer.utils.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_sentence():
    """Reference sentence covering every letter of the Russian alphabet."""
    return "Юлия, съешь ещё этих мягких французских булок из Йошкар-Олы, да выпей алтайского чаю"


@pytest.fixture
def custom_schema():
    """Small hand-built schema with every kind of table."""
    return Schema(
        name="custom",
        mapping={"а": "a", "б": "b", "в": "v", "е": "e", "ж": "zh", "и": "i", "й": "j", "к": "k"},
        prev_mapping={"е": "ye", "ае": "ye"},
        next_mapping={"бв": "B"},
        ending_mapping={"ий": "iy"},
        description="Test schema",
        samples=(("жаба", "zhaba"),),
    )


@pytest.fixture
def test_logger() -> logging.Logger:
    """Create a test logger."""
    logger = logging.getLogger("romanizer_test")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def definition_data():
    """Minimal valid definition file content."""
    return {
        "name": "wikipedia",
        "description": "Reduced test definition",
        "url": None,
        "mapping": {"а": "a", "б": "b", "ж": "zh"},
        "samples": [["жаба", "zhaba"]],
    }


@pytest.fixture
def schema_dir(tmp_path: Path, definition_data) -> Path:
    """Temporary data directory holding one definition under a bundled name."""
    directory = tmp_path / "schemas"
    directory.mkdir()
    with (directory / "wikipedia.json").open("w", encoding="utf-8") as f:
        json.dump(definition_data, f, ensure_ascii=False)
    return directory
