# tests/utils/test_log.py

import io
import json
import logging
from typing import Iterator

import pytest

from physical_texture import write_texture
from physical_texture.utils import setup_logging
from tests.test_utils import make_int_texture


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    logger = logging.getLogger("physical_texture")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


def test_human_format_reports_writes() -> None:
    stream = io.StringIO()
    setup_logging("DEBUG", stream=stream)
    write_texture(make_int_texture(), io.StringIO())

    line = stream.getvalue().strip().splitlines()[-1]
    assert "| DEBUG    | physical_texture.storage.csv_format |" in line
    assert "Wrote 2x2 texture to <stream>" in line


def test_json_format() -> None:
    stream = io.StringIO()
    setup_logging("DEBUG", json=True, stream=stream)
    write_texture(make_int_texture(), io.StringIO())

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["lvl"] == "DEBUG"
    assert record["name"] == "physical_texture.storage.csv_format"
    assert record["msg"] == "Wrote 2x2 texture to <stream>"


def test_level_filters_debug() -> None:
    stream = io.StringIO()
    setup_logging("WARNING", stream=stream)
    write_texture(make_int_texture(), io.StringIO())
    assert stream.getvalue() == ""


def test_setup_is_idempotent() -> None:
    setup_logging("INFO", stream=io.StringIO())
    setup_logging("DEBUG", stream=io.StringIO())
    logger = logging.getLogger("physical_texture")
    named = [h for h in logger.handlers if h.get_name() == "physical_texture"]
    assert len(named) == 1
    assert logger.level == logging.DEBUG


def test_unknown_level_raises() -> None:
    with pytest.raises(ValueError):
        setup_logging("LOUD")
