"""Tests for logger setup."""

from datetime import date
from pathlib import Path

import pytest
from loguru import logger

from swimstats.core.logger import setup_logger
from swimstats.domain.inputs import SwimmerInput
from swimstats.swimmer.profile import build_swimmer


@pytest.fixture
def host_sink():
    """A handler installed by the host application, removed after the test."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("swimstats")


def _build_swimmer() -> None:
    build_swimmer(
        SwimmerInput(name="Maya Chen", birth_date="2012-03-15", gender="female"),
        today=date(2026, 6, 1),
    )


def test_silent_until_enabled(host_sink: list[str]) -> None:
    """Test that importing the package does not emit records."""
    logger.disable("swimstats")
    _build_swimmer()
    assert not any("Swimmer built" in message for message in host_sink)

    setup_logger(level="DEBUG", console=False)
    _build_swimmer()
    assert any("Swimmer built" in message for message in host_sink)


def test_host_handlers_survive_setup(host_sink: list[str]) -> None:
    setup_logger(level="WARNING", console=False)
    setup_logger(level="WARNING", console=False)
    logger.info("host message")
    assert any("host message" in message for message in host_sink)


def test_file_handler_receives_structured_records(tmp_path: Path, host_sink: list[str]) -> None:
    log_file = tmp_path / "logs" / "swimstats.log"
    setup_logger(level="DEBUG", log_file=str(log_file), console=False)
    try:
        _build_swimmer()
        logger.complete()
        content = log_file.read_text()
        assert "Swimmer built" in content
        assert "threshold_percent" in content
    finally:
        setup_logger(level="INFO", console=False)


def test_level_filters_console(capsys: pytest.CaptureFixture[str], host_sink: list[str]) -> None:
    setup_logger(level="WARNING")
    try:
        logger.info("quiet")
        logger.warning("loud")
        err = capsys.readouterr().err
        assert "loud" in err
        assert "quiet" not in err
    finally:
        setup_logger(level="INFO", console=False)
