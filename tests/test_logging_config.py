"""Tests for structured logging configuration."""

from __future__ import annotations

import json
import logging
import sys
from io import StringIO

import pytest

from arrowpath.logging_config import (
    ErrorFilter,
    StructuredFormatter,
    configure_logging,
    setup_dev_logging,
)


def _record(name: str = "arrowpath.paths", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="paths.py",
        lineno=42,
        msg="Rendered %d points",
        args=(3,),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestStructuredFormatter:
    """Tests for StructuredFormatter JSON output."""

    @pytest.fixture
    def formatter(self) -> StructuredFormatter:
        return StructuredFormatter()

    def test_basic_json_output(self, formatter: StructuredFormatter) -> None:
        """Output is valid JSON with the required fields."""
        data = json.loads(formatter.format(_record()))

        assert "timestamp" in data
        assert data["level"] == "INFO"
        assert data["logger"] == "arrowpath.paths"
        assert data["message"] == "Rendered 3 points"

    @pytest.mark.parametrize(
        ("logger_name", "category"),
        [
            ("arrowpath.steps", "geometry"),
            ("arrowpath.paths", "geometry"),
            ("arrowpath.arrows", "geometry"),
            ("arrowpath.rendering", "render"),
            ("arrowpath.canvas", "render"),
            ("arrowpath.cli", "cli"),
            ("arrowpath.config", "system"),
            ("unknown.logger", "system"),
        ],
    )
    def test_category_detection(
        self, formatter: StructuredFormatter, logger_name: str, category: str
    ) -> None:
        data = json.loads(formatter.format(_record(logger_name)))
        assert data["category"] == category

    def test_extra_fields_serializable(self, formatter: StructuredFormatter) -> None:
        record = _record()
        record.arrow_key = 7  # type: ignore[attr-defined]
        data = json.loads(formatter.format(record))
        assert data["extra"]["arrow_key"] == 7

    def test_extra_fields_non_serializable(self, formatter: StructuredFormatter) -> None:
        """Non-serializable extras are stringified."""
        record = _record()
        record.shape = object()  # type: ignore[attr-defined]
        data = json.loads(formatter.format(record))
        assert data["extra"]["shape"].startswith("<object object")

    def test_no_extra_key_without_extras(self, formatter: StructuredFormatter) -> None:
        data = json.loads(formatter.format(_record()))
        assert "extra" not in data

    def test_exception_included(self, formatter: StructuredFormatter) -> None:
        try:
            raise ValueError("odd coordinate list")
        except ValueError:
            record = logging.LogRecord(
                name="arrowpath.paths",
                level=logging.ERROR,
                pathname="paths.py",
                lineno=1,
                msg="Render failed",
                args=(),
                exc_info=sys.exc_info(),
            )
        data = json.loads(formatter.format(record))
        assert "ValueError: odd coordinate list" in data["exception"]


class TestErrorFilter:
    def test_allows_errors(self) -> None:
        assert ErrorFilter().filter(_record(level=logging.ERROR))
        assert ErrorFilter().filter(_record(level=logging.CRITICAL))

    def test_blocks_lower_levels(self) -> None:
        assert not ErrorFilter().filter(_record(level=logging.WARNING))
        assert not ErrorFilter().filter(_record(level=logging.INFO))


class TestConfigureLogging:
    def test_json_to_stream(self) -> None:
        stream = StringIO()
        configure_logging(json_format=True, log_level=logging.DEBUG, stream=stream)

        logging.getLogger("arrowpath.steps").debug("planned")

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "planned"
        assert data["category"] == "geometry"

    def test_plain_format(self) -> None:
        stream = StringIO()
        configure_logging(json_format=False, stream=stream)

        logging.getLogger("arrowpath.cli").info("hello")

        assert "[arrowpath.cli] hello" in stream.getvalue()

    def test_level_respected(self) -> None:
        stream = StringIO()
        configure_logging(log_level=logging.WARNING, stream=stream)

        logging.getLogger("arrowpath.paths").info("hidden")

        assert stream.getvalue() == ""

    def test_replaces_existing_handlers(self) -> None:
        configure_logging(stream=StringIO())
        configure_logging(stream=StringIO())
        assert len(logging.getLogger().handlers) == 1

    def test_file_handlers(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "app.log"
        error_file = tmp_path / "logs" / "error.log"
        configure_logging(
            stream=StringIO(), log_file=str(log_file), error_log_file=str(error_file)
        )

        logger = logging.getLogger("arrowpath.rendering")
        logger.info("info line")
        logger.error("error line")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "info line" in log_file.read_text()
        errors = error_file.read_text()
        assert "error line" in errors
        assert "info line" not in errors

        for handler in logging.getLogger().handlers[:]:
            handler.close()

    def test_pil_silenced(self) -> None:
        configure_logging(stream=StringIO())
        assert logging.getLogger("PIL").level == logging.WARNING

    def test_dev_logging_verbose(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOG_JSON", raising=False)
        setup_dev_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_dev_logging_quiet(self) -> None:
        setup_dev_logging()
        assert logging.getLogger().level == logging.WARNING
