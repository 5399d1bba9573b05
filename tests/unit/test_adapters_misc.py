"""Tests for the logger, clock and output adapters."""

import logging
from datetime import UTC
from pathlib import Path

import pytest

from localcache.adapters import ActionsOutputAdapter, StdLoggerAdapter, UtcClockAdapter


class TestStdLoggerAdapter:
    def test_renders_fields(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = StdLoggerAdapter(name="localcache.test.fields", level="DEBUG")
        logger.logger.propagate = True

        with caplog.at_level(logging.DEBUG, logger="localcache.test.fields"):
            logger.info("Found exact match cache", key="k1", skipped=None)

        assert caplog.messages == ["Found exact match cache key=k1"]

    def test_log_operation(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = StdLoggerAdapter(name="localcache.test.operation")
        logger.logger.propagate = True

        with caplog.at_level(logging.INFO, logger="localcache.test.operation"):
            logger.log_operation(
                op="restore", key="k1", durations={"total": 1.23456}, cache_hit=True
            )

        assert caplog.messages == [
            "Operation complete op=restore key=k1 cache_hit=True total_s=1.235"
        ]

    def test_level_filtering(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = StdLoggerAdapter(name="localcache.test.level", level="WARNING")
        logger.logger.propagate = True

        with caplog.at_level(logging.DEBUG):
            logger.info("hidden")
            logger.warning("shown")

        assert caplog.messages == ["shown"]


class TestUtcClockAdapter:
    def test_now_is_utc(self) -> None:
        assert UtcClockAdapter().now().tzinfo is UTC


def parse_output_file(path: Path) -> dict[str, str]:
    """Read an output file the way the runner does."""
    values: dict[str, str] = {}
    lines = iter(path.read_text(encoding="utf-8").splitlines())
    for line in lines:
        if "<<" in line:
            name, delimiter = line.split("<<", 1)
            body = []
            for body_line in lines:
                if body_line == delimiter:
                    break
                body.append(body_line)
            values[name] = "\n".join(body)
        else:
            name, value = line.split("=", 1)
            values[name] = value
    return values


class TestActionsOutputAdapter:
    def test_appends_to_output_file(self, tmp_path: Path) -> None:
        output = tmp_path / "github_output"
        output.write_text("existing=1\n")
        adapter = ActionsOutputAdapter(output)

        adapter.set_output("cache-hit", "true")
        adapter.set_output("cache-primary-key", "k1")

        assert output.read_text().startswith("existing=1\n")
        assert parse_output_file(output) == {
            "existing": "1",
            "cache-hit": "true",
            "cache-primary-key": "k1",
        }

    def test_multiline_value_cannot_inject_outputs(self, tmp_path: Path) -> None:
        output = tmp_path / "github_output"
        adapter = ActionsOutputAdapter(output)

        adapter.set_output("cache-primary-key", "k1\ncache-hit=true")
        adapter.set_output("cache-hit", "false")

        assert parse_output_file(output) == {
            "cache-primary-key": "k1\ncache-hit=true",
            "cache-hit": "false",
        }

    def test_echoes_without_output_file(self, capsys: pytest.CaptureFixture[str]) -> None:
        ActionsOutputAdapter().set_output("cache-hit", "false")

        assert capsys.readouterr().out == "cache-hit=false\n"
