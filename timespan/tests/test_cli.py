"""Tests for the timespan command line tool."""

import json
import logging

import pytest

from timespan.cli import EXIT_OK, EXIT_PARSE_ERROR, main
from timespan.logging_setup import LOGGER_NAME


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test with default configuration and no leftover log handlers."""
    for name in ("TIMESPAN_LOG_LEVEL", "TIMESPAN_LOG_FILE", "TIMESPAN_OUTPUT_FORMAT", "TIMESPAN_UTC"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestParseCommand:
    def test_prints_canonical_form(self, capsys):
        assert main(["parse", "2Y2M2W2h30m", "90m"]) == EXIT_OK
        out = capsys.readouterr().out.splitlines()
        assert out == ["2Y2M14D2h30m0s", "1h30m0s"]

    def test_signed_input_after_separator(self, capsys):
        assert main(["parse", "--", "-1Y2M"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "-1Y-2M"

    def test_json_output(self, capsys):
        assert main(["parse", "--json", "4W1d"]) == EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert payload == {
            "input": "4W1d",
            "timespan": "29D",
            "years": 0,
            "months": 0,
            "days": 29,
            "duration": "0s",
        }

    def test_json_output_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("TIMESPAN_OUTPUT_FORMAT", "json")
        assert main(["parse", "1Y"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out)["years"] == 1

    def test_parse_error_exit_status(self, capsys):
        assert main(["parse", "3W2W"]) == EXIT_PARSE_ERROR
        err = capsys.readouterr().err
        assert "parsing Timespan '3W2W'" in err
        assert "restated" in err


class TestApplyCommand:
    def test_apply_from_reference_time(self, capsys):
        assert main(["apply", "2M2W2h30m", "--from", "2014-03-03T17:00:00"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "2014-05-17T19:30:00"

    def test_apply_json(self, capsys):
        assert main(["apply", "--json", "1D", "--from", "2020-01-01T00:00:00+00:00"]) == EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert payload["result"] == "2020-01-02T00:00:00+00:00"
        assert payload["timespan"] == "1D"

    def test_apply_defaults_to_now(self, capsys):
        assert main(["apply", "0Y"]) == EXIT_OK
        assert capsys.readouterr().out.strip().endswith("+00:00")

    def test_apply_parse_error(self, capsys):
        assert main(["apply", "Y"]) == EXIT_PARSE_ERROR
        assert "missing coefficient" in capsys.readouterr().err


class TestAddCommand:
    def test_add(self, capsys):
        assert main(["add", "2M14D2h30m", "1Y1M10D3h30m"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "1Y3M24D6h0m0s"

    def test_add_json(self, capsys):
        assert main(["add", "--json", "8M", "9M"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out)["months"] == 17
