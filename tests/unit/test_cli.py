"""
LUNAR NEXUS Unit Tests - Command Line Interface

Run:
    pytest tests/unit/test_cli.py -v
"""

import json
import logging
import os

import pytest

from lunarnexus.cli import EXIT_OK, EXIT_USAGE, build_parser, main, parse_date


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """No config files or LUNARNEXUS_* variables from the host."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for key in list(os.environ):
        if key.startswith("LUNARNEXUS_"):
            monkeypatch.delenv(key)
    yield tmp_path
    root_logger = logging.getLogger("lunarnexus")
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()
    root_logger.filters.clear()
    logging.getLogger("lunarnexus.services.lunar").setLevel(logging.NOTSET)


# =============================================================================
# Argument Parsing
# =============================================================================


class TestParser:

    def test_parse_date(self):
        assert parse_date("2000-01-06").isoformat() == "2000-01-06"

    def test_invalid_date_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["report", "--date", "06/01/2000"])
        assert exc_info.value.code == 2

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


# =============================================================================
# Commands
# =============================================================================


class TestReportCommand:
    """Tests for `lunarnexus report`."""

    def test_json_report(self, capsys):
        code = main(["report", "--date", "2000-01-06", "--lat", "0", "--lng", "0", "--json"])
        assert code == EXIT_OK

        payload = json.loads(capsys.readouterr().out)
        assert payload["date"] == "2000-01-06"
        assert payload["phase"]["phase_index"] == 7
        assert payload["phase"]["illumination"] == 0
        assert payload["times"]["rise"] == "5:56 AM"
        assert payload["constellation"] == "Capricornus"
        assert payload["location"]["name"] is None
        assert payload["location"]["timezone"] is None

    def test_json_report_labels_configured_site(self, capsys, monkeypatch):
        monkeypatch.setenv("LUNARNEXUS_OBSERVER_NAME", "Greenwich")
        monkeypatch.setenv("LUNARNEXUS_OBSERVER_TIMEZONE", "Europe/London")
        assert main(["report", "--date", "2000-01-06", "--json"]) == EXIT_OK

        location = json.loads(capsys.readouterr().out)["location"]
        assert location["name"] == "Greenwich"
        assert location["timezone"] == "Europe/London"

    def test_text_report_uses_configured_location(self, capsys, tmp_path):
        (tmp_path / "lunarnexus.yaml").write_text(
            "observer:\n  latitude: 51.5\n  longitude: -0.13\n"
            "  timezone: Europe/London\n  name: London\n",
            encoding="utf-8",
        )
        assert main(["report", "--date", "2000-01-21"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "Location: London (51.50°, -0.13°), Europe/London" in out
        assert "Full Moon" in out
        assert "100%" in out

    def test_invalid_latitude(self, capsys):
        code = main(["report", "--date", "2000-01-06", "--lat", "95", "--lng", "0"])
        assert code == EXIT_USAGE
        assert "Latitude" in capsys.readouterr().err


class TestForecastCommand:
    """Tests for `lunarnexus forecast`."""

    def test_json_forecast(self, capsys):
        assert main(["forecast", "--date", "2000-01-05", "--days", "3", "--json"]) == EXIT_OK
        rows = json.loads(capsys.readouterr().out)
        assert [row["date"] for row in rows] == ["2000-01-06", "2000-01-07", "2000-01-08"]

    def test_days_from_config(self, capsys, monkeypatch):
        monkeypatch.setenv("LUNARNEXUS_FORECAST_DAYS", "4")
        assert main(["forecast", "--date", "2000-01-05", "--json"]) == EXIT_OK
        assert len(json.loads(capsys.readouterr().out)) == 4

    def test_text_forecast(self, capsys):
        assert main(["forecast", "--date", "2000-01-05", "--days", "2"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("Forecast after Wednesday, January 5, 2000")
        assert "New Moon" in out

    def test_debug_service_logs_engine(self, capsys):
        code = main(["--debug-service", "lunar", "forecast", "--date", "2000-01-05", "--days", "2"])
        assert code == EXIT_OK
        err = capsys.readouterr().err
        assert "Generating 2-day forecast after 2000-01-05" in err
        assert "forecast completed in" not in err

    def test_engine_quiet_by_default(self, capsys):
        assert main(["forecast", "--date", "2000-01-05", "--days", "2"]) == EXIT_OK
        assert "Generating" not in capsys.readouterr().err

    def test_zero_days_rejected(self, capsys):
        assert main(["forecast", "--days", "0"]) == EXIT_USAGE
        assert "at least one day" in capsys.readouterr().err


class TestPhasesCommand:

    def test_text(self, capsys):
        assert main(["phases"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Waxing Crescent" in out
        assert "Photography:" in out

    def test_json(self, capsys):
        assert main(["phases", "--json"]) == EXIT_OK
        phases = json.loads(capsys.readouterr().out)
        assert len(phases) == 8
        assert [p["angle"] for p in phases] == [i * 45 for i in range(8)]

    def test_single_phase(self, capsys):
        assert main(["phases", "first quarter", "--json"]) == EXIT_OK
        phases = json.loads(capsys.readouterr().out)
        assert [p["name"] for p in phases] == ["First Quarter"]

    def test_unknown_phase(self, capsys):
        assert main(["phases", "Blue Moon"]) == EXIT_USAGE
        assert "unknown phase" in capsys.readouterr().err


class TestConfigErrors:

    def test_missing_config_file(self, capsys, tmp_path):
        code = main(["--config", str(tmp_path / "missing.yaml"), "phases"])
        assert code == EXIT_USAGE
        assert "Config file not found" in capsys.readouterr().err
