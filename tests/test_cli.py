"""End-to-end tests for the nichefinder-intel CLI (typer CliRunner)."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from nichefinder_intel.cli import app

runner = CliRunner()

_REPO_DESCRIPTIONS = Path(__file__).resolve().parents[1] / "config" / "integration_descriptions.json"

_OPPORTUNITIES = {
    "opportunities": [
        {
            "id": "z2m",
            "name": "Zigbee2MQTT",
            "category": "zigbee2mqtt",
            "score": 78.4,
            "scoring_details": {
                "demand": 82.0, "feasibility": 75.0, "competition": 30.0,
                "trend": 71.0, "composite": 78.4,
            },
            "data_sources": [
                {"name": "GitHub", "source_type": "git_hub",
                 "metadata": {"stars": 1200, "open_issues": 25}},
                {"name": "YouTube", "source_type": {"other": "YouTube"}, "data_points": 2},
            ],
            "discovered_at": "2026-10-18T08:05:00Z",
        },
        {
            "id": "tiny",
            "name": "Tiny Sensor",
            "category": "sensor",
            "score": 30.0,
            "scoring_details": {"demand": 20.0, "feasibility": 40.0, "competition": 80.0,
                                "trend": 10.0, "composite": 30.0},
        },
    ]
}


@pytest.fixture(autouse=True)
def _reset_root_logger():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("NICHEFINDER_OPPORTUNITIES_FILE", "NICHEFINDER_SUMMARY_MODE",
                 "NICHEFINDER_LOG_LEVEL", "NICHEFINDER_DEBUG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workspace(tmp_path: Path) -> dict[str, str]:
    """A config plus opportunities file, all under ``tmp_path``."""
    opps = tmp_path / "opportunities.json"
    opps.write_text(json.dumps(_OPPORTUNITIES), encoding="utf-8")
    cfg = tmp_path / "intel.toml"
    cfg.write_text(
        "[data]\n"
        f'opportunities_file = "{opps.as_posix()}"\n'
        f'descriptions_file = "{_REPO_DESCRIPTIONS.as_posix()}"\n'
        f'output_dir = "{(tmp_path / "out").as_posix()}"\n'
        "[logging]\n"
        'level = "WARNING"\n'
        'log_file = ""\n',
        encoding="utf-8",
    )
    return {"config": str(cfg), "input": str(opps), "root": str(tmp_path)}


class TestValidateConfig:
    def test_ok(self, workspace):
        result = runner.invoke(app, ["validate-config", "--config", workspace["config"]])
        assert result.exit_code == 0, result.output
        assert "[OK] Config valid." in result.output
        assert "Summary mode:       catalog" in result.output

    def test_full_dump(self, workspace):
        result = runner.invoke(app, ["validate-config", "--config", workspace["config"], "--full"])
        assert result.exit_code == 0
        assert '"top_cards": 9' in result.output

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["validate-config", "--config", str(tmp_path / "nope.toml")])
        assert result.exit_code == 1
        assert "[ERROR]" in result.output

    def test_invalid_config(self, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[intelligence]\ntop_cards = 0\n", encoding="utf-8")
        result = runner.invoke(app, ["validate-config", "--config", str(bad)])
        assert result.exit_code == 1
        assert "Config validation failed" in result.output


class TestCommandCenter:
    def test_renders_feed_and_cards(self, workspace):
        result = runner.invoke(app, ["command-center", "--config", workspace["config"]])
        assert result.exit_code == 0, result.output
        assert "Total opportunities:   2" in result.output
        assert "Highest upside:        Zigbee2MQTT" in result.output
        assert "🔥 Zigbee2MQTT shows strong demand" in result.output

    def test_missing_input(self, workspace, tmp_path):
        result = runner.invoke(
            app,
            ["command-center", "--config", workspace["config"],
             "--input", str(tmp_path / "missing.json")],
        )
        assert result.exit_code == 1
        assert "Opportunities file not found" in result.output

    def test_malformed_input(self, workspace, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text('{"items": []}', encoding="utf-8")
        result = runner.invoke(
            app, ["command-center", "--config", workspace["config"], "--input", str(bad)]
        )
        assert result.exit_code == 1
        assert "Could not parse" in result.output


class TestExplain:
    def test_brief(self, workspace):
        result = runner.invoke(app, ["explain", "z2m", "--config", workspace["config"]])
        assert result.exit_code == 0, result.output
        assert "=== Zigbee2MQTT ===" in result.output
        assert "[BUILDER QUESTIONS]" in result.output
        assert "High maintenance burden" in result.output

    def test_unknown_id(self, workspace):
        result = runner.invoke(app, ["explain", "nope", "--config", workspace["config"]])
        assert result.exit_code == 1
        assert "No opportunity with id 'nope'" in result.output


class TestReport:
    def test_text_to_stdout(self, workspace):
        result = runner.invoke(app, ["report", "--config", workspace["config"]])
        assert result.exit_code == 0
        assert "NICHEFINDER ANALYSIS REPORT" in result.output
        assert "2. Tiny Sensor (Score: 30.0)" in result.output

    def test_markdown_to_file(self, workspace, tmp_path):
        out = tmp_path / "reports" / "report.md"
        result = runner.invoke(
            app,
            ["report", "--config", workspace["config"], "--format", "markdown",
             "--output", str(out)],
        )
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8").startswith("# NicheFinder Analysis Report")

    def test_json_keeps_wire_keys(self, workspace, tmp_path):
        out = tmp_path / "report.json"
        result = runner.invoke(
            app,
            ["report", "--config", workspace["config"], "--format", "json", "--output", str(out)],
        )
        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert [o["id"] for o in data["opportunities"]] == ["z2m", "tiny"]
        assert "scoring_details" in data["opportunities"][0]

    def test_unknown_format(self, workspace):
        result = runner.invoke(app, ["report", "--config", workspace["config"], "--format", "pdf"])
        assert result.exit_code == 1


class TestExport:
    def test_writes_json_and_csv(self, workspace):
        result = runner.invoke(app, ["export", "--config", workspace["config"]])
        assert result.exit_code == 0, result.output
        out_dir = Path(workspace["root"]) / "out"
        json_files = list(out_dir.glob("intelligence_*.json"))
        csv_files = list(out_dir.glob("opportunities_*.csv"))
        assert len(json_files) == 1
        assert len(csv_files) == 1
        payload = json.loads(json_files[0].read_text(encoding="utf-8"))
        assert payload["kpis"]["total_opportunities"] == 2
        assert [b["opportunity_id"] for b in payload["opportunities"]] == ["z2m", "tiny"]
        assert "[OK] Exported 2 opportunit(ies)." in result.output
