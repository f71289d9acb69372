"""
Tests for component_picker/cli.py via typer's CliRunner.

Covers:
  - recommend: cards, JSON output, answer parsing, --write reports
  - recommend: unknown severity / filter / option exit with code 1
  - list-filters, show-matrix, show-component
  - validate-catalog on the built-in catalog and a custom TOML catalog
  - validate-config
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from component_picker.cli import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(
        f'[output]\nrecommendations_dir = "{(tmp_path / "reports").as_posix()}"\n'
        '[logging]\nlevel = "WARNING"\n',
        encoding="utf-8",
    )
    return path


def _invoke(*args: str):
    return runner.invoke(app, list(args))


class TestRecommend:
    def test_cards(self, config_file):
        result = _invoke("recommend", "-s", "minor", "-t", "indicator", "--config", str(config_file))
        assert result.exit_code == 0, result.output
        assert "Perfect matches (1)" in result.output
        assert "Status light" in result.output

    def test_incomplete(self, config_file):
        result = _invoke("recommend", "-s", "minor", "--config", str(config_file))
        assert result.exit_code == 0
        assert "Get started" in result.output

    def test_json_with_answers(self, config_file):
        result = _invoke(
            "recommend", "-s", "major", "-t", "validation",
            "-a", "trigger=user action",
            "-a", "Does it require user action?=Just informative",
            "--json", "--config", str(config_file),
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["matches"] == []
        assert payload["alternatives"][0]["name"] == "Inline field error"
        assert payload["alternatives"][0]["score"] == 50
        assert payload["filter_answers"]["Who triggers the message?"] == "User action"

    def test_empty_option_clears_answer(self, config_file):
        result = _invoke(
            "recommend", "-s", "major", "-t", "validation",
            "-a", "action=Just informative", "-a", "action=",
            "--json", "--config", str(config_file),
        )
        payload = json.loads(result.output)
        assert payload["matches"][0]["name"] == "Inline field error"

    def test_write_reports(self, config_file, tmp_path):
        result = _invoke(
            "recommend", "-s", "minor", "-t", "notification", "--write",
            "--config", str(config_file),
        )
        assert result.exit_code == 0, result.output
        written = sorted(p.suffix for p in (tmp_path / "reports").iterdir())
        assert written == [".csv", ".json"]

    def test_unknown_severity(self, config_file):
        result = _invoke("recommend", "-s", "catastrophic", "-t", "indicator", "--config", str(config_file))
        assert result.exit_code == 1
        assert "Unknown severity" in result.output

    def test_unknown_filter(self, config_file):
        result = _invoke(
            "recommend", "-s", "minor", "-t", "indicator", "-a", "colour=red",
            "--config", str(config_file),
        )
        assert result.exit_code == 1
        assert "Unknown filter 'colour'" in result.output

    def test_invalid_option(self, config_file):
        result = _invoke(
            "recommend", "-s", "minor", "-t", "indicator", "-a", "trigger=Robot",
            "--config", str(config_file),
        )
        assert result.exit_code == 1
        assert "is not an option" in result.output

    def test_answer_without_equals(self, config_file):
        result = _invoke(
            "recommend", "-s", "minor", "-t", "indicator", "-a", "trigger",
            "--config", str(config_file),
        )
        assert result.exit_code == 1
        assert "KEY=OPTION" in result.output

    def test_missing_catalog(self, config_file, tmp_path):
        result = _invoke(
            "recommend", "-s", "minor", "-t", "indicator",
            "--catalog", str(tmp_path / "none.toml"), "--config", str(config_file),
        )
        assert result.exit_code == 1
        assert "Catalog file not found" in result.output

    def test_catalog_missing_description(self, config_file, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text('[severities.critical]\nlabel = "x"\n', encoding="utf-8")
        result = _invoke(
            "validate-catalog", "--catalog", str(path), "--config", str(config_file),
        )
        assert result.exit_code == 1
        assert not isinstance(result.exception, KeyError)
        assert "[ERROR] Catalog" in result.output
        assert "description" in result.output


class TestReferenceCommands:
    def test_list_filters(self, config_file):
        result = _invoke("list-filters", "--config", str(config_file))
        assert result.exit_code == 0
        assert "[placement] Where should it appear?" in result.output

    def test_show_matrix(self, config_file):
        result = _invoke("show-matrix", "--config", str(config_file))
        assert result.exit_code == 0
        assert "Eligibility matrix" in result.output
        assert "Helpful context, no action needed" in result.output

    def test_show_component_case_insensitive(self, config_file):
        result = _invoke("show-component", "status light", "--config", str(config_file))
        assert result.exit_code == 0
        assert "=== Status light ===" in result.output

    def test_show_component_unknown(self, config_file):
        result = _invoke("show-component", "Snackbar", "--config", str(config_file))
        assert result.exit_code == 1


class TestValidate:
    def test_builtin_catalog_valid(self, config_file):
        result = _invoke("validate-catalog", "--strict", "--config", str(config_file))
        assert result.exit_code == 0, result.output
        assert "[OK] Catalog valid (0 warning(s))." in result.output

    def test_custom_catalog_warnings_fail_strict(self, config_file, catalog_toml):
        ok = _invoke("validate-catalog", "--catalog", str(catalog_toml), "--config", str(config_file))
        assert ok.exit_code == 0
        assert "undocumented" in ok.output
        strict = _invoke(
            "validate-catalog", "--catalog", str(catalog_toml), "--strict",
            "--config", str(config_file),
        )
        assert strict.exit_code == 1

    def test_validate_config(self, config_file):
        result = _invoke("validate-config", "--config", str(config_file), "--full")
        assert result.exit_code == 0
        assert "(built-in)" in result.output
        assert "[OK] Config valid." in result.output

    def test_validate_config_missing(self, tmp_path):
        result = _invoke("validate-config", "--config", str(tmp_path / "nope.toml"))
        assert result.exit_code == 1
