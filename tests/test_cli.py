"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from main import main, format_option, format_money


WEB_APP_ARGS = [
    "-t", "web_app",
    "-f", "authentication",
    "-b", "2",
    "--complexity", "medium",
    "--risk", "low",
    "--speed", "normal",
    "--discovery", "no",
    "--support", "no",
]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_args(sample_config_path):
    return ["--config", str(sample_config_path)]


class TestEstimateCommand:
    """Test estimates from the command line."""

    def test_json_output(self, runner, config_args):
        """Test that --json prints the estimate and warnings."""
        result = runner.invoke(main, config_args + WEB_APP_ARGS + ["--json"])
        assert result.exit_code == 0, result.output

        data = json.loads(result.output)
        assert data["estimate"]["days"] == 22.7
        assert data["estimate"]["low"] == 12922
        assert "paymentSchedule" in data["estimate"]
        assert data["warnings"] == []

    def test_json_warnings(self, runner, config_args):
        """Test that advisory warnings are reported without failing."""
        args = [
            "-t", "holding_page", "-f", "payment_integration",
            "--complexity", "low", "--risk", "low", "--speed", "normal",
            "--discovery", "no", "--support", "no", "--json",
        ]
        result = runner.invoke(main, config_args + args)
        assert result.exit_code == 0, result.output

        warnings = json.loads(result.output)["warnings"]
        assert warnings[0].startswith("Holding pages")
        assert "Payment integration requires authentication to be enabled." in warnings

    def test_table_output(self, runner, config_args):
        """Test the rich tables."""
        result = runner.invoke(main, config_args + WEB_APP_ARGS)
        assert result.exit_code == 0, result.output
        assert "22.7 days" in result.output
        assert "Deployment" in result.output
        assert "Monthly support" in result.output

    def test_invalid_option(self, runner, config_args):
        """Test that an unknown multiplier option exits with an error."""
        args = [a if a != "low" else "extreme" for a in WEB_APP_ARGS]
        result = runner.invoke(main, config_args + args)
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_missing_project_type(self, runner, config_args):
        result = runner.invoke(main, config_args + ["--complexity", "low"])
        assert result.exit_code == 1
        assert "ProjectType is required" in result.output


class TestConfigurationErrors:
    """Test configuration problems reported by the CLI."""

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["--config", str(tmp_path / "absent.json"), "--list-options"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_configuration(self, runner, tmp_path, pricing_config):
        pricing_config["contingency"] = 4
        path = tmp_path / "pricing.json"
        path.write_text(json.dumps(pricing_config), encoding="utf-8")

        result = runner.invoke(main, ["--config", str(path), "--list-options"])
        assert result.exit_code == 1
        assert "Invalid pricing configuration" in result.output


class TestListOptions:
    def test_lists_menu(self, runner, config_args):
        result = runner.invoke(main, config_args + ["--list-options"])
        assert result.exit_code == 0, result.output
        assert "web_app" in result.output
        assert "Multipliers" in result.output


class TestFormatting:
    @pytest.mark.parametrize("key,factor,expected", [
        ("high", 1.3, "High (+30%)"),
        ("low", 0.8, "Low (-20%)"),
        ("medium", 1.0, "Medium (+0%)"),
        ("very_high", 1.25, "Very High (+25%)"),
    ])
    def test_format_option(self, key, factor, expected):
        assert format_option(key, factor) == expected

    def test_format_money(self):
        assert format_money(12922.0).endswith("12,922")
