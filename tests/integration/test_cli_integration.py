"""
Integration tests for the ordered-form CLI
"""

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner
from ordered_form import __version__
from ordered_form.cli import cli


@pytest.fixture
def runner(tmp_path, monkeypatch) -> CliRunner:
    """CLI runner isolated from user and project configuration"""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    monkeypatch.chdir(tmp_path)
    for key in ["ORDERED_FORM_VERBOSE", "ORDERED_FORM_QUIET", "ORDERED_FORM_OUTPUT_FORMAT"]:
        monkeypatch.delenv(key, raising=False)
    return CliRunner()


class TestOrderCli:
    """Test the order subcommand end to end"""

    def test_version(self, runner):
        """Test --version"""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_order_text(self, runner, sample_items_file, sample_order):
        """Test printing the resolved order"""
        result = runner.invoke(cli, ["order", str(sample_items_file)])

        assert result.exit_code == 0
        assert result.output.splitlines() == sample_order

    def test_order_json(self, runner, sample_items_file, sample_order):
        """Test JSON output"""
        result = runner.invoke(cli, ["order", str(sample_items_file), "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == sample_order

    def test_order_to_file(self, runner, sample_items_file, sample_order, tmp_path):
        """Test writing the order to a file"""
        output = tmp_path / "order.yaml"

        result = runner.invoke(
            cli, ["order", str(sample_items_file), "-f", "yaml", "--positions", "-o", str(output)]
        )

        assert result.exit_code == 0
        assert "written to" in result.output
        records = yaml.safe_load(output.read_text())
        assert [record["name"] for record in records] == sample_order

    def test_order_configured_format(self, runner, sample_items_file, sample_order, tmp_path):
        """Test the output format coming from a config file"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.safe_dump({"output": {"format": "json"}}))

        result = runner.invoke(cli, ["-c", str(config_file), "order", str(sample_items_file)])

        assert result.exit_code == 0
        assert json.loads(result.output) == sample_order

    def test_order_invalid_configuration(self, runner, circular_items_file):
        """Test a circular configuration fails without printing an order"""
        result = runner.invoke(cli, ["order", str(circular_items_file)])

        assert result.exit_code == 1
        assert '"b" => "a" => "b"' in result.output

    def test_order_missing_target(self, runner, tmp_path):
        """Test a position pointing at an unknown sibling"""
        path = tmp_path / "form.json"
        path.write_text(json.dumps({"p": {"before": "q"}}))

        result = runner.invoke(cli, ["order", str(path)])

        assert result.exit_code == 1
        assert 'the form "q" does not exist' in result.output

    def test_invalid_config_rejected(self, runner, sample_items_file, tmp_path):
        """Test an invalid configuration stops the CLI"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.safe_dump({"output": {"format": "xml"}}))

        result = runner.invoke(cli, ["-c", str(config_file), "order", str(sample_items_file)])

        assert result.exit_code == 2
        assert "Invalid output format" in result.output


class TestCheckCli:
    """Test the check subcommand end to end"""

    def test_check_success(self, runner, sample_items_file):
        """Test checking a valid document"""
        result = runner.invoke(cli, ["check", str(sample_items_file)])

        assert result.exit_code == 0
        assert "6 items ordered" in result.output

    def test_check_quiet(self, runner, sample_items_file):
        """Test quiet checks print nothing on success"""
        result = runner.invoke(cli, ["--quiet", "check", str(sample_items_file)])

        assert result.exit_code == 0
        assert result.output == ""

    def test_check_symmetric_conflict(self, runner, tmp_path):
        """Test checking a document with a symmetric conflict"""
        path = tmp_path / "form.yaml"
        path.write_text(
            yaml.safe_dump({"a": {"before": "b"}, "b": {"after": "a"}}, sort_keys=False)
        )

        result = runner.invoke(cli, ["check", str(path)])

        assert result.exit_code == 1
        assert "symmetrical" in result.output
