"""Tests for the command line interface."""
import json

import pytest
from click.testing import CliRunner

from translation_bridge.cli.main import cli

BUTTON_HTML = '<a class="btn btn-primary" href="/x">Go</a>'


@pytest.fixture
def runner():
    return CliRunner()


class TestTranslateCommand:
    """Test the translate command."""

    def test_prints_output(self, runner, tmp_path):
        """Test output goes to stdout without --output."""
        source = tmp_path / "page.html"
        source.write_text("<p>Hello</p>", encoding="utf-8")

        result = runner.invoke(cli, ["translate", "bootstrap", "divi", str(source)])

        assert result.exit_code == 0
        assert "[et_pb_text]Hello[/et_pb_text]" in result.output

    def test_writes_output_file(self, runner, tmp_path):
        """Test --output writes the translation to disk."""
        source = tmp_path / "page.html"
        source.write_text(BUTTON_HTML, encoding="utf-8")
        target = tmp_path / "out" / "page.json"

        result = runner.invoke(cli, ["translate", "bootstrap", "elementor", str(source), "-o", str(target)])

        assert result.exit_code == 0
        assert "1/1 components" in result.output
        widget = json.loads(target.read_text(encoding="utf-8"))[0]["elements"][0]["elements"][0]
        assert widget["widgetType"] == "button"

    def test_json_source_is_decoded(self, runner, tmp_path):
        """Test JSON builder files are read as data."""
        source = tmp_path / "page.json"
        source.write_text(json.dumps([{
            "id": "w1",
            "elType": "widget",
            "widgetType": "heading",
            "settings": {"title": "Hello", "header_size": "h3"},
            "elements": [],
        }]), encoding="utf-8")

        result = runner.invoke(cli, ["translate", "elementor", "gutenberg", str(source), "--no-cache"])

        assert result.exit_code == 0
        assert "Hello</h3>" in result.output

    def test_failure_exits_non_zero(self, runner, tmp_path):
        """Test a failed translation exits with status 1."""
        source = tmp_path / "page.html"
        source.write_text(BUTTON_HTML, encoding="utf-8")

        result = runner.invoke(cli, ["translate", "bootstrap", "bootstrap", str(source)])

        assert result.exit_code == 1
        assert "Translation failed" in result.output


class TestBatchCommand:
    """Test the batch command."""

    def test_batch_with_report(self, runner, tmp_path):
        """Test progress lines, summary and the JSON report."""
        pages = tmp_path / "pages"
        pages.mkdir()
        (pages / "a.html").write_text("<p>One</p>", encoding="utf-8")
        (pages / "b.html").write_text("just text", encoding="utf-8")
        report = tmp_path / "report.json"

        result = runner.invoke(cli, ["batch", "bootstrap", "divi", str(pages), "--report", str(report)])

        assert result.exit_code == 0
        assert "[1/2] a.html" in result.output
        assert "[2/2] b.html" in result.output
        assert "✓ a.html: 1 components" in result.output
        assert "✗ b.html:" in result.output
        assert "1/2 files translated" in result.output
        assert "Report saved to" in result.output

        metadata = json.loads(report.read_text(encoding="utf-8"))["metadata"]
        assert metadata["successful_items"] == 1
        assert metadata["failed_items"] == 1

    def test_empty_directory(self, runner, tmp_path):
        """Test an empty directory is reported."""
        result = runner.invoke(cli, ["batch", "bootstrap", "divi", str(tmp_path)])

        assert result.exit_code == 0
        assert "No files found" in result.output


def test_frameworks_command(runner):
    """Test the framework listing shows aliases."""
    result = runner.invoke(cli, ["frameworks"])

    assert result.exit_code == 0
    assert "• bootstrap" in result.output
    assert "• beaver-builder (beaver, beaverbuilder)" in result.output
