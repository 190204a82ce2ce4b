"""
Tests for the mextract command line interface.
"""

import json
import re

import pytest
from typer.testing import CliRunner

from cli import app


@pytest.fixture
def runner():
    return CliRunner()


def records_from(output):
    return [json.loads(line) for line in output.splitlines() if line.startswith('{"primary_id"')]


class TestExtractCommand:
    """Tests for `mextract extract`."""

    def test_extract_directory(self, runner, tmp_path, tara_xml):
        (tmp_path / "ERS494529.xml").write_text(tara_xml.strip(), encoding="utf-8")

        result = runner.invoke(app, ["extract", str(tmp_path)])

        assert result.exit_code == 0
        (record,) = records_from(result.stdout)
        assert record["primary_id"] == "ERS494529"
        assert record["runs"] == ["ERR598950", "ERR599095"]
        assert record["depth"] == 5.0
        assert len(record["dates"]) == 1

    def test_skip_tag_option(self, runner, tmp_path, tara_xml):
        path = tmp_path / "ERS494529.xml"
        path.write_text(tara_xml.strip(), encoding="utf-8")

        result = runner.invoke(app, ["extract", str(path), "--skip-tag", "^Event"])

        (record,) = records_from(result.stdout)
        assert [d["source_tag"] for d in record["dates"]] == ["ENA-SPOT-COUNT"]

    def test_invalid_skip_tag_is_usage_error(self, runner, tmp_path, tara_xml):
        path = tmp_path / "ERS494529.xml"
        path.write_text(tara_xml.strip(), encoding="utf-8")

        result = runner.invoke(app, ["extract", str(path), "--skip-tag", "("])

        assert result.exit_code == 2
        assert not isinstance(result.exception, re.error)
        assert records_from(result.stdout) == []

    def test_ext_option_filters_directory(self, runner, tmp_path, tara_xml):
        (tmp_path / "a.xml").write_text(tara_xml.strip(), encoding="utf-8")
        (tmp_path / "b.sample").write_text(
            tara_xml.strip().replace("ERS494529", "ERS494530"), encoding="utf-8"
        )

        result = runner.invoke(app, ["extract", str(tmp_path), "--ext", "sample"])

        assert result.exit_code == 0
        assert [r["primary_id"] for r in records_from(result.stdout)] == ["ERS494530"]

    def test_failed_document_sets_exit_code(self, runner, tmp_path, tara_xml, no_id_xml):
        (tmp_path / "a.xml").write_text(tara_xml.strip(), encoding="utf-8")
        (tmp_path / "b.xml").write_text(no_id_xml.strip(), encoding="utf-8")

        result = runner.invoke(app, ["extract", str(tmp_path)])

        assert result.exit_code == 1
        assert len(records_from(result.stdout)) == 1

    def test_no_input_files(self, runner, tmp_path):
        result = runner.invoke(app, ["extract", str(tmp_path)])
        assert result.exit_code == 1

    def test_missing_path(self, runner, tmp_path):
        result = runner.invoke(app, ["extract", str(tmp_path / "missing.xml")])
        assert result.exit_code == 1


class TestClassifyCommand:
    """Tests for `mextract classify`."""

    def test_classify(self, runner):
        result = runner.invoke(app, ["classify", "Collection Date"])
        assert result.exit_code == 0
        assert result.stdout.strip().splitlines()[-1] == "date"

    def test_unclassified(self, runner):
        result = runner.invoke(app, ["classify", "Taxon ID"])
        assert result.stdout.strip().splitlines()[-1] == "unclassified"


class TestParseCommand:
    """Tests for `mextract parse`."""

    def test_date(self, runner):
        result = runner.invoke(app, ["parse", "Dec-2015", "--kind", "date"])
        assert result.exit_code == 0
        assert result.stdout.strip().splitlines()[-1] == "2015-12-01T00:00:00Z"

    def test_depth_with_unit(self, runner):
        result = runner.invoke(app, ["parse", "5", "--kind", "depth", "--unit", "cm"])
        assert result.exit_code == 0
        assert result.stdout.strip().splitlines()[-1] == "0.05"

    def test_coordinate(self, runner):
        result = runner.invoke(app, ["parse", "41º40,13.5''N 2º48'00.6''E", "--kind", "coordinate"])
        assert result.exit_code == 0
        assert result.stdout.strip().splitlines()[-1] == "(41.67042, 2.80017)"

    def test_absent(self, runner):
        result = runner.invoke(app, ["parse", "abc", "--kind", "depth"])
        assert result.exit_code == 1
        assert result.stdout.strip().splitlines()[-1] == "absent"
