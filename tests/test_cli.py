"""Tests for the sqllint command line."""

import json

import pytest
from typer.testing import CliRunner

from sqllint.cli import app, discover_files


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def checks(tmp_path):
    path = tmp_path / "checks.json"
    path.write_text(json.dumps({"boolean_field": {"enabled": True}}))
    return str(path)


@pytest.fixture
def sql_dir(tmp_path):
    root = tmp_path / "sql"
    (root / "nested").mkdir(parents=True)
    (root / "good.sql").write_text("CREATE TABLE t (id int, is_deleted tinyint(1));\n")
    (root / "nested" / "bad.sql").write_text("CREATE TABLE t (\n  id int,\n  enabled bit\n);\n")
    (root / "notes.txt").write_text("not sql")
    return root


def test_discover_files(sql_dir):
    files = discover_files([str(sql_dir)])
    assert [f.rsplit("/", 1)[-1] for f in files] == ["good.sql", "bad.sql"]


def test_reports_violations(runner, sql_dir, checks):
    result = runner.invoke(app, [str(sql_dir), "--checks", checks, "--jobs", "2"])
    assert result.exit_code == 1
    assert "bad.sql:3: [boolean_field]" in result.output
    assert "2 file(s) checked, 1 problem(s) found." in result.output


def test_clean_file_exits_zero(runner, sql_dir, checks):
    result = runner.invoke(app, [str(sql_dir / "good.sql"), "--checks", checks])
    assert result.exit_code == 0
    assert "1 file(s) checked, 0 problem(s) found." in result.output


def test_json_output(runner, sql_dir, checks):
    bad = str(sql_dir / "nested" / "bad.sql")
    result = runner.invoke(app, [bad, "--checks", checks, "--json"])
    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload[bad][0]["rule_id"] == "boolean_field"
    assert payload[bad][0]["line"] == 3


def test_no_files(runner, tmp_path):
    result = runner.invoke(app, [str(tmp_path)])
    assert result.exit_code == 2
