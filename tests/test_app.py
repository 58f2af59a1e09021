"""Tests for the Flask service and the PDF report."""

import io
import json

import pytest

from app import app as flask_app
from pdf_generator.reportlab_pdf import generate_pdf
from sqllint import lint_sql_text


@pytest.fixture
def client(tmp_path):
    checks = tmp_path / "checks.json"
    checks.write_text(json.dumps({"boolean_field": {"enabled": True}}))
    flask_app.config.update(
        TESTING=True,
        OUTPUT_FOLDER=str(tmp_path / "output"),
        CHECKS_PATH=str(checks),
    )
    with flask_app.test_client() as client:
        yield client


def test_validate_upload(client):
    data = {
        "sqlFile": (io.BytesIO(b"CREATE TABLE t (\n  enabled bit\n);\n"), "schema.sql"),
        "name": "Dev",
        "team": "Data",
    }
    resp = client.post("/validate", data=data, content_type="multipart/form-data")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["summary"]["failed"] == 1
    assert body["results"][0]["diagnostics"][0]["line"] == 2

    pdf = client.get(body["pdf_url"])
    assert pdf.status_code == 200
    assert pdf.data.startswith(b"%PDF")


def test_validate_rejects_other_extensions(client):
    data = {"sqlFile": (io.BytesIO(b"x"), "schema.exe")}
    resp = client.post("/validate", data=data, content_type="multipart/form-data")
    assert resp.status_code == 400


def test_validate_requires_file(client):
    resp = client.post("/validate", data={}, content_type="multipart/form-data")
    assert resp.status_code == 400


def test_lint_raw_body(client):
    resp = client.post("/lint?name=raw.sql", data="CREATE TABLE t (is_deleted int);",
                       content_type="text/plain")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["count"] == 1
    assert body["diagnostics"][0]["script"] == "raw.sql"
    assert body["diagnostics"][0]["rule_id"] == "boolean_field"


def test_lint_empty_body(client):
    resp = client.post("/lint", data="", content_type="text/plain")
    assert resp.status_code == 400


def test_download_missing(client):
    assert client.get("/download/nothing.pdf").status_code == 404


def test_generate_pdf_with_parse_error(tmp_path):
    results, summary = lint_sql_text("CREATE TABLE b (id int;")
    out = generate_pdf({"script": "b.sql"}, results, summary, str(tmp_path / "report.pdf"))
    with open(out, "rb") as f:
        assert f.read(4) == b"%PDF"
