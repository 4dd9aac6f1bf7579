"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from resume_studio.cli import app

runner = CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RESUME_STUDIO_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def sample_file(workdir):
    path = workdir / "resume.json"
    result = runner.invoke(app, ["init", str(path), "--sample", "--template", "classic"])
    assert result.exit_code == 0, result.output
    return path


def test_templates_lists_all_six():
    result = runner.invoke(app, ["templates"])
    assert result.exit_code == 0
    for template_id in ("modern", "classic", "professional", "minimal", "creative", "executive"):
        assert template_id in result.output


def test_init_writes_sample(sample_file):
    data = json.loads(sample_file.read_text(encoding="utf-8"))
    assert data["templateId"] == "classic"
    assert data["personalInfo"]["fullName"] == "Alex Morgan"
    assert data["customSectionTitle"] == "Languages"


def test_init_refuses_to_overwrite(sample_file):
    result = runner.invoke(app, ["init", str(sample_file)])
    assert result.exit_code == 1
    assert "already exists" in result.output


def test_init_unknown_template(workdir):
    result = runner.invoke(app, ["init", str(workdir / "r.json"), "--template", "glossy"])
    assert result.exit_code == 1


def test_export_tex(sample_file, workdir):
    result = runner.invoke(app, ["export", str(sample_file), "-f", "tex", "-o", str(workdir / "out")])
    assert result.exit_code == 0, result.output
    source = (workdir / "out" / "resume.tex").read_text(encoding="utf-8")
    assert "Northwind Analytics" in source
    assert "30\\%" in source


def test_export_html_with_estimated_fit(sample_file, workdir):
    result = runner.invoke(
        app,
        ["export", str(sample_file), "-f", "html", "-o", str(workdir), "--measure", "estimate"],
    )
    assert result.exit_code == 0, result.output
    assert "--fit-scale" in (workdir / "resume.html").read_text(encoding="utf-8")


def test_export_unknown_format(sample_file):
    result = runner.invoke(app, ["export", str(sample_file), "-f", "odt"])
    assert result.exit_code == 1
    assert "Unknown format" in result.output


def test_export_missing_file(workdir):
    result = runner.invoke(app, ["export", str(workdir / "missing.json")])
    assert result.exit_code == 1
    assert "File not found" in result.output


def test_export_invalid_json(workdir):
    path = workdir / "bad.json"
    path.write_text('{"templateId": "glossy"}', encoding="utf-8")
    result = runner.invoke(app, ["export", str(path), "-f", "tex"])
    assert result.exit_code == 1
    assert "Invalid resume file" in result.output


def test_docx_export_then_ats(sample_file, workdir):
    result = runner.invoke(app, ["export", str(sample_file), "-f", "docx", "-o", str(workdir)])
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, ["ats", str(workdir / "resume.docx")])
    assert result.exit_code == 0, result.output
    assert "Score:" in result.output
    assert "Strengths:" in result.output


def test_ats_rejects_unsupported_file(workdir):
    path = workdir / "resume.txt"
    path.write_text("Experience", encoding="utf-8")
    result = runner.invoke(app, ["ats", str(path)])
    assert result.exit_code == 1
    assert "Unsupported file type" in result.output
