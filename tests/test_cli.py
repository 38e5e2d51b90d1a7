"""Tests for the CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from conftest import FakeProvider, build_service, make_outline, make_section
from docsagent import cli

runner = CliRunner()


def test_generate_writes_iterative_document(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """It should run batch generation for long-form types and write the JSON response."""

    provider = FakeProvider([make_outline(2), make_section("s1"), make_section("s2")])
    monkeypatch.setattr(cli.DocumentService, "from_settings", classmethod(lambda cls, settings: build_service(provider)))
    out = tmp_path / "doc.json"

    result = runner.invoke(cli.app, ["generate", "remote work", "--doc-type", "report", "-o", str(out)])

    assert result.exit_code == 0, result.output
    body = json.loads(out.read_text(encoding="utf-8"))
    assert body["mode"] == "iterative"
    assert [s["section_id"] for s in body["sections"]] == ["s1", "s2"]


def test_generate_rejects_unknown_mode(tmp_path: Path) -> None:
    """It should refuse modes that need a running server."""

    result = runner.invoke(cli.app, ["generate", "p", "--mode", "edit", "-o", str(tmp_path / "x.json")])

    assert result.exit_code != 0


def test_generate_requires_prompt(tmp_path: Path) -> None:
    """It should require a prompt or a prompt file."""

    result = runner.invoke(cli.app, ["generate", "-o", str(tmp_path / "x.json")])

    assert result.exit_code != 0


def test_generate_exits_nonzero_on_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """It should exit with status 1 and write nothing when generation fails."""

    provider = FakeProvider(["not json"])
    monkeypatch.setattr(cli.DocumentService, "from_settings", classmethod(lambda cls, settings: build_service(provider)))
    out = tmp_path / "doc.json"

    result = runner.invoke(cli.app, ["generate", "p", "--doc-type", "resume", "-o", str(out)])

    assert result.exit_code == 1
    assert not out.exists()
