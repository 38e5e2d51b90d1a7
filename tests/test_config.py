"""Tests for settings loading and logging context."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from docsagent.config import Settings, load_settings
from docsagent.logging import (
    GenerationLogContext,
    _ContextFilter,
    current_context,
    job_context,
    section_step,
    set_step,
)


def test_defaults() -> None:
    """It should ship the documented pacing, budget and TTL defaults."""

    settings = Settings()

    assert settings.delay_after_outline_s == 2.0
    assert settings.delay_between_sections_s == 3.0
    assert settings.max_completion_tokens == 16384
    assert settings.outline_max_tokens == 4096
    assert settings.job_ttl_s == 1800
    assert (settings.outline_min_sections, settings.outline_max_sections) == (8, 12)


def test_load_settings_from_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """It should read the file named by DOCSAGENT_ENV_FILE."""

    env = tmp_path / "custom.env"
    env.write_text("DOCSAGENT_OPENAI_MODEL=some-model\nDOCSAGENT_JOB_TTL_S=60\n", encoding="utf-8")
    monkeypatch.setenv("DOCSAGENT_ENV_FILE", str(env))

    settings = load_settings()

    assert settings.openai_model == "some-model"
    assert settings.job_ttl_s == 60


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """It should pick up prefixed environment variables."""

    monkeypatch.setenv("DOCSAGENT_MEMORY_BACKEND", "redis")
    monkeypatch.setenv("DOCSAGENT_SERIALIZE_JOB_PULLS", "true")

    settings = Settings()

    assert settings.memory_backend == "redis"
    assert settings.serialize_job_pulls is True


def test_job_context_is_injected_into_records() -> None:
    """It should stamp log records with the current job, document type and step."""

    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    with job_context(job_id="job-1", doc_type="report", step="planning"):
        set_step(section_step(0, 8))
        _ContextFilter().filter(record)

    assert record.job_id == "job-1"  # type: ignore[attr-defined]
    assert record.doc_type == "report"  # type: ignore[attr-defined]
    assert record.step == "section:1/8"  # type: ignore[attr-defined]
    assert current_context() == GenerationLogContext()


def test_nested_job_context_inherits_unset_fields() -> None:
    """It should keep the enclosing document type and step when a nested block leaves them out."""

    with job_context(job_id="outer", doc_type="thesis", step="planning"):
        with job_context(job_id="inner"):
            inner = current_context()
        outer = current_context()

    assert inner == GenerationLogContext(job_id="inner", doc_type="thesis", step="planning")
    assert outer.job_id == "outer"


def test_section_step_labels() -> None:
    """It should number sections from one and accept a phase prefix."""

    assert section_step(2, 9) == "section:3/9"
    assert section_step(0, 4, "fetching") == "fetching:1/4"
