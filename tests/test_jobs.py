"""Tests for the job registry."""

from __future__ import annotations

import asyncio
import contextlib
import itertools

import pytest

from conftest import FakeClock, make_outline
from docsagent.errors import JobNotFound
from docsagent.jobs.registry import JOB_TTL_S, JobRegistry
from docsagent.models.outline import Outline


def _outline(n: int = 8) -> Outline:
    return Outline.model_validate(make_outline(n))


def test_registry_creates_job_from_outline(clock: FakeClock) -> None:
    """It should snapshot the outline and start with an empty summary."""

    registry = JobRegistry(clock=clock)
    job = registry.create(_outline(9))

    assert registry.get(job.job_id) is job
    assert job.total == 9
    assert job.prior_summary == ""
    assert job.document.title == "Remote Work Report"
    assert job.created_at == clock.now


def test_registry_ids_are_unique() -> None:
    """It should hand out a distinct id per job."""

    registry = JobRegistry()
    ids = {registry.create(_outline()).job_id for _ in range(50)}

    assert len(ids) == 50


def test_registry_hard_ttl(clock: FakeClock) -> None:
    """It should expire a job exactly at its TTL regardless of reads."""

    registry = JobRegistry(clock=clock)
    job = registry.create(_outline())

    clock.advance(JOB_TTL_S - 1)
    assert registry.get(job.job_id) is job

    clock.advance(1)
    with pytest.raises(JobNotFound):
        registry.get(job.job_id)
    assert len(registry) == 0


def test_registry_unknown_id(clock: FakeClock) -> None:
    """It should not distinguish unknown ids from expired ones."""

    registry = JobRegistry(clock=clock)

    with pytest.raises(JobNotFound) as excinfo:
        registry.get("nope")
    assert "may have expired" in str(excinfo.value)


def test_registry_purges_on_create(clock: FakeClock) -> None:
    """It should sweep expired jobs whenever a new one is registered."""

    counter = itertools.count()
    registry = JobRegistry(ttl_seconds=10, clock=clock, id_factory=lambda: f"job-{next(counter)}")
    registry.create(_outline())
    registry.create(_outline())
    clock.advance(10)

    job = registry.create(_outline())

    assert len(registry) == 1
    assert job.job_id == "job-2"


def test_pull_guard_is_noop_unless_serialized() -> None:
    """It should only hand out a lock when pulls are serialized."""

    assert isinstance(JobRegistry().pull_guard("x"), contextlib.nullcontext)

    registry = JobRegistry(serialize_pulls=True)
    guard = registry.pull_guard("x")
    assert isinstance(guard, asyncio.Lock)
    assert registry.pull_guard("x") is guard
