"""Tests for job-based section pulls."""

from __future__ import annotations

import asyncio

import pytest

from conftest import FakeClock, FakeProvider, SleepRecorder, make_outline, make_section
from docsagent.agents.planner import OutlinePlanner
from docsagent.agents.writer import SectionWriter
from docsagent.errors import JobNotFound, MalformedCompletion, SectionIndexNotFound
from docsagent.jobs.registry import JobRegistry
from docsagent.llm.gateway import CompletionGateway
from docsagent.orchestrator.pacing import FixedDelayPacer
from docsagent.orchestrator.runner import IterativeOrchestrator


def _orchestrator(
    provider: FakeProvider,
    *,
    clock: FakeClock | None = None,
    serialize_pulls: bool = False,
) -> IterativeOrchestrator:
    gateway = CompletionGateway(provider)
    registry = JobRegistry(clock=clock or FakeClock(), serialize_pulls=serialize_pulls)
    return IterativeOrchestrator(
        OutlinePlanner(gateway),
        SectionWriter(gateway),
        registry,
        pacer=FixedDelayPacer(sleep=SleepRecorder()),
    )


def test_start_job_returns_manifest_in_outline_order() -> None:
    """It should plan once and return the section manifest without generating content."""

    provider = FakeProvider([make_outline(9)])
    orchestrator = _orchestrator(provider)

    start = asyncio.run(orchestrator.start_job("remote work", "report"))

    assert start.mode == "iterative_start"
    assert start.document.title == "Remote Work Report"
    assert [(m.index, m.section_id) for m in start.sections_meta] == [(i, f"s{i + 1}") for i in range(9)]
    assert start.sections_meta[0].type == "intro"
    assert provider.calls == 1
    assert orchestrator.registry.get(start.job_id).prior_summary == ""


def test_start_job_creates_no_job_on_malformed_outline() -> None:
    """It should leave the registry empty when planning fails."""

    orchestrator = _orchestrator(FakeProvider(["not json"]))

    with pytest.raises(MalformedCompletion):
        asyncio.run(orchestrator.start_job("p", "report"))
    assert len(orchestrator.registry) == 0


def test_pulls_grow_the_job_summary() -> None:
    """It should pass the current summary to each pull and append the new section to it."""

    provider = FakeProvider([make_outline(3), make_section("s1", "Alpha."), make_section("s2", "Beta.")])
    orchestrator = _orchestrator(provider)
    start = asyncio.run(orchestrator.start_job("p", "report"))

    first = asyncio.run(orchestrator.fetch_section(start.job_id, 0))
    second = asyncio.run(orchestrator.fetch_section(start.job_id, 1))

    assert (first.section_id, first.index, first.total) == ("s1", 0, 3)
    assert second.title == "Section 2"
    assert provider.requests[1].messages[0].content.endswith("This is the first section.")
    assert provider.requests[2].messages[0].content.endswith("[Section 1]: Alpha....")
    assert orchestrator.registry.get(start.job_id).prior_summary == "[Section 1]: Alpha....\n[Section 2]: Beta...."


def test_repeated_pull_appends_twice() -> None:
    """It should not deduplicate: pulling the same index twice adds two summary lines."""

    provider = FakeProvider([make_outline(8), make_section("s1", "Alpha."), make_section("s1", "Alpha again.")])
    orchestrator = _orchestrator(provider)
    start = asyncio.run(orchestrator.start_job("p", "report"))

    asyncio.run(orchestrator.fetch_section(start.job_id, 0))
    asyncio.run(orchestrator.fetch_section(start.job_id, 0))

    summary = orchestrator.registry.get(start.job_id).prior_summary
    assert summary == "[Section 1]: Alpha....\n[Section 1]: Alpha again...."


@pytest.mark.parametrize("index", [8, 99, -1])
def test_out_of_range_index_changes_nothing(index: int) -> None:
    """It should reject the index before calling the provider or touching the summary."""

    provider = FakeProvider([make_outline(8)])
    orchestrator = _orchestrator(provider)
    start = asyncio.run(orchestrator.start_job("p", "report"))

    with pytest.raises(SectionIndexNotFound):
        asyncio.run(orchestrator.fetch_section(start.job_id, index))
    assert provider.calls == 1
    assert orchestrator.registry.get(start.job_id).prior_summary == ""


def test_pull_after_expiry_fails() -> None:
    """It should report an expired job as not found."""

    clock = FakeClock()
    provider = FakeProvider([make_outline(8)])
    orchestrator = _orchestrator(provider, clock=clock)
    start = asyncio.run(orchestrator.start_job("p", "report"))

    clock.advance(30 * 60)

    with pytest.raises(JobNotFound):
        asyncio.run(orchestrator.fetch_section(start.job_id, 0))
    assert provider.calls == 1


def test_failed_pull_leaves_summary_untouched() -> None:
    """It should not append anything when generating the section fails."""

    provider = FakeProvider([make_outline(8), "garbage"])
    orchestrator = _orchestrator(provider)
    start = asyncio.run(orchestrator.start_job("p", "report"))

    with pytest.raises(MalformedCompletion):
        asyncio.run(orchestrator.fetch_section(start.job_id, 0))
    assert orchestrator.registry.get(start.job_id).prior_summary == ""


@pytest.mark.parametrize("serialize", [False, True])
def test_concurrent_pulls_keep_every_fragment(serialize: bool) -> None:
    """It should record one summary line per concurrent pull of the same job."""

    provider = FakeProvider([make_outline(8)] + [make_section(f"s{i}", f"Text {i}.") for i in range(1, 4)])
    orchestrator = _orchestrator(provider, serialize_pulls=serialize)
    start = asyncio.run(orchestrator.start_job("p", "report"))

    async def pull_all() -> list:
        return await asyncio.gather(*(orchestrator.fetch_section(start.job_id, i) for i in range(3)))

    pulls = asyncio.run(pull_all())

    assert sorted(p.index for p in pulls) == [0, 1, 2]
    summary = orchestrator.registry.get(start.job_id).prior_summary
    assert summary.count("[Section ") == 3
