"""Iterative long-form generation.

Two ways to drive the outline-then-sections protocol:

* batch: plan, then write every section in order with fixed pacing, and return the whole
  document (or stream progress events while doing so). Any failure aborts the run.
* job: plan, register a job and return a section manifest right away; the caller then pulls
  sections one index at a time until the job expires.

Both feed each section writer a rolling summary of what came before.
"""

from __future__ import annotations

import uuid
from collections.abc import AsyncIterator, Mapping, Sequence
from typing import Any

from docsagent.agents.base import DocContext
from docsagent.agents.planner import OutlinePlanner
from docsagent.agents.writer import SectionWriter
from docsagent.config import Settings
from docsagent.errors import SectionIndexNotFound
from docsagent.events import ContentType, GenerationEvent
from docsagent.jobs.registry import JobRegistry
from docsagent.llm.gateway import CompletionGateway
from docsagent.logging import get_logger, job_context, section_step, set_step
from docsagent.models.responses import IterativeDocument, IterativeStart, SectionMeta, SectionPull, SectionResult
from docsagent.orchestrator.pacing import FixedDelayPacer
from docsagent.orchestrator.state import BatchRunState, GenerationPhase
from docsagent.orchestrator.summary import RollingSummary

logger = get_logger(__name__)


class IterativeOrchestrator:
    """Sequences the outline planner and the section writer."""

    def __init__(
        self,
        planner: OutlinePlanner,
        writer: SectionWriter,
        registry: JobRegistry,
        *,
        pacer: FixedDelayPacer | None = None,
        summary: RollingSummary | None = None,
    ) -> None:
        self._planner = planner
        self._writer = writer
        self._registry = registry
        self._pacer = pacer or FixedDelayPacer()
        self._summary = summary or RollingSummary()

    @classmethod
    def from_settings(
        cls,
        gateway: CompletionGateway,
        settings: Settings,
        *,
        registry: JobRegistry | None = None,
    ) -> IterativeOrchestrator:
        planner = OutlinePlanner(
            gateway,
            max_tokens=settings.outline_max_tokens,
            min_sections=settings.outline_min_sections,
            max_sections=settings.outline_max_sections,
        )
        writer = SectionWriter(gateway, max_tokens=settings.max_completion_tokens)
        if registry is None:
            registry = JobRegistry(ttl_seconds=settings.job_ttl_s, serialize_pulls=settings.serialize_job_pulls)
        return cls(
            planner,
            writer,
            registry,
            pacer=FixedDelayPacer(
                after_outline_s=settings.delay_after_outline_s,
                between_sections_s=settings.delay_between_sections_s,
            ),
            summary=RollingSummary(
                max_blocks=settings.summary_blocks_per_section,
                max_chars=settings.summary_snippet_chars,
            ),
        )

    @property
    def registry(self) -> JobRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Batch
    # ------------------------------------------------------------------

    async def generate_document_stream(
        self,
        prompt: str,
        doc_type: str,
        history: Sequence[Mapping[str, Any]] = (),
    ) -> AsyncIterator[GenerationEvent]:
        """Run a whole batch generation, yielding progress events.

        The last event is ``DOCUMENT_DONE`` carrying the full :class:`IterativeDocument`.
        Errors propagate and end the stream; no partial document is produced.
        """

        run_id = uuid.uuid4().hex
        seq = 0

        def emit(content_type: ContentType, data: dict[str, Any]) -> GenerationEvent:
            nonlocal seq
            seq += 1
            return GenerationEvent(run_id=run_id, seq=seq, content_type=content_type, data=data)

        state = BatchRunState(prompt=prompt, doc_type=doc_type)
        with job_context(job_id=run_id, doc_type=doc_type, step=state.step_label()):
            logger.info("Iterative run started for %s", doc_type)
            outline = await self._planner.plan(prompt, doc_type, history)
            state.total_sections = len(outline.sections)
            document = outline.document_meta()
            yield emit(
                ContentType.OUTLINE_READY,
                {
                    "document": document.model_dump(mode="json"),
                    "sections_meta": [m.model_dump(mode="json") for m in _manifest(outline.sections)],
                },
            )

            await self._pacer.after_outline()

            doc_context = DocContext(title=outline.title, format=outline.format)
            prior_summary = ""
            results: list[SectionResult] = []
            for i, section in enumerate(outline.sections):
                state.advance(GenerationPhase.GENERATING_SECTION, section_index=i)
                set_step(state.step_label())
                logger.info("Generating section %r", section.title, extra=state.snapshot())
                yield emit(
                    ContentType.SECTION_START,
                    {"index": i, "section_id": section.section_id, "title": section.title},
                )

                result = await self._writer.generate(section, doc_context, prior_summary)
                results.append(result)
                prior_summary = self._summary.extend(prior_summary, result)
                state.summary_chars = len(prior_summary)
                yield emit(ContentType.SECTION_DONE, {"index": i, **result.model_dump(mode="json")})

                if i < len(outline.sections) - 1:
                    await self._pacer.between_sections()

            state.advance(GenerationPhase.DONE)
            set_step(state.step_label())
            logger.info("All %d sections generated", len(results), extra=state.snapshot())
            response = IterativeDocument(document=document, sections=results)
            yield emit(ContentType.DOCUMENT_DONE, response.model_dump(mode="json"))

    async def generate_document(
        self,
        prompt: str,
        doc_type: str,
        history: Sequence[Mapping[str, Any]] = (),
    ) -> IterativeDocument:
        """Batch generation returning the composite document.

        This is a convenience wrapper around :meth:`generate_document_stream`.
        """

        document: IterativeDocument | None = None
        async for ev in self.generate_document_stream(prompt, doc_type, history):
            if ev.content_type == ContentType.DOCUMENT_DONE:
                document = IterativeDocument.model_validate(ev.data)
        if document is None:
            raise RuntimeError("iterative run completed without producing a document")
        return document

    # ------------------------------------------------------------------
    # Job-based pulls
    # ------------------------------------------------------------------

    async def start_job(
        self,
        prompt: str,
        doc_type: str,
        history: Sequence[Mapping[str, Any]] = (),
    ) -> IterativeStart:
        """Plan the document and register a job; no section content is generated yet."""

        outline = await self._planner.plan(prompt, doc_type, history)
        job = self._registry.create(outline)
        with job_context(job_id=job.job_id, doc_type=doc_type, step=GenerationPhase.AWAITING_PULLS.value):
            logger.info("Job registered with %d sections", job.total, extra=job.snapshot())
        return IterativeStart(
            job_id=job.job_id,
            document=job.document,
            sections_meta=_manifest(job.sections),
        )

    async def fetch_section(self, job_id: str, index: int) -> SectionPull:
        """Generate section ``index`` of a job and fold it into the job's summary.

        Pulls are not idempotent: fetching the same index twice appends its summary line
        twice.

        Raises:
            JobNotFound: Unknown or expired job.
            SectionIndexNotFound: ``index`` outside the outline.
        """

        job = self._registry.get(job_id)
        if not 0 <= index < job.total:
            raise SectionIndexNotFound(job_id, index, job.total)

        section = job.sections[index]
        async with self._registry.pull_guard(job_id):
            with job_context(
                job_id=job_id,
                doc_type=job.document.format,
                step=section_step(index, job.total, GenerationPhase.FETCHING.value),
            ):
                logger.info("Generating section %r", section.title)
                doc_context = DocContext(title=job.document.title, format=job.document.format)
                result = await self._writer.generate(section, doc_context, job.prior_summary)
                job.append_summary(self._summary.fragment(job.prior_summary, result))

        return SectionPull(
            section_id=section.section_id,
            title=section.title,
            index=index,
            total=job.total,
            blocks=result.blocks,
        )


def _manifest(sections: Sequence[Any]) -> list[SectionMeta]:
    return [
        SectionMeta(index=i, section_id=s.section_id, title=s.title, type=s.type)
        for i, s in enumerate(sections)
    ]
