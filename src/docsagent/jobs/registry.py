"""Job registry.

Holds in-flight pull-per-section jobs. Expiry is a hard TTL measured from creation: reading
or pulling a job never extends its life. Expired entries are dropped lazily on lookup and
swept on every new registration.
"""

from __future__ import annotations

import asyncio
import contextlib
import time
from typing import AsyncContextManager, Callable

from docsagent.errors import JobNotFound
from docsagent.jobs.models import GenerationJob
from docsagent.logging import get_logger
from docsagent.models.outline import Outline
from docsagent.utils.ids import new_job_id

logger = get_logger(__name__)

JOB_TTL_S = 30 * 60


class JobRegistry:
    """TTL-bound store of generation jobs keyed by opaque id.

    Args:
        ttl_seconds: Lifetime of a job from creation.
        clock: Monotonic seconds source.
        id_factory: Produces globally unique job ids.
        serialize_pulls: Give each job an ``asyncio.Lock`` for its pulls. Off by default,
            which leaves concurrent pulls of one job free to race on the summary.
    """

    def __init__(
        self,
        *,
        ttl_seconds: float = JOB_TTL_S,
        clock: Callable[[], float] = time.monotonic,
        id_factory: Callable[[], str] = new_job_id,
        serialize_pulls: bool = False,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._id_factory = id_factory
        self._serialize_pulls = serialize_pulls
        self._jobs: dict[str, GenerationJob] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def __len__(self) -> int:
        return len(self._jobs)

    def _expired(self, job: GenerationJob, now: float) -> bool:
        return now - job.created_at >= self._ttl

    def _drop(self, job_id: str) -> None:
        self._jobs.pop(job_id, None)
        self._locks.pop(job_id, None)
        logger.info("Job %s expired and removed from registry", job_id)

    def create(self, outline: Outline) -> GenerationJob:
        """Register a job for a freshly planned outline."""

        self.purge_expired()
        job = GenerationJob(
            job_id=self._id_factory(),
            document=outline.document_meta(),
            sections=tuple(outline.sections),
            created_at=self._clock(),
        )
        self._jobs[job.job_id] = job
        return job

    def get(self, job_id: str) -> GenerationJob:
        """Look up a live job.

        Raises:
            JobNotFound: The id is unknown or the job has expired.
        """

        job = self._jobs.get(job_id)
        if job is None:
            raise JobNotFound(job_id)
        if self._expired(job, self._clock()):
            self._drop(job_id)
            raise JobNotFound(job_id)
        return job

    def purge_expired(self) -> int:
        """Drop every expired job and return how many were removed."""

        now = self._clock()
        expired = [job_id for job_id, job in self._jobs.items() if self._expired(job, now)]
        for job_id in expired:
            self._drop(job_id)
        return len(expired)

    def pull_guard(self, job_id: str) -> AsyncContextManager[object]:
        """Context manager wrapped around one section pull of ``job_id``."""

        if not self._serialize_pulls:
            return contextlib.nullcontext()
        return self._locks.setdefault(job_id, asyncio.Lock())
