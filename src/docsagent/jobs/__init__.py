"""Pull-per-section generation jobs."""

from __future__ import annotations

from docsagent.jobs.models import GenerationJob
from docsagent.jobs.registry import JOB_TTL_S, JobRegistry

__all__ = ["GenerationJob", "JOB_TTL_S", "JobRegistry"]
