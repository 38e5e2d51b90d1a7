"""Error taxonomy.

Every error here propagates to the request layer, which maps it to a user-visible response.
Nothing in the core retries or substitutes default content on these failures.
"""

from __future__ import annotations


class DocsAgentError(Exception):
    """Base class for all docsagent errors."""


class ProviderError(DocsAgentError):
    """The upstream completion provider failed (transport, auth, rate limit)."""


class MalformedCompletion(DocsAgentError):
    """The provider returned empty or non-JSON content."""

    def __init__(self, message: str, *, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class PlanningFailed(DocsAgentError):
    """The outline response had no usable sections."""


class JobNotFound(DocsAgentError):
    """Unknown or expired job id. The two cases are deliberately not distinguished."""

    def __init__(self, job_id: str) -> None:
        super().__init__(f"Job not found. It may have expired: {job_id}")
        self.job_id = job_id


class SectionIndexNotFound(DocsAgentError):
    """A section pull asked for an index outside the outline."""

    def __init__(self, job_id: str, index: int, total: int) -> None:
        super().__init__(f"Section index {index} not found in job {job_id} ({total} sections)")
        self.job_id = job_id
        self.index = index
        self.total = total


class InvalidEditResponse(DocsAgentError):
    """A section edit came back without a target section id or without blocks."""


class NoDocumentContext(DocsAgentError):
    """A section edit was requested with no conversation history to edit against."""


class MissingDocumentContext(DocsAgentError):
    """A section edit was requested without a document id."""
