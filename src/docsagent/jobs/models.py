from __future__ import annotations

from dataclasses import dataclass

from docsagent.models.outline import DocumentMeta, SectionDescriptor


@dataclass
class GenerationJob:
    """An in-flight, pull-per-section long-form generation.

    Everything but ``prior_summary`` is fixed at creation. The summary only ever grows.
    """

    job_id: str
    document: DocumentMeta
    sections: tuple[SectionDescriptor, ...]
    created_at: float
    prior_summary: str = ""

    @property
    def total(self) -> int:
        return len(self.sections)

    def append_summary(self, fragment: str) -> None:
        self.prior_summary = self.prior_summary + fragment

    def snapshot(self) -> dict[str, str | int | float]:
        return {
            "job_id": self.job_id,
            "title": self.document.title,
            "total": self.total,
            "summary_chars": len(self.prior_summary),
            "created_at": self.created_at,
        }
