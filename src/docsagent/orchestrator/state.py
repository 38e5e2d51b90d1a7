from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from docsagent.logging import section_step


class GenerationPhase(str, Enum):
    PLANNING = "planning"
    GENERATING_SECTION = "generating_section"
    DONE = "done"
    # Job-based runs
    AWAITING_PULLS = "awaiting_pulls"
    FETCHING = "fetching"


@dataclass
class BatchRunState:
    prompt: str
    doc_type: str
    phase: GenerationPhase = GenerationPhase.PLANNING
    section_index: int = 0
    total_sections: int = 0
    summary_chars: int = 0

    def advance(self, phase: GenerationPhase, *, section_index: int | None = None) -> None:
        self.phase = phase
        if section_index is not None:
            self.section_index = section_index

    def step_label(self) -> str:
        if self.phase is GenerationPhase.GENERATING_SECTION:
            return section_step(self.section_index, self.total_sections)
        return self.phase.value

    def snapshot(self) -> dict[str, str | int]:
        return {
            "doc_type": self.doc_type,
            "phase": self.phase.value,
            "section_index": self.section_index,
            "total_sections": self.total_sections,
            "summary_chars": self.summary_chars,
        }
