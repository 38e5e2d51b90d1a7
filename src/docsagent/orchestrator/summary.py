"""Rolling summary of generated sections.

The next section's writer only needs topical continuity, not full recall, so each section
contributes one short line: its title plus the opening of its first couple of text blocks.
Summaries only grow; the previous summary is always a prefix of the next one.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from docsagent.models.responses import SectionResult


@dataclass(frozen=True)
class RollingSummary:
    max_blocks: int = 2
    max_chars: int = 150

    def snippet(self, blocks: Sequence[Any]) -> str:
        """Opening text of the first ``max_blocks`` non-table blocks that have content."""

        texts: list[str] = []
        for block in blocks:
            if len(texts) >= self.max_blocks:
                break
            if not isinstance(block, dict) or block.get("type") == "table":
                continue
            content = block.get("content")
            if isinstance(content, str) and content:
                texts.append(content[: self.max_chars] + "...")
        return " ".join(texts)

    def line(self, result: SectionResult) -> str:
        return f"[{result.title}]: {self.snippet(result.blocks)}"

    def fragment(self, current: str, result: SectionResult) -> str:
        """Text to append to ``current`` for one more finished section."""

        line = self.line(result)
        return f"\n{line}" if current else line

    def extend(self, current: str, result: SectionResult) -> str:
        return current + self.fragment(current, result)

    def build(self, results: Iterable[SectionResult]) -> str:
        summary = ""
        for result in results:
            summary = self.extend(summary, result)
        return summary
