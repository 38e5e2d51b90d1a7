"""Section writer.

Writes the blocks of exactly one outline section, given the document context and the
rolling summary of what has been written so far.
"""

from __future__ import annotations

from docsagent.agents.base import BaseAgent, DocContext
from docsagent.llm.gateway import CompletionGateway
from docsagent.logging import get_logger
from docsagent.models.outline import SectionDescriptor
from docsagent.models.responses import SectionResult
from docsagent.prompts import writer_system_prompt, writer_user_prompt
from docsagent.schemas.iterative import SECTION_SCHEMA
from docsagent.validation import validate_blocks

logger = get_logger(__name__)


class SectionWriter(BaseAgent):
    """Generates one section's content blocks."""

    def __init__(self, gateway: CompletionGateway, *, max_tokens: int = 16384) -> None:
        super().__init__(gateway, max_tokens=max_tokens)

    async def generate(
        self,
        section: SectionDescriptor,
        doc_context: DocContext,
        prior_summary: str = "",
    ) -> SectionResult:
        """Write ``section``.

        A response without blocks is accepted as an empty section (and logged), so the
        caller can keep advancing through the outline.
        """

        system = writer_system_prompt(
            title=doc_context.title,
            doc_format=doc_context.format,
            section_id=section.section_id,
            prior_summary=prior_summary,
        )
        user = writer_user_prompt(
            title=section.title,
            section_type=section.type,
            description=section.description,
            section_id=section.section_id,
        )
        # Sections carry no conversation history; continuity comes from the summary.
        raw = await self._gateway.request(
            system,
            (),
            user,
            SECTION_SCHEMA,
            schema_name="section_content",
            strict=False,
            max_tokens=self._max_tokens,
        )

        raw_blocks = raw.get("blocks") if isinstance(raw, dict) else None
        if not isinstance(raw_blocks, list) or not raw_blocks:
            logger.warning("Section %s (%s) came back with no blocks", section.section_id, section.title)
            raw_blocks = []
        else:
            validate_blocks(raw_blocks, check_shapes=True).log_warnings(logger, f"Section {section.section_id}")
        blocks = [b for b in raw_blocks if isinstance(b, dict)]
        logger.info("Section %s generated with %d blocks", section.section_id, len(blocks))

        return SectionResult(section_id=section.section_id, title=section.title, blocks=blocks)

