"""Section editor.

Replaces one addressable section of a document generated earlier in the same conversation.
The conversation history is the only source of document context, so an edit without history
is refused before any completion is requested.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from docsagent.agents.base import BaseAgent
from docsagent.errors import InvalidEditResponse, MissingDocumentContext, NoDocumentContext
from docsagent.llm.gateway import CompletionGateway
from docsagent.logging import get_logger
from docsagent.memory.base import ConversationMemory
from docsagent.models.responses import SectionEdit
from docsagent.prompts import edit_summary, editor_system_prompt, editor_user_prompt
from docsagent.schemas.iterative import SECTION_EDIT_SCHEMA
from docsagent.validation import validate_blocks

logger = get_logger(__name__)


class SectionEditor(BaseAgent):
    def __init__(self, gateway: CompletionGateway, memory: ConversationMemory, *, max_tokens: int = 16384) -> None:
        super().__init__(gateway, max_tokens=max_tokens)
        self._memory = memory

    @staticmethod
    def require_context(document_id: str | None, history: Sequence[Mapping[str, Any]]) -> str:
        """Return the document id, or raise if there is nothing to edit.

        Raises:
            MissingDocumentContext: No document id.
            NoDocumentContext: Empty history.
        """

        if not document_id:
            raise MissingDocumentContext(
                "Edit mode requires a document context (document_id). Please reload your document to sync it."
            )
        if not history:
            raise NoDocumentContext(
                "No outline or document context found in memory. "
                "Please generate a document first before trying to edit a section."
            )
        return document_id

    async def edit_section(
        self,
        user_prompt: str,
        doc_type: str,
        document_id: str | None,
        history: Sequence[Mapping[str, Any]],
        *,
        user_id: str,
    ) -> SectionEdit:
        """Rewrite the section the user asks for.

        Raises:
            MissingDocumentContext: No document id.
            NoDocumentContext: Empty history.
            InvalidEditResponse: No target section id or no blocks in the response.
        """

        document_id = self.require_context(document_id, history)
        logger.info("Requesting section edit for %s document %s", doc_type, document_id)
        raw = await self._gateway.request(
            editor_system_prompt(doc_type),
            history,
            editor_user_prompt(user_prompt),
            SECTION_EDIT_SCHEMA,
            schema_name="section_edit",
            strict=False,
            max_tokens=self._max_tokens,
        )

        if not isinstance(raw, dict):
            raise InvalidEditResponse("LLM failed to generate a valid section edit response.")
        target = raw.get("target_section_id")
        blocks = raw.get("blocks")
        if not isinstance(target, str) or not target or not isinstance(blocks, list) or not blocks:
            raise InvalidEditResponse("LLM failed to generate a valid section edit response.")

        validate_blocks(blocks, check_shapes=True).log_warnings(logger, f"Edit of {target}")
        result = SectionEdit(target_section_id=target, blocks=[b for b in blocks if isinstance(b, dict)])
        logger.info("Edit ready for section %r with %d new blocks", target, len(result.blocks))

        # Only a digest goes to memory; repeated edits would otherwise grow it without bound.
        await self._memory.append(document_id, user_id, "assistant", edit_summary(target, len(result.blocks)))
        return result
