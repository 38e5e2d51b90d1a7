"""Outline planner.

One completion turns the user prompt into an outline: title, formatting options and the
ordered section list the section writer will fill in.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from docsagent.agents.base import BaseAgent
from docsagent.errors import PlanningFailed
from docsagent.llm.gateway import CompletionGateway
from docsagent.logging import get_logger
from docsagent.models.outline import Outline
from docsagent.prompts import planner_system_prompt, planner_user_prompt
from docsagent.schemas.iterative import build_outline_schema
from docsagent.validation import section_ids_are_unique

logger = get_logger(__name__)


class OutlinePlanner(BaseAgent):
    """Plans long-form documents."""

    def __init__(
        self,
        gateway: CompletionGateway,
        *,
        max_tokens: int = 4096,
        min_sections: int = 8,
        max_sections: int = 12,
    ) -> None:
        super().__init__(gateway, max_tokens=max_tokens)
        self._min_sections = min_sections
        self._max_sections = max_sections
        self._schema = build_outline_schema(min_sections, max_sections)

    async def plan(
        self,
        user_prompt: str,
        doc_type: str,
        history: Sequence[Mapping[str, Any]] = (),
    ) -> Outline:
        """Produce the outline for ``user_prompt``.

        Raises:
            MalformedCompletion: The provider did not return JSON.
            PlanningFailed: No usable ``sections`` in the response.
        """

        raw = await self._gateway.request(
            planner_system_prompt(doc_type, min_sections=self._min_sections, max_sections=self._max_sections),
            history,
            planner_user_prompt(user_prompt),
            self._schema,
            schema_name="document_outline",
            strict=True,
            max_tokens=self._max_tokens,
        )
        outline = self._parse(raw)

        count = len(outline.sections)
        if not self._min_sections <= count <= self._max_sections:
            logger.warning(
                "Outline has %d sections, expected %d-%d",
                count,
                self._min_sections,
                self._max_sections,
            )
        logger.info("Outline ready: %r with %d sections", outline.title, count)
        return outline

    @staticmethod
    def _parse(raw: Any) -> Outline:
        if not isinstance(raw, dict):
            raise PlanningFailed(f"Outline response is not an object: {type(raw).__name__}")
        sections = raw.get("sections")
        if not isinstance(sections, list) or not sections:
            raise PlanningFailed("Outline response has no sections")

        try:
            outline = Outline.model_validate(raw)
        except ValidationError as exc:
            raise PlanningFailed(f"Outline response does not match the outline model: {exc}") from exc

        if not section_ids_are_unique([s.section_id for s in outline.sections]):
            raise PlanningFailed("Outline response repeats a section_id")
        return outline
