from __future__ import annotations

from docsagent.prompts.document import DOCUMENT_SYSTEM_PROMPT, single_shot_user_prompt
from docsagent.prompts.editor import edit_summary, editor_system_prompt, editor_user_prompt
from docsagent.prompts.planner import planner_system_prompt, planner_user_prompt
from docsagent.prompts.writer import (
    FIRST_SECTION_SENTINEL,
    STYLE_BY_FORMAT,
    style_for_format,
    writer_system_prompt,
    writer_user_prompt,
)

__all__ = [
    "DOCUMENT_SYSTEM_PROMPT",
    "FIRST_SECTION_SENTINEL",
    "STYLE_BY_FORMAT",
    "edit_summary",
    "editor_system_prompt",
    "editor_user_prompt",
    "planner_system_prompt",
    "planner_user_prompt",
    "single_shot_user_prompt",
    "style_for_format",
    "writer_system_prompt",
    "writer_user_prompt",
]
