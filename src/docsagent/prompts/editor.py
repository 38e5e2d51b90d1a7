from __future__ import annotations

from docsagent.prompts.writer import style_for_format


def editor_system_prompt(doc_type: str) -> str:
    return (
        "You are a professional document editing agent.\n"
        f"The conversation so far describes a {doc_type.upper()} document that was already generated: "
        "its outline, its section ids and what each section contains.\n"
        f"Writing style: {style_for_format(doc_type)}\n"
        "Pick the ONE section the user wants changed and rewrite it completely.\n"
        "RULES:\n"
        "- target_section_id must be the section_id of an existing section from the outline.\n"
        "- Return the full replacement content of that section as blocks; at least one block.\n"
        '- Prefix block_ids with the section id ("<section_id>_b1", "<section_id>_b2", ...).\n'
        '- NEVER use "\\n" inside content strings. Use separate blocks instead.\n'
        "- Return ONLY valid JSON. No markdown. No explanation."
    )


def editor_user_prompt(user_prompt: str) -> str:
    return f"Edit the document section according to this instruction: {user_prompt}"


def edit_summary(target_section_id: str, block_count: int) -> str:
    """Short memory entry recorded instead of the full replacement payload."""

    return f"Edited section '{target_section_id}'. Replaced with {block_count} blocks."
