from __future__ import annotations

from docsagent.utils.ids import section_block_prefix

FIRST_SECTION_SENTINEL = "This is the first section."

STYLE_BY_FORMAT: dict[str, str] = {
    "thesis": "Academic, formal, first_line_indent, JUSTIFIED alignment, Times New Roman.",
    "research_paper": "Academic, evidence-based, formal citations, JUSTIFIED alignment.",
    "report": "Professional, structured, use tables and callouts for key findings.",
    "article": "Engaging, conversational, LEFT alignment, use callouts for key points.",
    "proposal": "Persuasive, professional, include budget/timeline tables.",
    "meeting_notes": "Concise, action-oriented, use bullet lists and key_value blocks.",
    "legal": "Formal, precise, numbered sections, LEFT alignment.",
    "technical_docs": "Technical, precise, use code_block and tables extensively.",
    "case_study": "Narrative, evidence-backed, use callouts and tables for data.",
    "white_paper": "Authoritative, data-driven, use tables and blockquotes.",
    "policy": "Formal, directive tone, use numbered lists for rules.",
    "general": "Professional, clear, balanced use of formatting.",
}


def style_for_format(doc_format: str) -> str:
    return STYLE_BY_FORMAT.get(doc_format, STYLE_BY_FORMAT["general"])


def writer_system_prompt(*, title: str, doc_format: str, section_id: str, prior_summary: str) -> str:
    prefix = section_block_prefix(section_id)
    return (
        "You are a professional document writing agent.\n"
        f'You are writing one section of a {doc_format.upper()} document titled "{title}".\n'
        f"Writing style: {style_for_format(doc_format)}\n"
        "CRITICAL RULES:\n"
        "- Write ONLY the content for the section you are given. Do not write other sections.\n"
        "- Be COMPREHENSIVE and DETAILED. Write long, thorough paragraphs.\n"
        "- Use appropriate block types (sub_heading, paragraph, bullet_list, table, etc.)\n"
        '- NEVER use "\\n" inside content strings. Use separate blocks instead.\n'
        f'- Assign unique block_ids like "{prefix}1", "{prefix}2", etc.\n'
        "- Return ONLY valid JSON. No markdown. No explanation.\n"
        "\n"
        "Prior sections summary (for context continuity):\n"
        f"{prior_summary or FIRST_SECTION_SENTINEL}"
    )


def writer_user_prompt(*, title: str, section_type: str, description: str, section_id: str) -> str:
    return (
        f'Write the "{title}" section ({section_type}).\n'
        f"Section description: {description}\n"
        f"Section ID: {section_id}"
    )
