from __future__ import annotations


def planner_system_prompt(doc_type: str, *, min_sections: int = 8, max_sections: int = 12) -> str:
    return (
        "You are a document planning agent. Your job is to generate a structured document outline.\n"
        f"The user wants a {doc_type.upper()} document.\n"
        f"Create a comprehensive outline with {min_sections} to {max_sections} sections.\n"
        "Each section must have a unique section_id, a clear title, a type "
        "(intro/body/conclusion/appendix/abstract/references), a depth (1-3), "
        "and a 1-sentence description of what goes in it.\n"
        "Return ONLY valid JSON. No markdown. No explanation."
    )


def planner_user_prompt(user_prompt: str) -> str:
    return f"Create a detailed outline for: {user_prompt}"
