"""Agents."""

from __future__ import annotations

from docsagent.agents.base import BaseAgent, DocContext
from docsagent.agents.editor import SectionEditor
from docsagent.agents.planner import OutlinePlanner
from docsagent.agents.single_shot import SingleShotGenerator
from docsagent.agents.writer import SectionWriter

__all__ = [
    "BaseAgent",
    "DocContext",
    "OutlinePlanner",
    "SectionEditor",
    "SectionWriter",
    "SingleShotGenerator",
]
