"""Iterative generation orchestration."""

from __future__ import annotations

from docsagent.orchestrator.pacing import FixedDelayPacer
from docsagent.orchestrator.runner import IterativeOrchestrator
from docsagent.orchestrator.state import BatchRunState, GenerationPhase
from docsagent.orchestrator.summary import RollingSummary

__all__ = [
    "BatchRunState",
    "FixedDelayPacer",
    "GenerationPhase",
    "IterativeOrchestrator",
    "RollingSummary",
]
