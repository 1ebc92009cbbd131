"""Crack pipeline: attack orchestration and key selection."""

from caesar_cracker.services.pipeline.orchestrator import CrackOrchestrator, CrackResult
from caesar_cracker.services.pipeline.selection import select_keys

__all__ = [
    "CrackOrchestrator",
    "CrackResult",
    "select_keys",
]
