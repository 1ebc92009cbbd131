from typing import Annotated

from fastapi import Depends

from caesar_cracker.core.config import Settings, get_settings
from caesar_cracker.services.pipeline.orchestrator import CrackOrchestrator


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_orchestrator(settings: SettingsDep) -> CrackOrchestrator:
    """Get a crack orchestrator bound to the current settings."""
    return CrackOrchestrator(settings)

OrchestratorDep = Annotated[CrackOrchestrator, Depends(get_orchestrator)]
