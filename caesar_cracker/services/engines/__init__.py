"""Key-recovery attack engines."""

from caesar_cracker.services.engines.base import AttackEngine, ScoreMap
from caesar_cracker.services.engines.dictionary import DictionaryAttackEngine
from caesar_cracker.services.engines.frequency import FrequencyAttackEngine
from caesar_cracker.services.engines.registry import EngineRegistry

__all__ = [
    "AttackEngine",
    "DictionaryAttackEngine",
    "EngineRegistry",
    "FrequencyAttackEngine",
    "ScoreMap",
]
