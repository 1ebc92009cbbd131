from abc import ABC, abstractmethod
from typing import IO, Any, ClassVar

from caesar_cracker.core.config import get_settings
from caesar_cracker.models.schemas import AttackType

# Shift key -> score. Higher is better; the meaning of the value is engine-specific.
ScoreMap = dict[int, int]

Stream = IO[Any]


class AttackEngine(ABC):
    """
    Abstract base class for key-recovery attacks.

    Each attack evaluates all 128 candidate shifts in a single pass over the
    ciphertext stream and returns a fresh ScoreMap. An unreadable or empty
    stream yields an empty ScoreMap rather than an exception.
    """

    # Attack metadata
    name: str
    attack_type: AttackType
    description: str
    requires_wordlist: ClassVar[bool] = False

    def __init__(self, chunk_size: int | None = None):
        self.chunk_size = chunk_size or get_settings().read_chunk_size

    @abstractmethod
    def attack(
        self,
        ciphertext: Stream,
        wordlist: Stream | None = None,
    ) -> ScoreMap:
        """
        Score every candidate shift against the ciphertext.

        Args:
            ciphertext: Stream of symbols in [0, 128), read once
            wordlist: Newline-delimited wordlist stream, if the attack uses one

        Returns:
            ScoreMap of candidate shifts; empty when no key can be determined
        """
        pass

    @abstractmethod
    def explain(self, scores: ScoreMap, keys: list[int]) -> str:
        """
        Generate human-readable explanation of an attack result.

        Args:
            scores: The ScoreMap returned by attack()
            keys: Keys chosen by key selection

        Returns:
            Explanation string
        """
        pass

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "attack": self.attack_type.value,
            "description": self.description,
            "requires_wordlist": self.requires_wordlist,
        }
