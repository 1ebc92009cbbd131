"""
Crack orchestrator - runs one attack end to end.

1. Wrap the ciphertext (and wordlist) in streams
2. Run the requested attack engine
3. Select the highest-scoring key(s)
4. Decode the ciphertext with every selected key
"""

import io
import logging
from contextlib import ExitStack
from dataclasses import dataclass, field

from caesar_cracker.core.config import Settings, get_settings
from caesar_cracker.core.exceptions import EngineNotFoundError
from caesar_cracker.models.schemas import AttackType, KeyCandidate
from caesar_cracker.services.cipher.transform import shift_text
from caesar_cracker.services.engines.base import AttackEngine, ScoreMap
from caesar_cracker.services.engines.registry import EngineRegistry
from caesar_cracker.services.pipeline.selection import select_keys
from caesar_cracker.services.reference.wordlist import open_wordlist

logger = logging.getLogger(__name__)


@dataclass
class CrackResult:
    """Result of a single attack."""

    attack: AttackType
    scores: ScoreMap
    keys: list[int]
    candidates: list[KeyCandidate] = field(default_factory=list)
    explanation: str = ""

    @property
    def found(self) -> bool:
        return bool(self.keys)


class CrackOrchestrator:
    """
    Runs an attack engine and turns its ScoreMap into decoded candidates.

    The dictionary attack uses, in order of preference, the words supplied
    by the caller, the file named by ``settings.wordlist_path``, or the
    bundled list of popular English words.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.registry = EngineRegistry()

    def get_engine(self, attack: AttackType) -> AttackEngine:
        """
        Build the engine for ``attack`` using this orchestrator's settings.

        Raises:
            EngineNotFoundError: if no engine is registered for ``attack``
        """
        if not self.registry.is_registered(attack):
            raise EngineNotFoundError(attack.value)
        return self.registry.create_engine(attack, chunk_size=self.settings.read_chunk_size)

    def crack(
        self,
        ciphertext: str,
        attack: AttackType = AttackType.FREQUENCY,
        wordlist: list[str] | None = None,
    ) -> CrackResult:
        """
        Recover the most probable shift key(s) for the ciphertext.

        Raises:
            EngineNotFoundError: if no engine is registered for ``attack``
            WordlistUnavailableError: if the configured wordlist cannot be opened
        """
        engine = self.get_engine(attack)

        with ExitStack() as stack:
            wordlist_stream = None
            if engine.requires_wordlist:
                if wordlist is not None:
                    wordlist_stream = io.StringIO("\n".join(wordlist))
                else:
                    wordlist_stream = stack.enter_context(
                        open_wordlist(self.settings.wordlist_path)
                    )

            scores = engine.attack(io.StringIO(ciphertext), wordlist_stream)

        keys = select_keys(scores)
        candidates = [
            KeyCandidate(key=key, score=scores[key], plaintext=shift_text(ciphertext, key))
            for key in keys
        ]

        logger.info(
            "%s attack on %d characters: %s",
            attack.value,
            len(ciphertext),
            f"key(s) {keys}" if keys else "no viable key",
        )

        return CrackResult(
            attack=attack,
            scores=scores,
            keys=keys,
            candidates=candidates,
            explanation=engine.explain(scores, keys),
        )
