import logging

import numpy as np
from scipy.spatial.distance import cityblock

from caesar_cracker.models.schemas import AttackType
from caesar_cracker.services.cipher.transform import ALPHABET_SIZE
from caesar_cracker.services.engines.base import AttackEngine, ScoreMap, Stream
from caesar_cracker.services.engines.registry import EngineRegistry
from caesar_cracker.services.preprocessing.streams import STREAM_ERRORS, iter_symbol_chunks
from caesar_cracker.services.reference.frequencies import ASCII_FREQUENCIES

logger = logging.getLogger(__name__)

_SHIFTS = np.arange(ALPHABET_SIZE)


@EngineRegistry.register
class FrequencyAttackEngine(AttackEngine):
    """
    Frequency analysis attack on the 128-symbol shift cipher.

    Builds one character histogram per candidate shift, normalizes it by the
    number of characters read, and measures its L1 (Manhattan) distance to
    the reference ASCII distribution. Every shift at the minimum distance is
    reported with a value of 1; the value marks membership in the closest
    set and is not a graded score.
    """

    name = "Frequency Analysis Attack"
    attack_type = AttackType.FREQUENCY
    description = (
        "Compares the character distribution produced by every shift with "
        "the distribution of ASCII characters in English prose."
    )

    def attack(
        self,
        ciphertext: Stream,
        wordlist: Stream | None = None,
    ) -> ScoreMap:
        try:
            histograms, total = self._tally(ciphertext)
        except STREAM_ERRORS as e:
            logger.warning("Ciphertext stream is unreadable: %s", e)
            return {}

        if total == 0:
            logger.debug("Frequency attack read no characters")
            return {}

        distances = self.distances(histograms / total)
        closest = distances.min()
        scores = {int(shift): 1 for shift in np.flatnonzero(distances == closest)}

        logger.debug(
            "Frequency attack read %d characters; minimum distance %.6f at shift(s) %s",
            total,
            closest,
            sorted(scores),
        )
        return scores

    def _tally(self, ciphertext: Stream) -> tuple[np.ndarray, int]:
        """Count decoded symbols for every shift in one pass over the stream."""
        histograms = np.zeros((ALPHABET_SIZE, ALPHABET_SIZE), dtype=np.int64)
        total = 0

        for chunk in iter_symbol_chunks(ciphertext, self.chunk_size):
            codes = np.fromiter(chunk, dtype=np.int64, count=len(chunk))
            decoded = (codes[np.newaxis, :] + _SHIFTS[:, np.newaxis]) % ALPHABET_SIZE
            np.add.at(histograms, (_SHIFTS[:, np.newaxis], decoded), 1)
            total += len(chunk)

        return histograms, total

    @staticmethod
    def distances(frequencies: np.ndarray) -> np.ndarray:
        """L1 distance of each shift's normalized histogram to the reference table."""
        return np.array([cityblock(row, ASCII_FREQUENCIES) for row in frequencies])

    def explain(self, scores: ScoreMap, keys: list[int]) -> str:
        if not keys:
            return "The ciphertext was empty or unreadable; no viable key found."

        return (
            f"Frequency analysis: shift(s) {', '.join(map(str, keys))} produce the "
            f"character distribution closest to English text out of all "
            f"{ALPHABET_SIZE} shifts."
        )
