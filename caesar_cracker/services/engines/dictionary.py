import logging
import string

from caesar_cracker.models.schemas import AttackType
from caesar_cracker.services.cipher.transform import ALPHABET_SIZE, shift_symbol
from caesar_cracker.services.engines.base import AttackEngine, ScoreMap, Stream
from caesar_cracker.services.engines.registry import EngineRegistry
from caesar_cracker.services.preprocessing.streams import STREAM_ERRORS, iter_symbol_chunks
from caesar_cracker.services.reference.wordlist import WordSet, load_wordset

logger = logging.getLogger(__name__)

# Symbol classes after shifting
_OTHER, _WORD, _SPACE = 0, 1, 2


def _classify(code: int) -> int:
    char = chr(code)
    if char.isalnum():
        return _WORD
    if char in string.whitespace:
        return _SPACE
    return _OTHER


_CLASSES: tuple[int, ...] = tuple(_classify(code) for code in range(ALPHABET_SIZE))
_LOWER: tuple[str, ...] = tuple(chr(code).lower() for code in range(ALPHABET_SIZE))


@EngineRegistry.register
class DictionaryAttackEngine(AttackEngine):
    """
    Dictionary attack on the 128-symbol shift cipher.

    For every candidate shift the ciphertext is decoded and split into tokens
    on whitespace. Alphanumeric characters are lowercased and kept, any other
    character is dropped without ending the token, so "it's-great" becomes
    the single token "itsgreat". A shift scores one point per token found in
    the wordlist.

    Shifts with no matching token are left out of the ScoreMap.
    """

    name = "Dictionary Attack"
    attack_type = AttackType.DICTIONARY
    description = (
        "Decodes the ciphertext with every shift and counts how many "
        "whitespace-separated tokens appear in a wordlist."
    )
    requires_wordlist = True

    def attack(
        self,
        ciphertext: Stream,
        wordlist: Stream | None = None,
    ) -> ScoreMap:
        if wordlist is None:
            logger.warning("Dictionary attack called without a wordlist")
            return {}

        try:
            words = load_wordset(wordlist)
        except STREAM_ERRORS as e:
            logger.warning("Wordlist stream is unreadable: %s", e)
            return {}

        try:
            scores = self._score(ciphertext, words)
        except STREAM_ERRORS as e:
            logger.warning("Ciphertext stream is unreadable: %s", e)
            return {}

        logger.debug(
            "Dictionary attack scored %d shifts against %d words",
            len(scores),
            len(words),
        )
        return scores

    def _score(self, ciphertext: Stream, words: WordSet) -> ScoreMap:
        scores: ScoreMap = {}
        tokens: list[list[str]] = [[] for _ in range(ALPHABET_SIZE)]

        def check(shift: int) -> None:
            token = tokens[shift]
            if "".join(token) in words:
                scores[shift] = scores.get(shift, 0) + 1
            token.clear()

        for chunk in iter_symbol_chunks(ciphertext, self.chunk_size):
            for code in chunk:
                for shift in range(ALPHABET_SIZE):
                    decoded = shift_symbol(code, shift)
                    kind = _CLASSES[decoded]
                    if kind == _WORD:
                        tokens[shift].append(_LOWER[decoded])
                    elif kind == _SPACE and tokens[shift]:
                        check(shift)

        # Trailing tokens
        for shift in range(ALPHABET_SIZE):
            if tokens[shift]:
                check(shift)

        return scores

    def explain(self, scores: ScoreMap, keys: list[int]) -> str:
        if not keys:
            return "No decoded token matched the wordlist for any shift; no viable key found."

        best = scores[keys[0]]
        return (
            f"Dictionary attack: shift(s) {', '.join(map(str, keys))} decode "
            f"{best} token(s) found in the wordlist, the most of all "
            f"{ALPHABET_SIZE} shifts ({len(scores)} shifts matched at least one word)."
        )
