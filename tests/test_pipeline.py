"""Tests for key selection and the crack orchestrator."""

import pytest

from caesar_cracker.core.config import Settings
from caesar_cracker.core.exceptions import WordlistUnavailableError
from caesar_cracker.models.schemas import AttackType
from caesar_cracker.services.cipher.transform import encode
from caesar_cracker.services.pipeline.orchestrator import CrackOrchestrator
from caesar_cracker.services.pipeline.selection import select_keys

PLAINTEXT = (
    "Cryptography is the study of secure communication in the presence of "
    "adversaries. Long before computers existed people invented ciphers to hide "
    "meaning from unauthorized readers."
)


class TestKeySelection:
    """Test suite for key selection."""

    def test_ties_are_retained(self):
        assert select_keys({5: 3, 9: 3, 2: 1}) == [5, 9]

    def test_empty_scores(self):
        assert select_keys({}) == []

    def test_single_best(self):
        assert select_keys({1: 1, 2: 7, 3: 4}) == [2]

    def test_higher_score_resets_ties(self):
        """A strictly higher score discards the keys collected so far."""
        assert select_keys({10: 2, 11: 2, 12: 5, 13: 5}) == [12, 13]

    def test_zero_scores(self):
        assert select_keys({0: 0, 1: 0}) == [0, 1]

    def test_result_is_sorted(self):
        assert select_keys({90: 1, 4: 1, 60: 1}) == [4, 60, 90]


class TestCrackOrchestrator:
    """Test suite for the crack orchestrator."""

    @pytest.fixture
    def orchestrator(self):
        return CrackOrchestrator(Settings())

    def test_frequency_attack(self, orchestrator):
        ciphertext = encode(PLAINTEXT, 101)
        result = orchestrator.crack(ciphertext, AttackType.FREQUENCY)

        assert result.found
        assert result.keys == [27]
        assert result.candidates[0].plaintext == PLAINTEXT
        assert result.candidates[0].score == 1

    def test_dictionary_attack_with_bundled_wordlist(self, orchestrator):
        ciphertext = encode(PLAINTEXT, 12)
        result = orchestrator.crack(ciphertext, AttackType.DICTIONARY)

        assert result.keys == [116]
        assert result.candidates[0].plaintext == PLAINTEXT
        assert result.scores[116] == result.candidates[0].score
        assert "116" in result.explanation

    def test_dictionary_attack_with_caller_wordlist(self, orchestrator):
        result = orchestrator.crack("&#**-H", AttackType.DICTIONARY, ["hello"])

        assert result.keys == [66]
        assert result.candidates[0].plaintext == "hello\n"

    def test_dictionary_attack_with_configured_wordlist(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("hello\n")
        orchestrator = CrackOrchestrator(Settings(wordlist_path=str(path)))

        result = orchestrator.crack("&#**-H", AttackType.DICTIONARY)

        assert result.scores == {66: 1}

    def test_configured_utf8_wordlist(self, tmp_path):
        """A non-ASCII entry does not hide the rest of the configured list."""
        path = tmp_path / "words.txt"
        path.write_text("hello\nångström\nworld\n", encoding="utf-8")
        orchestrator = CrackOrchestrator(Settings(wordlist_path=str(path)))

        result = orchestrator.crack("&#**-H", AttackType.DICTIONARY)

        assert result.scores == {66: 1}
        assert result.keys == [66]

    def test_missing_configured_wordlist(self, tmp_path):
        orchestrator = CrackOrchestrator(
            Settings(wordlist_path=str(tmp_path / "missing.txt"))
        )

        with pytest.raises(WordlistUnavailableError):
            orchestrator.crack("&#**-H", AttackType.DICTIONARY)

    def test_frequency_attack_ignores_missing_wordlist(self, tmp_path):
        orchestrator = CrackOrchestrator(
            Settings(wordlist_path=str(tmp_path / "missing.txt"))
        )

        assert orchestrator.crack("&#**-H", AttackType.FREQUENCY).keys == [66]

    def test_engine_uses_configured_chunk_size(self):
        orchestrator = CrackOrchestrator(Settings(read_chunk_size=3))

        assert orchestrator.get_engine(AttackType.FREQUENCY).chunk_size == 3
        assert orchestrator.get_engine(AttackType.DICTIONARY).chunk_size == 3

    def test_engines_are_built_per_orchestrator(self):
        small = CrackOrchestrator(Settings(read_chunk_size=3)).get_engine(AttackType.FREQUENCY)
        large = CrackOrchestrator(Settings(read_chunk_size=8192)).get_engine(AttackType.FREQUENCY)

        assert small is not large
        assert large.chunk_size == 8192

    def test_small_chunks_give_same_keys(self):
        ciphertext = encode(PLAINTEXT, 101)
        result = CrackOrchestrator(Settings(read_chunk_size=5)).crack(
            ciphertext, AttackType.FREQUENCY
        )

        assert result.keys == [27]

    def test_no_viable_key(self, orchestrator):
        result = orchestrator.crack("xyz123 abc456", AttackType.DICTIONARY, ["hello"])

        assert not result.found
        assert result.candidates == []
        assert "no viable key" in result.explanation

    def test_empty_ciphertext(self, orchestrator):
        result = orchestrator.crack("", AttackType.FREQUENCY)

        assert result.scores == {}
        assert result.keys == []
