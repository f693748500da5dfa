# tests/core/test_generate_passphrase.py
import random

import pytest
from structlog.testing import capture_logs

from phraseforge.core.domain.exceptions import EmptyCandidatePoolError
from phraseforge.core.domain.models import EmptyPoolPolicy, PartOfSpeech, Variant, WordEntry
from phraseforge.core.use_cases.generate_passphrase import GeneratePassphrase


def _entries(*pairs):
    return [WordEntry(word=word, frequency=freq) for word, freq in pairs]


@pytest.fixture
def frequency_lists():
    return {
        PartOfSpeech.ADJECTIVE: _entries(("brave", 25000), ("red", 20000), ("odd", 9)),
        PartOfSpeech.NOUN: _entries(("house", 45000), ("cat", 50000), ("ox", 3)),
        PartOfSpeech.VERB: _entries(("runs", 120000), ("jump", 15000)),
        PartOfSpeech.ADVERB: _entries(("quickly", 30000), ("softly", 12000)),
    }


@pytest.fixture
def lexical_lists():
    return {
        PartOfSpeech.ADJECTIVE: [WordEntry(word="brave")],
        PartOfSpeech.NOUN: [WordEntry(word="house")],
        PartOfSpeech.VERB: [WordEntry(word="jump")],
        PartOfSpeech.ADVERB: [WordEntry(word="softly")],
    }


def _fixed_number(number):
    rng = random.Random(0)
    rng.randrange = lambda start, stop: number
    return rng


class TestFrequencyVariant:
    def test_format_has_five_fields(self, frequency_lists):
        use_case = GeneratePassphrase(frequency_lists, min_frequency=10000, rng=random.Random(1))

        for passphrase in use_case.generate_many(50):
            fields = passphrase.split("-")
            assert len(fields) == 5
            assert 1 <= int(fields[0]) < 999
            assert all(fields[1:])

    def test_words_respect_threshold(self, frequency_lists):
        use_case = GeneratePassphrase(frequency_lists, min_frequency=10000, rng=random.Random(2))

        for passphrase in use_case.generate_many(100):
            _, adjective, _, _, _ = passphrase.split("-")
            assert adjective in {"brave", "red"}

    def test_threshold_is_strict(self):
        lists = {pos: _entries(("word", 100)) for pos in PartOfSpeech}
        use_case = GeneratePassphrase(lists, min_frequency=100, rng=_fixed_number(1))

        assert use_case.execute() == "1----"

    def test_same_seed_same_sequence(self, frequency_lists):
        first = GeneratePassphrase(frequency_lists, rng=random.Random(42)).generate_many(10)
        second = GeneratePassphrase(frequency_lists, rng=random.Random(42)).generate_many(10)

        assert first == second

    def test_number_one_keeps_noun_singular(self, frequency_lists):
        use_case = GeneratePassphrase(frequency_lists, rng=_fixed_number(1))

        for _ in range(20):
            noun = use_case.execute().split("-")[2]
            assert noun in {"house", "cat"}

    def test_number_above_one_pluralizes_noun(self, frequency_lists):
        use_case = GeneratePassphrase(frequency_lists, rng=_fixed_number(42))

        for _ in range(20):
            passphrase = use_case.execute()
            assert passphrase.startswith("42-")
            assert passphrase.split("-")[2] in {"houses", "cats"}

    def test_empty_pool_yields_blank_field(self, frequency_lists):
        """
        Scenario: no adjective clears a threshold of 999999.
        Expected: the adjective field is empty, e.g. '42--houses-runs-quickly'.
        """
        lists = dict(frequency_lists)
        lists[PartOfSpeech.NOUN] = _entries(("house", 2000000))
        lists[PartOfSpeech.VERB] = _entries(("runs", 2000000))
        lists[PartOfSpeech.ADVERB] = _entries(("quickly", 2000000))
        use_case = GeneratePassphrase(lists, min_frequency=999999, rng=_fixed_number(42))

        assert use_case.execute() == "42--houses-runs-quickly"

    def test_empty_noun_is_not_pluralized(self, frequency_lists):
        lists = dict(frequency_lists)
        lists[PartOfSpeech.NOUN] = []
        use_case = GeneratePassphrase(lists, rng=_fixed_number(7))

        assert use_case.execute().split("-")[2] == ""

    def test_fallback_policy_uses_unfiltered_list(self, frequency_lists):
        use_case = GeneratePassphrase(
            frequency_lists,
            min_frequency=999999,
            on_empty=EmptyPoolPolicy.FALLBACK,
            rng=_fixed_number(1),
        )

        _, adjective, noun, _, _ = use_case.execute().split("-")
        assert adjective in {"brave", "red", "odd"}
        assert noun in {"house", "cat", "ox"}

    def test_error_policy_raises(self, frequency_lists):
        use_case = GeneratePassphrase(
            frequency_lists,
            min_frequency=999999,
            on_empty=EmptyPoolPolicy.ERROR,
            rng=random.Random(3),
        )

        with pytest.raises(EmptyCandidatePoolError) as excinfo:
            use_case.execute()
        assert excinfo.value.part_of_speech == "adjective"
        assert "999999" in str(excinfo.value)

    def test_entries_without_frequency_never_qualify(self, lexical_lists):
        use_case = GeneratePassphrase(lexical_lists, min_frequency=0, rng=_fixed_number(5))

        assert use_case.execute() == "5----"


class TestLexicalVariant:
    def test_format_has_four_fields(self, lexical_lists):
        use_case = GeneratePassphrase(lexical_lists, variant=Variant.LEXICAL, rng=random.Random(9))

        assert use_case.execute() == "brave-house-jump-softly"

    def test_empty_lists_use_fallback_words(self):
        lists = {pos: [] for pos in PartOfSpeech}
        use_case = GeneratePassphrase(lists, variant=Variant.LEXICAL)

        assert use_case.execute() == "quick-fox-jumps-swiftly"

    def test_no_pluralization_or_number(self, lexical_lists):
        lists = dict(lexical_lists)
        lists[PartOfSpeech.NOUN] = [WordEntry(word="child")]
        use_case = GeneratePassphrase(lists, variant=Variant.LEXICAL, rng=random.Random(4))

        for passphrase in use_case.generate_many(10):
            assert passphrase == "brave-child-jump-softly"

    def test_ignores_frequency_threshold(self):
        lists = {pos: _entries(("rare", 1)) for pos in PartOfSpeech}
        use_case = GeneratePassphrase(lists, variant=Variant.LEXICAL, min_frequency=10**9)

        assert use_case.execute() == "rare-rare-rare-rare"


class TestEmptyPoolWarnings:
    def test_warning_names_pool_and_threshold(self, frequency_lists):
        lists = dict(frequency_lists)
        lists[PartOfSpeech.ADJECTIVE] = _entries(("odd", 9))

        with capture_logs() as logs:
            GeneratePassphrase(lists, min_frequency=10000, rng=random.Random(6))

        warnings = [e for e in logs if e["event"] == "empty_candidate_pool"]
        assert len(warnings) == 1
        assert warnings[0]["log_level"] == "warning"
        assert warnings[0]["part_of_speech"] == "adjective"
        assert warnings[0]["min_frequency"] == 10000

    def test_warning_emitted_once_per_pool(self, frequency_lists):
        with capture_logs() as logs:
            use_case = GeneratePassphrase(frequency_lists, min_frequency=999999, rng=random.Random(6))
            use_case.generate_many(25)

        pools = [e["part_of_speech"] for e in logs if e["event"] == "empty_candidate_pool"]
        assert sorted(pools) == ["adjective", "adverb", "noun", "verb"]

    def test_no_warning_when_pools_are_filled(self, frequency_lists):
        with capture_logs() as logs:
            GeneratePassphrase(frequency_lists, min_frequency=10000).generate_many(5)

        assert logs == []

    def test_lexical_cache_gets_rebuild_hint(self, lexical_lists):
        """
        Scenario: lists built without frequencies are loaded by the frequency variant.
        Expected: a single hint to rebuild with -r.
        """
        with capture_logs() as logs:
            GeneratePassphrase(lexical_lists, rng=_fixed_number(5))

        hints = [e for e in logs if e["event"] == "word_lists_without_frequencies"]
        assert len(hints) == 1
        assert "-r" in hints[0]["hint"]
