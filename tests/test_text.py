import pytest

from data_designer_cognitive_fingerprint import cues
from data_designer_cognitive_fingerprint.text import (
    Document,
    concept_connectivity,
    concept_distance,
    extract_concepts,
    key_terms,
    split_paragraphs,
    split_sentences,
)


class TestSegmentation:
    def test_sentences(self):
        assert split_sentences("Hello world! How are you? Fine... ") == ["Hello world", "How are you", "Fine"]

    def test_paragraphs(self):
        text = "First paragraph.\n\n\nSecond paragraph.\n  \nThird."
        assert split_paragraphs(text) == ["First paragraph.", "Second paragraph.", "Third."]

    def test_single_newline_does_not_split_paragraphs(self):
        assert len(split_paragraphs("One line.\nAnother line.")) == 1

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\n"])
    def test_blank_input(self, text):
        assert split_sentences(text) == []
        assert split_paragraphs(text) == []
        assert Document.from_text(text).is_empty


class TestConcepts:
    def test_repeated_mentions_collapse(self):
        assert extract_concepts("Happiness matters. happiness matters.") == {"happiness"}

    def test_pattern_families(self):
        concepts = extract_concepts("We study the theory of mind and the nation in Ancient Greece.")
        assert "theory of mind" in concepts
        assert "nation" in concepts
        assert "ancient greece" in concepts

    def test_distance(self):
        assert concept_distance(frozenset(), frozenset()) == 0
        assert concept_distance(frozenset({"a"}), frozenset({"a"})) == 0
        assert concept_distance(frozenset({"a", "b"}), frozenset({"b", "c"})) == pytest.approx(2 / 3)

    def test_connectivity(self):
        assert concept_connectivity(frozenset({"theory of mind", "mind", "justice"})) == pytest.approx(1 / 3)
        assert concept_connectivity(frozenset({"justice"})) == 0

    def test_key_terms_drop_stopwords_and_connectives(self):
        assert key_terms("Therefore, the belief is justified since evidence exists.") == {
            "belief", "justified", "evidence", "exists",
        }


class TestCues:
    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            cues.CUE_CATEGORIES["new"] = cues.INFERENTIAL

    def test_registry_names_match_categories(self):
        for name, category in cues.CUE_CATEGORIES.items():
            assert category.name == name

    @pytest.mark.parametrize(
        "category, sentence",
        [
            (cues.INFERENTIAL, "It follows that the premise fails"),
            (cues.SYNTHESIS, "The view is both coherent and complete"),
            (cues.DEFINITIONAL, "Knowledge refers to justified true belief"),
            (cues.IMPLICATION_CHAIN, "If the premise holds then the conclusion does"),
            (cues.TAUTOLOGY, "Of course this matters"),
            (cues.REINTERPRETATION, "The point is not style but rather substance"),
            (cues.COGNITIVE_LOAD, "A holds if and only if B holds"),
            (cues.REFRAMING, "Let us consider the opposite case"),
            (cues.RECURSIVE_DEFINITION, "The term is a circular definition"),
            (cues.LEVEL_SHIFT, "This is a meta-argument"),
        ],
    )
    def test_category_matches(self, category, sentence):
        assert category.search(sentence)

    def test_matching_is_case_insensitive(self):
        assert cues.STRONG_CONNECTIVE.search("THEREFORE it holds")

    @pytest.mark.parametrize(
        "category, sentence, expected",
        [
            (cues.IMPLICATION_CHAIN, "Thus it holds, because the premise does", True),
            (cues.IMPLICATION_CHAIN, "If the premise holds", False),
            (cues.COGNITIVE_LOAD, "If it rains then we stay, unless it stops", True),
            (cues.COGNITIVE_LOAD, "Unless it rains, if so then we stay", False),
            (cues.REFRAMING, "From a moral perspective it fails", True),
        ],
    )
    def test_ordered_cues(self, category, sentence, expected):
        assert bool(category.search(sentence)) is expected

    def test_ordered_cue_stays_on_one_line(self):
        assert not cues.IMPLICATION_CHAIN.search("if the premise holds\nthen it follows")

    def test_ordered_cue_count(self):
        assert cues.SYNTHESIS.count("both A and B, both C and D") == 2

    def test_count(self):
        assert cues.INFERENTIAL.count("Thus A, and thus B, therefore C") == 3
        assert cues.INFERENTIAL.count("Nothing here") == 0
