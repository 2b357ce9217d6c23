# Segmentation and concept extraction shared by every marker assessor.
#
# A Document is built once per scoring call; assessors only read from it.

from __future__ import annotations

import re
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
_WORD_RE = re.compile(r"[a-z]+")

_CONCEPT_PATTERNS = (
    # proper nouns and capitalized multi-word spans
    re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b"),
    re.compile(r"\b(?:concept|theory|principle|framework|model|system)\s+of\s+\w+", re.IGNORECASE),
    # abstract nouns
    re.compile(r"\b\w+(?:ism|ity|tion|ness|ence|ance)\b"),
)
_CONCEPT_WORD_SPLIT_RE = re.compile(r"\W+")

_STOPWORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "is", "it", "that", "this", "with", "as", "by", "from", "was", "were", "are",
    "be", "been", "has", "have", "had", "not", "no", "do", "does", "did", "will",
    "would", "could", "should", "can", "may", "might", "if", "then", "than", "so",
    "up", "out", "about", "into", "over", "after", "before", "between", "through",
    "just", "also", "very", "more", "most", "some", "any", "each", "every", "all",
    "both", "few", "other", "such", "only", "own", "same", "too", "how", "what",
    "which", "who", "when", "where", "why", "its", "their", "there", "these",
    "those", "we", "our", "they", "he", "she", "his", "her", "i", "my", "you",
})

# Connective words are structure, not content: they never count as key terms.
_CONNECTIVE_WORDS = frozenset({
    "therefore", "thus", "consequently", "hence", "moreover", "furthermore",
    "however", "nevertheless", "yet", "because", "since", "given", "additionally",
    "accordingly",
})


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------


def split_sentences(text: str) -> list[str]:
    """Split on runs of terminal punctuation, dropping blank fragments."""
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def split_paragraphs(text: str) -> list[str]:
    """Split on blank-line sequences, dropping blank fragments."""
    return [p.strip() for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip()]


def word_count(text: str) -> int:
    return len(text.split())


def key_terms(sentence: str) -> set[str]:
    """Lower-cased content words of a sentence, minus stopwords and connectives."""
    return {
        w for w in _WORD_RE.findall(sentence.lower())
        if w not in _STOPWORDS and w not in _CONNECTIVE_WORDS
    }


# ---------------------------------------------------------------------------
# Concepts
# ---------------------------------------------------------------------------


def extract_concepts(text: str) -> frozenset[str]:
    """Return the normalized concept set of ``text``.

    Three pattern families are applied in turn (capitalized spans,
    "theory of X" style phrases, abstract-noun suffixes). Matches are
    lower-cased, so repeated mentions collapse to one concept.
    """
    concepts: set[str] = set()
    for pattern in _CONCEPT_PATTERNS:
        for match in pattern.findall(text):
            concepts.add(match.lower())
    return frozenset(concepts)


def concept_words(concept: str) -> set[str]:
    return {w for w in _CONCEPT_WORD_SPLIT_RE.split(concept.lower()) if w}


def concept_distance(first: frozenset[str], second: frozenset[str]) -> float:
    """1 - Jaccard similarity; two empty sets are treated as identical."""
    union = first | second
    if not union:
        return 0.0
    return 1.0 - len(first & second) / len(union)


def concept_connectivity(concepts: frozenset[str]) -> float:
    """Fraction of concept pairs that share at least one constituent word."""
    ordered = sorted(concepts)
    n = len(ordered)
    max_connections = n * (n - 1) / 2
    if max_connections <= 0:
        return 0.0
    words = [concept_words(c) for c in ordered]
    connections = 0
    for i in range(n):
        for j in range(i + 1, n):
            if words[i] & words[j]:
                connections += 1
    return connections / max_connections


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Document:
    text: str
    sentences: tuple[str, ...]
    paragraphs: tuple[str, ...]
    concepts: frozenset[str]

    @classmethod
    def from_text(cls, text: str) -> Document:
        return cls(
            text=text,
            sentences=tuple(split_sentences(text)),
            paragraphs=tuple(split_paragraphs(text)),
            concepts=extract_concepts(text),
        )

    @property
    def is_empty(self) -> bool:
        return not self.sentences
