# The six marker assessors.
#
# Each assessor reads a Document and returns a MarkerResult with a score in
# [0, 100] plus the statistics the score was built from. Assessors share no
# state and may run in any order.

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Callable, Mapping

from data_designer_cognitive_fingerprint import cues
from data_designer_cognitive_fingerprint.params import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_cognitive_fingerprint.text import (
    Document,
    concept_connectivity,
    concept_distance,
    extract_concepts,
    key_terms,
)

_CLAUSE_SPLIT_RE = re.compile(r"[,;]")
_PARENTHETICAL_RE = re.compile(r"\([^)]*\)")


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MarkerResult:
    score: int
    stats: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "stats", MappingProxyType(dict(self.stats)))

    def to_payload(self) -> dict[str, object]:
        return {"score": self.score, **{k: round(v, 4) for k, v in self.stats.items()}}


@dataclass(frozen=True)
class MarkerSet:
    semantic_compression: MarkerResult
    inferential_continuity: MarkerResult
    semantic_topology: MarkerResult
    cognitive_asymmetry: MarkerResult
    epistemic_resistance: MarkerResult
    metacognitive_awareness: MarkerResult

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def empty(cls) -> MarkerSet:
        return cls(**{name: MarkerResult(0) for name in cls.names()})

    @classmethod
    def from_scores(cls, scores: Mapping[str, float]) -> MarkerSet:
        """Build a MarkerSet from bare scores; unnamed markers score 0."""
        return cls.empty().with_overrides(scores)

    def with_overrides(self, overrides: Mapping[str, float]) -> MarkerSet:
        unknown = set(overrides) - set(self.names())
        if unknown:
            raise ValueError(f"Unknown marker(s): {', '.join(sorted(unknown))}")
        replaced = {
            name: MarkerResult(clamp_score(value), dict(getattr(self, name).stats))
            for name, value in overrides.items()
        }
        return MarkerSet(**{name: replaced.get(name, getattr(self, name)) for name in self.names()})

    def scores(self) -> dict[str, int]:
        return {name: getattr(self, name).score for name in self.names()}

    def to_payload(self) -> dict[str, object]:
        return {name: getattr(self, name).to_payload() for name in self.names()}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


def _mean(values: list[float]) -> float:
    return _ratio(sum(values), len(values))


def _pstdev(values: list[float]) -> float:
    if not values:
        return 0.0
    mean = _mean(values)
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


def _mean_abs_step(values: list[float]) -> float:
    steps = [abs(b - a) for a, b in zip(values, values[1:])]
    return _mean(steps)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves up (2.5 -> 3) instead of to the nearest even value like ``round``."""
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def clamp_score(value: float, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> int:
    if not math.isfinite(value):
        return hp.score_min
    return max(hp.score_min, min(hp.score_max, int(round_half_up(value))))


# ---------------------------------------------------------------------------
# Assessors
# ---------------------------------------------------------------------------


def _sentence_impact(sentence: str, hp: Hyperparameters) -> float:
    impact = (
        cues.INFERENTIAL.count(sentence) * hp.inferential_cue_weight
        + cues.SYNTHESIS.count(sentence) * hp.synthesis_cue_weight
        + cues.DEFINITIONAL.count(sentence) * hp.definitional_cue_weight
    )
    if cues.CLAUSE_SEPARATOR.search(sentence):
        impact += hp.clause_bonus
    return min(1.0, impact)


def assess_semantic_compression(doc: Document, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> MarkerResult:
    """High-impact sentences: inferences, syntheses, and definitions packed per sentence."""
    total = len(doc.sentences)
    if not total:
        return MarkerResult(0, {"density": 0.0, "avg_impact": 0.0, "compression_ratio": 0.0, "high_impact_sentences": 0.0})

    impacts = [_sentence_impact(s, hp) for s in doc.sentences]
    high_impact = sum(1 for i in impacts if i > hp.high_impact_threshold)
    chains = sum(
        1 for s in doc.sentences for p in cues.IMPLICATION_CHAIN.patterns if p.search(s)
    )
    relatives = sum(1 for s in doc.sentences if cues.DEFINITIONAL_RELATIVE.search(s))

    density = high_impact / total
    avg_impact = _mean(impacts)
    compression_ratio = (chains + relatives * hp.definitional_relative_bonus) / total
    score = (
        density * hp.compression_density_weight
        + avg_impact * hp.compression_impact_weight
        + compression_ratio * hp.compression_ratio_weight
    )
    return MarkerResult(clamp_score(score, hp), {
        "density": density,
        "avg_impact": avg_impact,
        "compression_ratio": compression_ratio,
        "high_impact_sentences": float(high_impact),
    })


def _connective_strength(sentence: str, hp: Hyperparameters) -> float:
    if cues.STRONG_CONNECTIVE.search(sentence):
        return hp.strong_connective_strength
    if cues.MEDIUM_CONNECTIVE.search(sentence):
        return hp.medium_connective_strength
    if cues.WEAK_CONNECTIVE.search(sentence):
        return hp.weak_connective_strength
    return 0.0


def assess_inferential_continuity(doc: Document, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> MarkerResult:
    """How necessarily each sentence builds on the ones before it."""
    sentences = doc.sentences
    pairs = len(sentences) - 1
    if pairs <= 0:
        return MarkerResult(0, {"coherence_index": 0.0, "gap_frequency": 0.0, "chain_length": 0.0, "pair_count": 0.0})

    terms = [key_terms(s) for s in sentences]
    seen: set[str] = set(terms[0])
    coherent = building = gaps = 0
    for i in range(1, len(sentences)):
        prev_terms, curr_terms, curr = terms[i - 1], terms[i], sentences[i]

        overlap = _ratio(len(prev_terms & curr_terms), max(len(prev_terms), len(curr_terms)))
        dependency = min(1.0, _connective_strength(curr, hp) + hp.term_overlap_bonus * overlap)

        introduced = curr_terms & seen
        necessity = hp.introduced_ratio_credit * _ratio(len(introduced), len(curr_terms))
        if introduced:
            necessity += hp.introduced_term_credit
        if cues.CAUSAL.search(curr):
            necessity += hp.causal_connector_credit
        necessity = min(1.0, necessity)

        if dependency > hp.building_threshold:
            building += 1
        if necessity > hp.necessity_threshold:
            coherent += 1
        if dependency < hp.gap_threshold and necessity < hp.gap_threshold:
            gaps += 1
        seen |= curr_terms

    coherence_index = coherent / pairs
    gap_frequency = gaps / pairs
    score = (
        coherence_index * hp.continuity_coherence_weight
        + (building / pairs) * hp.continuity_building_weight
        - gap_frequency * hp.continuity_gap_weight
    )
    return MarkerResult(clamp_score(score, hp), {
        "coherence_index": coherence_index,
        "gap_frequency": gap_frequency,
        "chain_length": float(building),
        "pair_count": float(pairs),
    })


def assess_semantic_topology(doc: Document, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> MarkerResult:
    """Conceptual movement between paragraphs plus concept density and connectivity."""
    if not doc.paragraphs or not doc.text:
        return MarkerResult(0, {"gradient": 0.0, "curvature": 0.0, "node_density": 0.0, "connectivity": 0.0, "concept_count": 0.0})

    paragraph_concepts = [extract_concepts(p) for p in doc.paragraphs]
    gradients = [concept_distance(a, b) for a, b in zip(paragraph_concepts, paragraph_concepts[1:])]
    gradient = _mean(gradients)
    curvature = _mean_abs_step(gradients)
    node_density = len(doc.concepts) / len(doc.text)
    connectivity = concept_connectivity(doc.concepts)

    score = (
        gradient * hp.topology_gradient_weight
        + curvature * hp.topology_curvature_weight
        + node_density * hp.topology_density_weight
        + connectivity * hp.topology_connectivity_weight
    )
    return MarkerResult(clamp_score(score, hp), {
        "gradient": gradient,
        "curvature": curvature,
        "node_density": node_density,
        "connectivity": connectivity,
        "concept_count": float(len(doc.concepts)),
    })


def sentence_complexity(sentence: str, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> float:
    words = len(sentence.split())
    clauses = len(_CLAUSE_SPLIT_RE.split(sentence))
    parentheticals = len(_PARENTHETICAL_RE.findall(sentence))
    return (
        words * hp.complexity_word_weight
        + clauses * hp.complexity_clause_weight
        + parentheticals * hp.complexity_parenthetical_weight
    )


def assess_cognitive_asymmetry(doc: Document, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> MarkerResult:
    """Uneven distribution of effort across sentences."""
    total = len(doc.sentences)
    if not total:
        return MarkerResult(0, {"weight_distribution": 0.0, "effort_gradient": 0.0, "complexity_spikes": 0.0})

    complexities = [sentence_complexity(s, hp) for s in doc.sentences]
    weight_distribution = _pstdev(complexities)
    effort_gradient = _mean_abs_step(complexities)
    threshold = _mean(complexities) + hp.spike_sigma * weight_distribution
    spikes = sum(1 for c in complexities if c > threshold)

    score = (
        weight_distribution * hp.asymmetry_distribution_weight
        + effort_gradient * hp.asymmetry_gradient_weight
        + (spikes / total) * hp.asymmetry_spike_weight
    )
    return MarkerResult(clamp_score(score, hp), {
        "weight_distribution": weight_distribution,
        "effort_gradient": effort_gradient,
        "complexity_spikes": float(spikes),
    })


def _high_cognitive_load(sentence: str, hp: Hyperparameters) -> bool:
    return cues.COGNITIVE_LOAD.search(sentence) or cues.CLAUSE_SEPARATOR.count(sentence) >= hp.high_load_min_separators


def assess_epistemic_resistance(doc: Document, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> MarkerResult:
    """Friction: sentences that resist a trivially agreeable reading."""
    total = len(doc.sentences)
    if not total:
        return MarkerResult(0, {"non_obviousness": 0.0, "cognitive_effort": 0.0, "novelty_index": 0.0, "tautologies": 0.0})

    tautologies = non_obvious = effortful = reinterpreting = 0
    for sentence in doc.sentences:
        if cues.TAUTOLOGY.search(sentence):
            tautologies += 1
            continue
        if cues.REINTERPRETATION.search(sentence):
            reinterpreting += 1
        if _high_cognitive_load(sentence, hp):
            effortful += 1
        if cues.NON_OBVIOUS.search(sentence):
            non_obvious += 1

    non_obviousness = non_obvious / total
    cognitive_effort = effortful / total
    novelty_index = reinterpreting / total
    score = (
        non_obviousness * hp.resistance_non_obvious_weight
        + cognitive_effort * hp.resistance_effort_weight
        + novelty_index * hp.resistance_novelty_weight
    )
    return MarkerResult(clamp_score(score, hp), {
        "non_obviousness": non_obviousness,
        "cognitive_effort": cognitive_effort,
        "novelty_index": novelty_index,
        "tautologies": float(tautologies),
    })


def assess_metacognitive_awareness(doc: Document, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> MarkerResult:
    """Reframing, self-referential definitions, and talk about the argument itself."""
    total = len(doc.sentences)
    if not total:
        return MarkerResult(0, {"reframing": 0.0, "recursive_definitions": 0.0, "level_shifts": 0.0})

    reframing = sum(1 for s in doc.sentences if cues.REFRAMING.search(s)) / total
    recursive = sum(1 for s in doc.sentences if cues.RECURSIVE_DEFINITION.search(s)) / total
    level_shifts = sum(1 for s in doc.sentences if cues.LEVEL_SHIFT.search(s)) / total
    score = (
        reframing * hp.awareness_reframing_weight
        + recursive * hp.awareness_recursive_weight
        + level_shifts * hp.awareness_level_shift_weight
    )
    return MarkerResult(clamp_score(score, hp), {
        "reframing": reframing,
        "recursive_definitions": recursive,
        "level_shifts": level_shifts,
    })


# ---------------------------------------------------------------------------
# Pipeline wiring
# ---------------------------------------------------------------------------

Assessor = Callable[[Document, Hyperparameters], MarkerResult]

ASSESSORS: tuple[tuple[str, Assessor], ...] = (
    ("semantic_compression", assess_semantic_compression),
    ("inferential_continuity", assess_inferential_continuity),
    ("semantic_topology", assess_semantic_topology),
    ("cognitive_asymmetry", assess_cognitive_asymmetry),
    ("epistemic_resistance", assess_epistemic_resistance),
    ("metacognitive_awareness", assess_metacognitive_awareness),
)


def assess_markers(doc: Document, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> MarkerSet:
    return MarkerSet(**{name: assessor(doc, hp) for name, assessor in ASSESSORS})
