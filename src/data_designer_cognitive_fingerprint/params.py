from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Hyperparameters:
    """Tunable weights, thresholds, and bounds used by the scoring engine."""

    # semantic compression
    inferential_cue_weight: float = 0.3
    synthesis_cue_weight: float = 0.25
    definitional_cue_weight: float = 0.2
    clause_bonus: float = 0.1
    high_impact_threshold: float = 0.6
    definitional_relative_bonus: float = 0.5
    compression_density_weight: float = 60.0
    compression_impact_weight: float = 40.0
    compression_ratio_weight: float = 30.0

    # inferential continuity
    strong_connective_strength: float = 0.8
    medium_connective_strength: float = 0.4
    weak_connective_strength: float = 0.3
    term_overlap_bonus: float = 0.3
    introduced_term_credit: float = 0.4
    introduced_ratio_credit: float = 0.2
    causal_connector_credit: float = 0.4
    building_threshold: float = 0.7
    necessity_threshold: float = 0.7
    gap_threshold: float = 0.2
    continuity_coherence_weight: float = 70.0
    continuity_building_weight: float = 30.0
    continuity_gap_weight: float = 40.0

    # semantic topology
    topology_gradient_weight: float = 30.0
    topology_curvature_weight: float = 25.0
    topology_density_weight: float = 1000.0
    topology_connectivity_weight: float = 20.0

    # cognitive asymmetry
    complexity_word_weight: float = 0.1
    complexity_clause_weight: float = 0.3
    complexity_parenthetical_weight: float = 0.5
    spike_sigma: float = 2.0
    asymmetry_distribution_weight: float = 20.0
    asymmetry_gradient_weight: float = 30.0
    asymmetry_spike_weight: float = 50.0

    # epistemic resistance
    high_load_min_separators: int = 3
    resistance_non_obvious_weight: float = 50.0
    resistance_effort_weight: float = 30.0
    resistance_novelty_weight: float = 20.0

    # metacognitive awareness
    awareness_reframing_weight: float = 40.0
    awareness_recursive_weight: float = 35.0
    awareness_level_shift_weight: float = 25.0

    # aggregation; cognitive asymmetry is tracked but never weighted
    weight_semantic_compression: float = 0.30
    weight_inferential_continuity: float = 0.25
    weight_epistemic_resistance: float = 0.20
    weight_metacognitive_awareness: float = 0.15
    weight_semantic_topology: float = 0.10
    weight_cognitive_asymmetry: float = 0.00
    boost_threshold: float = 85.0
    boost_factor: float = 1.1
    damp_threshold: float = 70.0
    damp_factor: float = 0.9

    score_min: int = 0
    score_max: int = 100


DEFAULT_HYPERPARAMETERS = Hyperparameters()
