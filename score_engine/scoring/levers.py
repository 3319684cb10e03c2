"""Improvement lever selection and the bounded potential range."""

import logging
from dataclasses import dataclass, field

from score_engine.models.enums import TraitKey
from score_engine.models.scoring import PotentialRange, TopLever, TraitScore
from score_engine.scoring.config import LeverDefinition, ScoringConfig

logger = logging.getLogger(__name__)

DEFAULT_WHY = "General improvement opportunity"
PHOTO_REASON = "Photo quality can be improved"
SIDE_MISSING_REASON = "(Limited assessment without side photo)"
PHOTO_ASSUMPTION = "Note: Photo quality affects accuracy of potential estimate"


@dataclass(frozen=True)
class LeverImpact:
    """Accumulated impact of one lever before selection."""

    lever: LeverDefinition
    impact: float
    reasons: tuple[str, ...] = field(default_factory=tuple)


def _trait_label(trait_key: TraitKey) -> str:
    return trait_key.value.replace("_", " ")


def score_lever_impacts(
    trait_scores: list[TraitScore],
    quality: float,
    side_provided: bool,
    config: ScoringConfig,
) -> list[LeverImpact]:
    """
    Compute every configured lever's impact, in configuration order.

    Impact is the summed deficit below the target mean of the lever's scored
    related traits, plus the configured baseline boost, plus the photo boost
    when quality is below the no-damping threshold. Side-dependent levers are
    halved without a side photo.
    """
    damped = {score.trait_key: score.damped_score for score in trait_scores}
    impacts = []

    for lever in config.levers:
        impact = 0.0
        reasons: list[str] = []

        for trait_key in lever.related_trait_keys:
            score = damped.get(trait_key)
            if score is None or score >= config.target_mean:
                continue
            impact += config.target_mean - score
            reasons.append(f"Improve {_trait_label(trait_key)}")

        if lever.lever_key == config.photo_lever and quality < config.no_damping_quality:
            impact += config.photo_lever_boost
            reasons.append(PHOTO_REASON)

        boost = config.baseline_boosts.get(lever.lever_key)
        if boost is not None:
            amount, reason = boost
            impact += amount
            reasons.append(reason)

        if lever.side_dependent and not side_provided:
            impact *= config.side_missing_lever_penalty
            reasons.append(SIDE_MISSING_REASON)

        logger.debug("Lever %s impact %.2f", lever.lever_key.value, impact)
        impacts.append(LeverImpact(lever=lever, impact=impact, reasons=tuple(reasons)))

    return impacts


def select_top_levers(
    trait_scores: list[TraitScore],
    quality: float,
    side_provided: bool,
    config: ScoringConfig,
) -> list[TopLever]:
    """
    Pick up to three levers by descending impact with bounded deltas.

    The order is non-increasing, not strictly decreasing: levers with equal
    impact keep configuration order. Levers with no impact are never selected.
    Deltas shrink when the photo is poor, and the summed maximum delta of the
    selection is capped.
    """
    impacts = score_lever_impacts(trait_scores, quality, side_provided, config)
    ranked = sorted((item for item in impacts if item.impact > 0), key=lambda item: -item.impact)
    selected = ranked[: config.max_top_levers]

    scale = config.low_quality_delta_scale if quality < config.low_quality_delta_below else 1.0
    deltas = [(item.lever.min_delta * scale, item.lever.max_delta * scale) for item in selected]

    total_max = sum(delta_max for _, delta_max in deltas)
    if total_max > config.max_total_delta:
        cap = config.max_total_delta / total_max
        deltas = [(delta_min * cap, delta_max * cap) for delta_min, delta_max in deltas]

    top_levers = []
    for priority, (item, (delta_min, delta_max)) in enumerate(zip(selected, deltas), start=1):
        top_levers.append(
            TopLever(
                lever_key=item.lever.lever_key,
                label=item.lever.label,
                delta_min=delta_min,
                delta_max=delta_max,
                timeline=item.lever.timeline,
                priority=priority,
                impact=round(item.impact, 2),
                why=item.reasons[0] if item.reasons else DEFAULT_WHY,
                actions=list(item.lever.actions),
            )
        )
    return top_levers


def _format_delta(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def estimate_potential(
    current: float,
    levers: list[TopLever],
    quality: float,
    config: ScoringConfig,
) -> PotentialRange:
    """
    Bound the score reachable through the selected levers.

    Args:
        current: Overall current score, already rounded for display
        levers: Selected levers with their (possibly scaled) deltas
        quality: Photo quality score [0, 1]
        config: Active scoring configuration

    Returns:
        PotentialRange with current <= min <= max <= 10
    """
    min_sum = sum(lever.delta_min for lever in levers)
    max_sum = sum(lever.delta_max for lever in levers)

    potential_min = min(current + min_sum * config.potential_min_scale, config.potential_min_cap)
    potential_min = min(max(potential_min, current), config.score_max)
    potential_max = min(current + max_sum * config.potential_max_scale, config.potential_max_cap)
    potential_max = min(max(potential_max, potential_min), config.score_max)

    assumptions = [
        f"{lever.label}: +{_format_delta(lever.delta_min)}-{_format_delta(lever.delta_max)}" for lever in levers
    ]
    if quality < config.no_damping_quality:
        assumptions.append(PHOTO_ASSUMPTION)

    return PotentialRange(
        min=round(potential_min, 1),
        max=round(potential_max, 1),
        assumptions=assumptions,
    )
