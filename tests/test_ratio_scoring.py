import pytest

from score_engine.models import (
    Confidence,
    IssueKind,
    Measurements,
    RatioMeasurement,
    ScoringRequest,
    StylePreference,
    SymmetryScore,
    TraitKey,
    TraitOverride,
)
from score_engine.scoring import score_ratio, score_symmetry, score_traits
from score_engine.scoring.config import ReferenceStat
from score_engine.scoring.ratio_scoring import NOTE_ABOVE, NOTE_BELOW, NOTE_OVERRIDE, NOTE_WITHIN

EYE_STAT = ReferenceStat(mean=0.315, std=0.03)


def eye_spacing(value: float, confidence: Confidence = Confidence.HIGH) -> RatioMeasurement:
    return RatioMeasurement(
        key=TraitKey.EYE_SPACING_RATIO,
        value=value,
        ideal_min=0.28,
        ideal_max=0.35,
        confidence=confidence,
    )


def test_band_center_scores_ten():
    score, note = score_ratio(eye_spacing(0.315), EYE_STAT)

    assert score == pytest.approx(10.0)
    assert note == NOTE_WITHIN


@pytest.mark.parametrize("value", [0.28, 0.35])
def test_band_edges_score_seven(value):
    score, _ = score_ratio(eye_spacing(value), EYE_STAT)
    assert score == pytest.approx(7.0)


def test_one_std_beyond_edge_scores_five():
    score, note = score_ratio(eye_spacing(0.25), EYE_STAT)

    assert score == pytest.approx(5.0)
    assert note == NOTE_BELOW


def test_out_of_band_floor():
    score, note = score_ratio(eye_spacing(0.6), EYE_STAT)

    assert score == 2.0
    assert note == NOTE_ABOVE


def test_zero_std_has_no_distance_penalty():
    score, _ = score_ratio(eye_spacing(0.2), ReferenceStat(mean=0.315, std=0.0))
    assert score == 7.0


def test_zero_width_band():
    measurement = RatioMeasurement(key=TraitKey.EYE_SPACING_RATIO, value=0.3, ideal_min=0.3, ideal_max=0.3)
    score, note = score_ratio(measurement, EYE_STAT)

    assert score == 10.0
    assert note == NOTE_WITHIN


def test_inverted_band_rejected():
    with pytest.raises(ValueError):
        RatioMeasurement(key=TraitKey.EYE_SPACING_RATIO, value=0.3, ideal_min=0.35, ideal_max=0.28)


def test_reference_stats_follow_style(body_config):
    measurement = RatioMeasurement(
        key=TraitKey.SHOULDER_TO_WAIST, value=1.8, ideal_min=1.35, ideal_max=1.60
    )
    stats = body_config.reference_stats[TraitKey.SHOULDER_TO_WAIST]

    masculine, _ = score_ratio(measurement, stats[StylePreference.MASCULINE_LEANING])
    feminine, _ = score_ratio(measurement, stats[StylePreference.FEMININE_LEANING])

    assert masculine == pytest.approx(3.0)
    assert feminine == pytest.approx(7 - 2 * 0.2 / 0.09)


def test_score_symmetry():
    assert score_symmetry(SymmetryScore(overall=0.82)) == pytest.approx(8.2)


def test_score_traits_skips_foreign_ratios_and_fills_overrides(face_config, make_quality):
    request = ScoringRequest(
        measurements=Measurements(
            ratios=[
                eye_spacing(0.315),
                RatioMeasurement(key=TraitKey.SHOULDER_TO_WAIST, value=1.4, ideal_min=1.35, ideal_max=1.6),
            ],
            symmetry=SymmetryScore(overall=0.8, confidence=Confidence.HIGH),
        ),
        photo_quality=make_quality(0.9),
        side_provided=False,
        external_overrides={
            TraitKey.SKIN_QUALITY: TraitOverride(score=6.0, confidence=Confidence.MEDIUM),
            TraitKey.EYE_SPACING_RATIO: TraitOverride(score=1.0),
            TraitKey.POSTURE: TraitOverride(score=3.0),
            TraitKey.JAW_DEFINITION: TraitOverride(score=7.0, confidence=Confidence.HIGH),
        },
    )

    scores = {score.trait_key: score for score in score_traits(request, StylePreference.NEUTRAL, face_config)}

    assert list(scores) == [
        TraitKey.EYE_SPACING_RATIO,
        TraitKey.SYMMETRY,
        TraitKey.SKIN_QUALITY,
        TraitKey.JAW_DEFINITION,
    ]
    assert scores[TraitKey.EYE_SPACING_RATIO].damped_score == pytest.approx(10.0)
    assert scores[TraitKey.SYMMETRY].raw_score == pytest.approx(8.0)
    assert scores[TraitKey.SKIN_QUALITY].damped_score == pytest.approx(5.875)
    assert scores[TraitKey.SKIN_QUALITY].notes == [NOTE_OVERRIDE]
    assert scores[TraitKey.JAW_DEFINITION].weight == 0.5
    assert scores[TraitKey.EYE_SPACING_RATIO].weight == 1.0


def test_trait_confidence_downgraded_by_quality(face_config, make_quality):
    request = ScoringRequest(
        measurements=Measurements(
            ratios=[eye_spacing(0.30)],
            symmetry=SymmetryScore(overall=0.8, confidence=Confidence.HIGH),
        ),
        photo_quality=make_quality(0.65),
    )

    scores = score_traits(request, StylePreference.NEUTRAL, face_config)

    assert [score.confidence for score in scores] == [Confidence.MEDIUM, Confidence.MEDIUM]


def test_head_tilt_lowers_symmetry_confidence(face_config, make_quality):
    request = ScoringRequest(
        measurements=Measurements(symmetry=SymmetryScore(overall=0.9, confidence=Confidence.HIGH)),
        photo_quality=make_quality(0.9, issues=(IssueKind.HEAD_TILT,)),
    )

    (symmetry,) = score_traits(request, StylePreference.NEUTRAL, face_config)

    assert symmetry.confidence is Confidence.LOW
    assert symmetry.damped_score == pytest.approx(9.0)


def test_duplicate_measurement_keeps_first(face_config, make_quality):
    request = ScoringRequest(
        measurements=Measurements(ratios=[eye_spacing(0.315), eye_spacing(0.2)]),
        photo_quality=make_quality(0.9),
    )

    scores = score_traits(request, StylePreference.NEUTRAL, face_config)

    assert len(scores) == 1
    assert scores[0].raw_score == pytest.approx(10.0)
