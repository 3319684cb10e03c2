import pytest

from score_engine.models import (
    BandStatus,
    Confidence,
    Measurements,
    RatioMeasurement,
    SymmetryScore,
    TraitKey,
)
from score_engine.scoring import classify_band, compute_harmony_index, golden_ratio_score


def ratio(key: TraitKey, value: float, confidence: Confidence = Confidence.HIGH) -> RatioMeasurement:
    return RatioMeasurement(key=key, value=value, ideal_min=0.0, ideal_max=10.0, confidence=confidence)


@pytest.mark.parametrize(
    ("value", "status", "score"),
    [
        (0.30, BandStatus.GOOD, 7.5),
        (0.36, BandStatus.OK, 5.5),
        (0.40, BandStatus.OFF, 4.0),
    ],
)
def test_classify_eye_spacing_band(face_config, value, status, score):
    eye_band = face_config.harmony_bands[0]
    assert classify_band(value, eye_band) == (status, score)


@pytest.mark.parametrize(
    ("value", "score"),
    [(0.62, 8.0), (0.70, 6.5), (0.75, 5.0), (0.80, 4.0)],
)
def test_golden_ratio_tiers(value, score):
    result, deviation = golden_ratio_score(value)

    assert result == score
    assert deviation == pytest.approx(abs(value - 1 / 1.618))


def test_face_harmony_index(face_config):
    measurements = Measurements(
        ratios=[ratio(TraitKey.EYE_SPACING_RATIO, 0.30), ratio(TraitKey.FACE_WIDTH_TO_HEIGHT, 0.62)],
        symmetry=SymmetryScore(overall=0.8),
    )

    harmony = compute_harmony_index(measurements, 0.9, face_config)

    assert harmony.score == 7.8
    assert harmony.confidence is Confidence.HIGH
    assert set(harmony.components) == {"facial_symmetry", "golden_ratio_proximity"}
    assert harmony.components["facial_symmetry"].deviation_pct == 20.0
    assert harmony.components["facial_symmetry"].note == "Good bilateral symmetry"
    assert [signal.status for signal in harmony.ratio_signals] == [BandStatus.GOOD]
    assert harmony.ratio_signals[0].band == (0.28, 0.35)
    assert harmony.ratio_signals[0].component_key == "eye_spacing"


def test_jaw_band_falls_back_to_cheek_ratio(face_config):
    measurements = Measurements(ratios=[ratio(TraitKey.JAW_TO_CHEEK_RATIO, 0.80)])

    harmony = compute_harmony_index(measurements, 0.9, face_config)

    assert harmony.ratio_signals[0].trait_key is TraitKey.JAW_TO_CHEEK_RATIO
    assert harmony.ratio_signals[0].label == "Jaw Proportion"
    assert harmony.ratio_signals[0].component_key == "jaw_ratio"


def test_poor_quality_dampens_and_lowers_confidence(face_config):
    measurements = Measurements(
        ratios=[ratio(TraitKey.EYE_SPACING_RATIO, 0.30), ratio(TraitKey.FACE_WIDTH_TO_HEIGHT, 0.62)],
        symmetry=SymmetryScore(overall=0.8),
    )

    harmony = compute_harmony_index(measurements, 0.4, face_config)

    assert harmony.score == 6.4
    assert harmony.confidence is Confidence.LOW


def test_many_low_confidence_signals(face_config):
    measurements = Measurements(
        ratios=[
            ratio(TraitKey.EYE_SPACING_RATIO, 0.30, Confidence.LOW),
            ratio(TraitKey.NOSE_WIDTH_RATIO, 0.25, Confidence.LOW),
            ratio(TraitKey.MOUTH_WIDTH_RATIO, 0.45, Confidence.LOW),
        ],
        symmetry=SymmetryScore(overall=0.8),
    )

    assert compute_harmony_index(measurements, 0.9, face_config).confidence is Confidence.LOW

    one_low = Measurements(ratios=measurements.ratios[:1], symmetry=measurements.symmetry)
    assert compute_harmony_index(one_low, 0.9, face_config).confidence is Confidence.MEDIUM


def test_body_harmony_has_no_golden_ratio(body_config):
    measurements = Measurements(
        ratios=[ratio(TraitKey.SHOULDER_TO_WAIST, 1.45), ratio(TraitKey.LEG_TO_TORSO, 0.80)],
        symmetry=SymmetryScore(overall=0.9),
    )

    harmony = compute_harmony_index(measurements, 0.9, body_config)

    assert set(harmony.components) == {"body_symmetry"}
    assert [signal.status for signal in harmony.ratio_signals] == [BandStatus.GOOD, BandStatus.OFF]
    assert harmony.score == pytest.approx((9.0 + 7.0 + 4.0) / 3, abs=0.05)


def test_empty_measurements_default_to_mean(face_config):
    harmony = compute_harmony_index(Measurements(), 0.9, face_config)

    assert harmony.score == 5.5
    assert harmony.components == {}
