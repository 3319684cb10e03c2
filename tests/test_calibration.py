import pytest

from score_engine.models import Confidence
from score_engine.scoring.calibration import (
    calibrate,
    calibrate_for_quality,
    confidence_factor,
    downgrade_confidence,
    quality_factor,
)


@pytest.mark.parametrize(
    ("quality", "expected"),
    [(0.95, 1.0), (0.7, 1.0), (0.65, 0.8), (0.55, 0.6), (0.5, 0.6), (0.3, 0.4)],
)
def test_quality_factor_tiers(face_config, quality, expected):
    assert quality_factor(quality, face_config) == expected


def test_confidence_factor_table(face_config):
    assert confidence_factor(Confidence.HIGH, face_config) == 1.0
    assert confidence_factor(Confidence.MEDIUM, face_config) == 0.75
    assert confidence_factor(Confidence.LOW, face_config) == 0.5


def test_identity_at_high_confidence_and_good_quality(face_config):
    for raw in (0.0, 2.3, 5.5, 8.7, 10.0):
        assert calibrate(raw, Confidence.HIGH, 0.9, face_config) == pytest.approx(raw)


def test_confidence_then_quality_steps(face_config):
    assert calibrate(9.0, Confidence.MEDIUM, 0.9, face_config) == pytest.approx(8.125)
    assert calibrate(9.0, Confidence.LOW, 0.4, face_config) == pytest.approx(6.2)
    assert calibrate(3.0, Confidence.HIGH, 0.65, face_config) == pytest.approx(3.5)


@pytest.mark.parametrize("raw", [0.0, 1.5, 5.5, 7.2, 10.0])
@pytest.mark.parametrize("confidence", list(Confidence))
@pytest.mark.parametrize("quality", [0.2, 0.55, 0.65, 0.9])
def test_calibration_never_moves_away_from_mean(face_config, raw, confidence, quality):
    damped = calibrate(raw, confidence, quality, face_config)

    assert 0.0 <= damped <= 10.0
    assert abs(damped - 5.5) <= abs(raw - 5.5) + 1e-9
    assert (damped - 5.5) * (raw - 5.5) >= 0


def test_quality_only_calibration(face_config):
    assert calibrate_for_quality(8.0, 0.9, face_config) == pytest.approx(8.0)
    assert calibrate_for_quality(8.0, 0.55, face_config) == pytest.approx(7.0)


def test_downgrade_confidence(face_config):
    assert downgrade_confidence(Confidence.HIGH, 0.4, face_config) is Confidence.LOW
    assert downgrade_confidence(Confidence.HIGH, 0.65, face_config) is Confidence.MEDIUM
    assert downgrade_confidence(Confidence.LOW, 0.65, face_config) is Confidence.LOW
    assert downgrade_confidence(Confidence.HIGH, 0.9, face_config) is Confidence.HIGH
