import pytest

from score_engine.models import (
    Confidence,
    LeverKey,
    Measurements,
    PillarKey,
    Presentation,
    ScoringRequest,
    StylePreference,
    TraitKey,
    TraitOverride,
    Variant,
)
from score_engine.scoring import (
    InconsistentPhotoQualityError,
    MissingMeasurementError,
    PhotoQualityBlockedError,
    ScoringError,
    ScoringPipeline,
    run_scoring_pipeline,
)


def assert_output_invariants(output):
    for trait in output.trait_scores:
        assert 0.0 <= trait.damped_score <= 10.0
    for pillar in output.pillar_scores:
        assert 0.0 <= pillar.score <= 10.0
    assert 0.0 <= output.overall_current <= 10.0
    assert output.overall_current <= output.overall_potential.min <= output.overall_potential.max <= 10.0
    assert len(output.top_levers) <= 3
    assert [lever.priority for lever in output.top_levers] == list(range(1, len(output.top_levers) + 1))
    if output.harmony_index is not None:
        assert 0.0 <= output.harmony_index.score <= 10.0


def test_face_pipeline_end_to_end(face_request):
    output = run_scoring_pipeline(face_request, Variant.FACE)

    assert output.variant is Variant.FACE
    assert output.style_preference is StylePreference.NEUTRAL
    assert output.overall_current == 7.5
    assert output.overall.current == output.overall_current
    assert output.overall.confidence is Confidence.MEDIUM
    assert output.overall.summary == "Well above average facial harmony with strong features."
    assert (output.overall_potential.min, output.overall_potential.max) == (7.8, 9.0)
    assert [lever.lever_key for lever in output.top_levers] == [LeverKey.HAIR_STYLING, LeverKey.SKIN_ROUTINE]
    assert output.calibration_applied is False

    pillars = {pillar.pillar_key: pillar for pillar in output.pillar_scores}
    assert pillars[PillarKey.STRUCTURE].score == 8.0
    assert pillars[PillarKey.PRESENTATION].score == 5.5
    assert pillars[PillarKey.PRESENTATION].confidence is Confidence.LOW

    traits = {trait.trait_key: trait for trait in output.trait_scores}
    assert traits[TraitKey.EYE_SPACING_RATIO].damped_score == 8.7
    assert traits[TraitKey.SYMMETRY].damped_score == 8.2

    assert output.harmony_index.score == pytest.approx(6.95, abs=0.06)
    assert set(output.harmony_index.components) == {"facial_symmetry", "golden_ratio_proximity"}
    assert {feature.label for feature in output.features} >= {"Eyes", "Nose", "Lips", "Jawline", "Harmony"}
    assert_output_invariants(output)


def test_pipeline_is_deterministic(face_request, face_config):
    pipeline = ScoringPipeline(face_config)

    first = pipeline.run(face_request).model_dump_json()
    second = pipeline.run(face_request).model_dump_json()

    assert first == second


def test_low_quality_applies_calibration(face_measurements, make_quality):
    request = ScoringRequest(measurements=face_measurements, photo_quality=make_quality(0.65))

    output = run_scoring_pipeline(request)

    assert output.calibration_applied is True
    assert output.top_levers[0].lever_key is LeverKey.PHOTO_OPTIMIZATION
    assert output.overall.confidence is not Confidence.HIGH
    assert output.overall_current < 7.5
    assert_output_invariants(output)


def test_presentation_override_selects_weights(face_request):
    request = face_request.model_copy(update={"presentation_override": Presentation.MALE_PRESENTING})

    output = run_scoring_pipeline(request)
    structure = next(p for p in output.pillar_scores if p.pillar_key is PillarKey.STRUCTURE)

    assert output.style_preference is StylePreference.MASCULINE_LEANING
    assert structure.weight == 0.42


def test_overrides_fill_presentation_pillar(face_request):
    request = face_request.model_copy(
        update={"external_overrides": {TraitKey.SKIN_QUALITY: TraitOverride(score=3.0, confidence=Confidence.HIGH)}}
    )

    output = run_scoring_pipeline(request)
    presentation = next(p for p in output.pillar_scores if p.pillar_key is PillarKey.PRESENTATION)

    assert presentation.score == 3.0
    assert presentation.contributing_trait_keys == [TraitKey.SKIN_QUALITY]
    assert output.top_levers[0].lever_key is LeverKey.SKIN_ROUTINE


def test_missing_symmetry_fails_fast(face_measurements, make_quality):
    request = ScoringRequest(
        measurements=Measurements(ratios=face_measurements.ratios),
        photo_quality=make_quality(0.9),
    )

    with pytest.raises(MissingMeasurementError):
        run_scoring_pipeline(request)


def test_blocked_photo_fails_fast(face_measurements, make_quality):
    request = ScoringRequest(
        measurements=face_measurements,
        photo_quality=make_quality(0.2, can_proceed=False),
    )

    with pytest.raises(PhotoQualityBlockedError) as excinfo:
        run_scoring_pipeline(request)

    assert isinstance(excinfo.value, ScoringError)
    assert excinfo.value.score == 0.2


def test_low_score_is_blocked_even_when_flagged_to_proceed(face_measurements, make_quality):
    request = ScoringRequest(
        measurements=face_measurements,
        photo_quality=make_quality(0.05, can_proceed=True),
    )

    with pytest.raises(PhotoQualityBlockedError) as excinfo:
        run_scoring_pipeline(request, Variant.FACE)

    assert excinfo.value.threshold == 0.35


def test_block_threshold_follows_variant(body_measurements, make_quality):
    request = ScoringRequest(measurements=body_measurements, photo_quality=make_quality(0.32))

    output = run_scoring_pipeline(request, Variant.BODY)

    assert output.variant is Variant.BODY
    with pytest.raises(PhotoQualityBlockedError):
        run_scoring_pipeline(request, Variant.FACE)


def test_blocking_flag_with_passing_score_is_rejected(face_measurements, make_quality):
    request = ScoringRequest(
        measurements=face_measurements,
        photo_quality=make_quality(0.9, can_proceed=False),
    )

    with pytest.raises(InconsistentPhotoQualityError) as excinfo:
        run_scoring_pipeline(request)

    assert isinstance(excinfo.value, ScoringError)
    assert excinfo.value.score == 0.9


def test_body_pipeline(body_measurements, make_quality):
    request = ScoringRequest(measurements=body_measurements, photo_quality=make_quality(0.8))

    output = run_scoring_pipeline(request, Variant.BODY)

    assert output.variant is Variant.BODY
    assert [pillar.pillar_key for pillar in output.pillar_scores] == [
        PillarKey.PROPORTIONS,
        PillarKey.COMPOSITION,
        PillarKey.POSTURE,
        PillarKey.SYMMETRY,
    ]
    assert set(output.harmony_index.components) == {"body_symmetry"}
    # medium confidence measurements are damped
    assert output.calibration_applied is True
    assert output.top_levers[0].lever_key is LeverKey.STYLE_TAILORING
    assert_output_invariants(output)


def test_face_ratios_ignored_by_body_variant(face_request):
    output = run_scoring_pipeline(face_request, Variant.BODY)

    assert [trait.trait_key for trait in output.trait_scores] == [TraitKey.SYMMETRY]
    assert_output_invariants(output)
