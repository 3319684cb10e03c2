import pytest

from score_engine.models import Confidence, FeatureKey, TraitKey
from score_engine.scoring import build_feature_breakdowns


def test_features_without_scored_traits_are_omitted(face_config, make_trait):
    features = build_feature_breakdowns([make_trait(TraitKey.EYE_SPACING_RATIO, 8.0)], 0.9, True, face_config)

    assert [feature.feature_key for feature in features] == [FeatureKey.EYES]
    eyes = features[0]
    assert eyes.rating == 8.0
    assert eyes.confidence is Confidence.HIGH
    assert eyes.summary == "Well-proportioned eyes with good spacing and shape."
    assert eyes.contributing_trait_keys == [TraitKey.EYE_SPACING_RATIO]


@pytest.mark.parametrize(
    ("confidences", "expected"),
    [
        ((Confidence.MEDIUM, Confidence.HIGH), Confidence.HIGH),
        ((Confidence.MEDIUM, Confidence.LOW), Confidence.MEDIUM),
        ((Confidence.LOW, Confidence.LOW), Confidence.LOW),
    ],
)
def test_confidence_from_mean_factor(face_config, make_trait, confidences, expected):
    traits = [
        make_trait(TraitKey.SKIN_QUALITY, 6.0, confidences[0]),
        make_trait(TraitKey.UNDER_EYE, 6.0, confidences[1]),
    ]

    (skin,) = build_feature_breakdowns(traits, 0.9, True, face_config)

    assert skin.feature_key is FeatureKey.SKIN
    assert skin.confidence is expected


def test_poor_quality_caps_confidence_at_medium(face_config, make_trait):
    (eyes,) = build_feature_breakdowns([make_trait(TraitKey.EYE_SPACING_RATIO, 8.0)], 0.55, True, face_config)
    assert eyes.confidence is Confidence.MEDIUM


def test_side_dependent_feature_is_low_without_side(face_config, make_trait):
    traits = [make_trait(TraitKey.JAW_TO_FACE_WIDTH_RATIO, 7.0)]

    (with_side,) = build_feature_breakdowns(traits, 0.9, True, face_config)
    (without_side,) = build_feature_breakdowns(traits, 0.9, False, face_config)

    assert with_side.feature_key is FeatureKey.JAWLINE
    assert with_side.confidence is Confidence.HIGH
    assert without_side.confidence is Confidence.LOW


def test_summary_tiers(face_config, make_trait):
    mid = build_feature_breakdowns([make_trait(TraitKey.NOSE_WIDTH_RATIO, 5.0)], 0.9, True, face_config)
    low = build_feature_breakdowns([make_trait(TraitKey.NOSE_WIDTH_RATIO, 4.0)], 0.9, True, face_config)

    assert mid[0].summary == "Average nose proportions."
    assert low[0].summary == "Nose measurements slightly outside ideal range."


def test_rating_is_mean_of_damped_scores(body_config, make_trait):
    traits = [
        make_trait(TraitKey.SHOULDER_TO_WAIST, 8.0),
        make_trait(TraitKey.CHEST_TO_WAIST, 6.0),
    ]

    (v_taper,) = build_feature_breakdowns(traits, 0.9, True, body_config)

    assert v_taper.feature_key is FeatureKey.V_TAPER
    assert v_taper.rating == 7.0
    assert v_taper.contributing_trait_keys == [TraitKey.SHOULDER_TO_WAIST, TraitKey.CHEST_TO_WAIST]
