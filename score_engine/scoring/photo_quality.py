"""Photo quality assessment from capture signals.

Each violated capture rule subtracts a fixed penalty from a perfect score
of 1.0 and records one issue plus one user-facing warning. A missing side
photo is recorded but never penalized.
"""

import logging

from score_engine import constants
from score_engine.models.enums import ClothingFit, IssueKind
from score_engine.models.quality import BodyCaptureSignals, FaceCaptureSignals, PhotoQualityAssessment

logger = logging.getLogger(__name__)

# Face penalties
FACE_PENALTIES = {
    IssueKind.TOO_DARK: 0.2,
    IssueKind.HARSH_SHADOWS: 0.1,
    IssueKind.BLUR: 0.25,
    IssueKind.TOO_CLOSE_WIDE_ANGLE: 0.15,
    IssueKind.HEAD_TILT: 0.1,
    IssueKind.EXPRESSION_NOT_NEUTRAL: 0.1,
    IssueKind.HAIR_OBSTRUCTING: 0.1,
    IssueKind.GLASSES_OBSTRUCTING: 0.1,
    IssueKind.MULTIPLE_FACES: 0.3,
}

# Body penalties
BODY_PENALTIES = {
    IssueKind.TOO_DARK: 0.25,
    IssueKind.TOO_BRIGHT: 0.15,
    IssueKind.BLUR: 0.20,
    IssueKind.NOT_FULL_BODY: 0.30,
    IssueKind.BAGGY_CLOTHES: 0.15,
    IssueKind.CLOTHING_TOO_LOOSE: 0.25,
    IssueKind.POSE_INCONSISTENT: 0.10,
    IssueKind.MIRROR_SELFIE_DISTORTION: 0.10,
}

WARNINGS = {
    IssueKind.TOO_DARK: "Move to a brighter location",
    IssueKind.HARSH_SHADOWS: "Harsh lighting detected - try diffused light",
    IssueKind.TOO_BRIGHT: "Lighting is too bright - avoid direct sun or flash",
    IssueKind.BLUR: "Image is blurry - hold steady or clean lens",
    IssueKind.TOO_CLOSE_WIDE_ANGLE: "Too close - step back to reduce lens distortion",
    IssueKind.HEAD_TILT: "Keep head level for accurate measurements",
    IssueKind.EXPRESSION_NOT_NEUTRAL: "Try a neutral expression for best results",
    IssueKind.HAIR_OBSTRUCTING: "Move hair away from face",
    IssueKind.GLASSES_OBSTRUCTING: "Remove glasses for more accurate analysis",
    IssueKind.MULTIPLE_FACES: "Only one face should be in frame",
    IssueKind.NO_FACE: "No face detected",
    IssueKind.NOT_FULL_BODY: "Full body visibility improves assessment accuracy",
    IssueKind.BAGGY_CLOTHES: "Fitted clothing allows for more accurate body assessment",
    IssueKind.CLOTHING_TOO_LOOSE: "Very loose clothing significantly limits body assessment accuracy",
    IssueKind.POSE_INCONSISTENT: "A neutral standing pose provides the most accurate measurements",
    IssueKind.MIRROR_SELFIE_DISTORTION: "Mirror selfies can cause slight distortion",
}

FACE_SIDE_MISSING_WARNING = "Side photo would improve jaw/chin analysis"
BODY_SIDE_MISSING_WARNING = "Side photo would significantly improve posture and proportion analysis"


def _finalize(
    score: float,
    issues: list[IssueKind],
    warnings: list[str],
    block_below: float,
) -> PhotoQualityAssessment:
    score = round(max(0.0, min(1.0, score)), 2)
    return PhotoQualityAssessment(
        score=score,
        issues=issues,
        warnings=warnings,
        can_proceed=score >= block_below,
    )


def assess_face_photo_quality(
    signals: FaceCaptureSignals,
    block_below: float = constants.FACE_QUALITY_BLOCK_BELOW,
) -> PhotoQualityAssessment:
    """
    Score a face photo from its capture signals.

    Args:
        signals: Brightness, sharpness, framing and pose signals for the photo
        block_below: Scores under this value cannot proceed to scoring

    Returns:
        PhotoQualityAssessment with score rounded to 2 decimals
    """
    issues: list[IssueKind] = []
    warnings: list[str] = []
    score = 1.0

    def flag(issue: IssueKind) -> None:
        nonlocal score
        issues.append(issue)
        warnings.append(WARNINGS[issue])
        score -= FACE_PENALTIES.get(issue, 0.0)

    # Lighting
    if signals.brightness < constants.BRIGHTNESS_DARK_BELOW:
        flag(IssueKind.TOO_DARK)
    elif signals.brightness > constants.BRIGHTNESS_HARSH_ABOVE:
        flag(IssueKind.HARSH_SHADOWS)

    if signals.sharpness < constants.SHARPNESS_BLUR_BELOW:
        flag(IssueKind.BLUR)

    if signals.face_size > constants.FACE_SIZE_TOO_CLOSE_ABOVE:
        flag(IssueKind.TOO_CLOSE_WIDE_ANGLE)

    if abs(signals.head_tilt) > constants.HEAD_TILT_MAX_DEGREES:
        flag(IssueKind.HEAD_TILT)

    if not signals.expression_neutral:
        flag(IssueKind.EXPRESSION_NOT_NEUTRAL)

    if signals.hair_obstructing:
        flag(IssueKind.HAIR_OBSTRUCTING)

    if signals.glasses_present:
        flag(IssueKind.GLASSES_OBSTRUCTING)

    if signals.face_count > 1:
        flag(IssueKind.MULTIPLE_FACES)
    elif signals.face_count == 0:
        flag(IssueKind.NO_FACE)
        score = 0.0

    # Side photo missing is noted, not penalized
    if not signals.side_provided:
        issues.append(IssueKind.SIDE_MISSING)
        warnings.append(FACE_SIDE_MISSING_WARNING)

    assessment = _finalize(score, issues, warnings, block_below)
    logger.debug(
        "Face photo quality %.2f (issues=%s, can_proceed=%s)",
        assessment.score,
        [issue.value for issue in assessment.issues],
        assessment.can_proceed,
    )
    return assessment


def assess_body_photo_quality(
    signals: BodyCaptureSignals,
    block_below: float = constants.BODY_QUALITY_BLOCK_BELOW,
) -> PhotoQualityAssessment:
    """Score a full-body photo. Unspecified brightness/sharpness are not checked."""
    issues: list[IssueKind] = []
    warnings: list[str] = []
    score = 1.0

    def flag(issue: IssueKind) -> None:
        nonlocal score
        issues.append(issue)
        warnings.append(WARNINGS[issue])
        score -= BODY_PENALTIES[issue]

    if signals.brightness is not None:
        if signals.brightness < constants.BRIGHTNESS_DARK_BELOW:
            flag(IssueKind.TOO_DARK)
        elif signals.brightness > constants.BRIGHTNESS_HARSH_ABOVE:
            flag(IssueKind.TOO_BRIGHT)

    if signals.sharpness is not None and signals.sharpness < constants.SHARPNESS_BLUR_BELOW:
        flag(IssueKind.BLUR)

    if not signals.full_body_visible:
        flag(IssueKind.NOT_FULL_BODY)

    if signals.clothing_fit is ClothingFit.LOOSE:
        flag(IssueKind.BAGGY_CLOTHES)
    elif signals.clothing_fit is ClothingFit.VERY_LOOSE:
        flag(IssueKind.CLOTHING_TOO_LOOSE)

    if not signals.pose_neutral:
        flag(IssueKind.POSE_INCONSISTENT)

    if signals.mirror_selfie:
        flag(IssueKind.MIRROR_SELFIE_DISTORTION)

    if not signals.side_provided:
        issues.append(IssueKind.SIDE_MISSING)
        warnings.append(BODY_SIDE_MISSING_WARNING)

    assessment = _finalize(score, issues, warnings, block_below)
    logger.debug(
        "Body photo quality %.2f (issues=%s, can_proceed=%s)",
        assessment.score,
        [issue.value for issue in assessment.issues],
        assessment.can_proceed,
    )
    return assessment
