"""Closed vocabularies shared by the scoring models and configuration tables."""

from enum import Enum


class Confidence(str, Enum):
    """Ordinal confidence attached to any measurement or derived score."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Variant(str, Enum):
    FACE = "face"
    BODY = "body"


class Presentation(str, Enum):
    MALE_PRESENTING = "male_presenting"
    FEMALE_PRESENTING = "female_presenting"


class StylePreference(str, Enum):
    NEUTRAL = "neutral"
    MASCULINE_LEANING = "masculine_leaning"
    FEMININE_LEANING = "feminine_leaning"


class TraitKey(str, Enum):
    """Every trait either variant can score.

    Ratio traits come from the measurement provider, the rest can only be
    filled through external overrides.
    """

    # Face ratios
    EYE_SPACING_RATIO = "eye_spacing_ratio"
    NOSE_WIDTH_RATIO = "nose_width_ratio"
    MOUTH_WIDTH_RATIO = "mouth_width_ratio"
    JAW_TO_FACE_WIDTH_RATIO = "jaw_to_face_width_ratio"
    JAW_TO_CHEEK_RATIO = "jaw_to_cheek_ratio"
    FACE_WIDTH_TO_HEIGHT = "face_width_to_height"
    # Face, override only
    JAW_DEFINITION = "jaw_definition"
    CHIN_PROJECTION = "chin_projection"
    BROW_SHAPE = "brow_shape"
    SKIN_QUALITY = "skin_quality"
    UNDER_EYE = "under_eye"
    HAIR_FRAMING = "hair_framing"
    # Body ratios
    SHOULDER_TO_WAIST = "shoulder_to_waist"
    WAIST_TO_HIP = "waist_to_hip"
    CHEST_TO_WAIST = "chest_to_waist"
    HIP_TO_WAIST = "hip_to_waist"
    LEG_TO_TORSO = "leg_to_torso"
    ARM_LENGTH_PROPORTIONALITY = "arm_length_proportionality"
    SHOULDER_TO_HEAD_WIDTH = "shoulder_to_head_width"
    # Body, override only
    BODY_COMPOSITION = "body_composition"
    MUSCLE_BALANCE = "muscle_balance"
    POSTURE = "posture"
    # Both
    SYMMETRY = "symmetry"


class PillarKey(str, Enum):
    # Face
    STRUCTURE = "structure"
    FEATURES = "features"
    PRESENTATION = "presentation"
    HARMONY = "harmony"
    # Body
    PROPORTIONS = "proportions"
    COMPOSITION = "composition"
    POSTURE = "posture"
    SYMMETRY = "symmetry"


class LeverKey(str, Enum):
    HAIR_STYLING = "hair_styling"
    SKIN_ROUTINE = "skin_routine"
    BROW_GROOMING = "brow_grooming"
    UNDER_EYE_CARE = "under_eye_care"
    POSTURE_CORRECTION = "posture_correction"
    PHOTO_OPTIMIZATION = "photo_optimization"
    FACIAL_HAIR = "facial_hair"
    LIP_CARE = "lip_care"
    BODY_COMPOSITION = "body_composition"
    V_TAPER_TRAINING = "v_taper_training"
    LOWER_BODY_TRAINING = "lower_body_training"
    STYLE_TAILORING = "style_tailoring"


class Timeline(str, Enum):
    TODAY = "today"
    WEEKS_2_4 = "2_4_weeks"
    WEEKS_4_8 = "4_8_weeks"
    WEEKS_8_12 = "8_12_weeks"
    WEEKS_10_14 = "10_14_weeks"


class IssueKind(str, Enum):
    TOO_DARK = "too_dark"
    HARSH_SHADOWS = "harsh_shadows"
    TOO_BRIGHT = "too_bright"
    BLUR = "blur"
    TOO_CLOSE_WIDE_ANGLE = "too_close_wide_angle"
    HEAD_TILT = "head_tilt"
    EXPRESSION_NOT_NEUTRAL = "expression_not_neutral"
    HAIR_OBSTRUCTING = "hair_obstructing"
    GLASSES_OBSTRUCTING = "glasses_obstructing"
    MULTIPLE_FACES = "multiple_faces"
    NO_FACE = "no_face"
    SIDE_MISSING = "side_missing"
    NOT_FULL_BODY = "not_full_body"
    BAGGY_CLOTHES = "baggy_clothes"
    CLOTHING_TOO_LOOSE = "clothing_too_loose"
    POSE_INCONSISTENT = "pose_inconsistent"
    MIRROR_SELFIE_DISTORTION = "mirror_selfie_distortion"


class ClothingFit(str, Enum):
    FITTED = "fitted"
    LOOSE = "loose"
    VERY_LOOSE = "very_loose"


class BandStatus(str, Enum):
    GOOD = "good"
    OK = "ok"
    OFF = "off"


class FeatureKey(str, Enum):
    # Face
    EYES = "eyes"
    BROWS = "brows"
    NOSE = "nose"
    LIPS = "lips"
    JAWLINE = "jawline"
    SKIN = "skin"
    HAIR = "hair"
    HARMONY = "harmony"
    # Body
    V_TAPER = "v_taper"
    WAIST_DEFINITION = "waist_definition"
    HIP_PROPORTION = "hip_proportion"
    LEG_PROPORTION = "leg_proportion"
    POSTURE = "posture"
    SYMMETRY = "symmetry"
    BODY_COMPOSITION = "body_composition"
