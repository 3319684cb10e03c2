# ============================================================================
# SERVICE CONFIGURATION
# ============================================================================
import os

SERVICE_NAME = "Aesthetic Score Engine API"
SERVICE_VERSION = "0.1.0"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "9000"))
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:8081").split(",")
    if origin.strip()
]

# ============================================================================
# SCORE SCALE
# ============================================================================
TARGET_MEAN = 5.5  # Population mean every calibration pulls toward
SCORE_MIN = 0.0
SCORE_MAX = 10.0
SCORE_DECIMALS = 1  # Rounding applied when assembling outputs

# ============================================================================
# PHOTO QUALITY
# ============================================================================
FACE_QUALITY_BLOCK_BELOW = 0.35
BODY_QUALITY_BLOCK_BELOW = 0.30
QUALITY_HEAVY_DAMPEN_BELOW = 0.5
QUALITY_MEDIUM_DAMPEN_BELOW = 0.6
QUALITY_LIGHT_DAMPEN_BELOW = 0.7  # At or above this, no quality damping

# Capture thresholds
BRIGHTNESS_DARK_BELOW = 0.3
BRIGHTNESS_HARSH_ABOVE = 0.85
SHARPNESS_BLUR_BELOW = 0.5
FACE_SIZE_TOO_CLOSE_ABOVE = 0.6
HEAD_TILT_MAX_DEGREES = 10.0

# Capture defaults when a signal is not supplied
DEFAULT_BRIGHTNESS = 0.5
DEFAULT_SHARPNESS = 0.7
DEFAULT_FACE_SIZE = 0.4

# ============================================================================
# CALIBRATION
# ============================================================================
CONFIDENCE_FACTOR_HIGH = 1.0
CONFIDENCE_FACTOR_MEDIUM = 0.75
CONFIDENCE_FACTOR_LOW = 0.5

QUALITY_FACTOR_HEAVY = 0.4  # quality < 0.5
QUALITY_FACTOR_MEDIUM = 0.6  # quality < 0.6
QUALITY_FACTOR_LIGHT = 0.8  # quality < 0.7

# ============================================================================
# RATIO SCORING
# ============================================================================
IN_BAND_FLOOR = 7.0  # Score at either band edge
IN_BAND_SPAN = 3.0  # Extra points available at band center
OUT_OF_BAND_PENALTY_PER_STD = 2.0
OUT_OF_BAND_FLOOR = 2.0

# ============================================================================
# PILLARS & APPEARANCE
# ============================================================================
APPEARANCE_CONFIDENCE_THRESHOLD = 0.65  # Below this an inferred profile is ignored
SIDE_MISSING_WEIGHT_PENALTY = 0.5

# ============================================================================
# LEVERS & POTENTIAL
# ============================================================================
MAX_TOP_LEVERS = 3
PHOTO_LEVER_QUALITY_BOOST = 2.0
SIDE_MISSING_LEVER_PENALTY = 0.5
LOW_QUALITY_DELTA_SCALE = 0.7  # Applied to lever deltas when quality < 0.6
MAX_TOTAL_DELTA = 2.5  # Cap on summed delta_max of the selected levers
POTENTIAL_MIN_SCALE = 0.7
POTENTIAL_MAX_SCALE = 0.85
POTENTIAL_MIN_CAP = 8.5
POTENTIAL_MAX_CAP = 9.0

# ============================================================================
# HARMONY
# ============================================================================
GOLDEN_RATIO = 1.618
GOLDEN_RATIO_TIERS = ((0.05, 8.0), (0.10, 6.5), (0.15, 5.0))
GOLDEN_RATIO_FALLBACK_SCORE = 4.0
HARMONY_OK_SCORE = 5.5
HARMONY_OFF_SCORE = 4.0
HARMONY_LOW_SIGNALS_FOR_LOW = 2  # More than this many low-confidence signals => low

# ============================================================================
# FEATURE BREAKDOWN
# ============================================================================
FEATURE_HIGH_AT = 6.5
FEATURE_MID_AT = 4.5
FEATURE_CONFIDENCE_HIGH_ABOVE = 0.8
FEATURE_CONFIDENCE_MEDIUM_ABOVE = 0.6
