"""Capture signal and photo quality models."""

from typing import Optional

from pydantic import BaseModel, Field

from score_engine.constants import DEFAULT_BRIGHTNESS, DEFAULT_FACE_SIZE, DEFAULT_SHARPNESS
from score_engine.models.enums import ClothingFit, IssueKind


class FaceCaptureSignals(BaseModel):
    """Raw capture signals for a face photo. Every field has a documented default."""

    brightness: float = Field(DEFAULT_BRIGHTNESS, ge=0.0, le=1.0)
    sharpness: float = Field(DEFAULT_SHARPNESS, ge=0.0, le=1.0)
    face_size: float = Field(
        DEFAULT_FACE_SIZE, ge=0.0, le=1.0, description="Fraction of the frame taken by the face."
    )
    head_tilt: float = Field(0.0, description="Degrees from level.")
    expression_neutral: bool = True
    hair_obstructing: bool = False
    glasses_present: bool = False
    face_count: int = Field(1, ge=0)
    side_provided: bool = False


class BodyCaptureSignals(BaseModel):
    """Raw capture signals for a full-body photo."""

    brightness: Optional[float] = Field(None, ge=0.0, le=1.0)
    sharpness: Optional[float] = Field(None, ge=0.0, le=1.0)
    full_body_visible: bool = True
    clothing_fit: ClothingFit = ClothingFit.FITTED
    pose_neutral: bool = True
    mirror_selfie: bool = False
    side_provided: bool = False


class PhotoQualityAssessment(BaseModel):
    """Single quality score plus the issues that produced it."""

    score: float = Field(..., ge=0.0, le=1.0)
    issues: list[IssueKind] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    can_proceed: bool

    model_config = {"frozen": True}

    def has_issue(self, issue: IssueKind) -> bool:
        return issue in self.issues
