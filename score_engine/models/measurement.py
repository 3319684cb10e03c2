"""Inbound measurement models supplied by the landmark/LLM collaborators."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from score_engine.models.enums import Confidence, Presentation, TraitKey


class RatioMeasurement(BaseModel):
    """A single measured ratio with its ideal band."""

    key: TraitKey = Field(..., description="Trait this ratio measures.")
    value: float = Field(..., description="Measured ratio value.")
    ideal_min: float = Field(..., description="Lower edge of the ideal band.")
    ideal_max: float = Field(..., description="Upper edge of the ideal band.")
    confidence: Confidence = Field(Confidence.MEDIUM, description="Measurement confidence.")
    percentile: Optional[float] = Field(None, ge=0, le=100)
    note: Optional[str] = Field(None, max_length=200)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def ensure_band_ordered(self) -> "RatioMeasurement":
        """Reject inverted ideal bands."""
        if self.ideal_min > self.ideal_max:
            raise ValueError("ideal_min must be <= ideal_max")
        return self


class SymmetryScore(BaseModel):
    """Bilateral symmetry measurement."""

    overall: float = Field(..., ge=0.0, le=1.0, description="Overall symmetry in [0, 1].")
    component_deltas: dict[str, float] = Field(
        default_factory=dict,
        description="Per-component deltas, e.g. eye_height_delta, mouth_corner_delta.",
    )
    confidence: Confidence = Confidence.MEDIUM
    notes: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class Measurements(BaseModel):
    """Everything the measurement provider returns for one analysis."""

    ratios: list[RatioMeasurement] = Field(default_factory=list)
    symmetry: Optional[SymmetryScore] = Field(
        None, description="Required by the pipeline; absent values fail the request."
    )

    model_config = {"frozen": True}

    def find(self, *keys: TraitKey) -> Optional[RatioMeasurement]:
        """Return the first ratio matching any of ``keys`` (in ``keys`` order)."""
        for key in keys:
            for ratio in self.ratios:
                if ratio.key == key:
                    return ratio
        return None


class AppearanceProfile(BaseModel):
    """Inferred presentation, trusted only above a confidence threshold."""

    presentation: Presentation
    confidence: float = Field(..., ge=0.0, le=1.0)
    age_min: Optional[int] = Field(None, ge=0)
    age_max: Optional[int] = Field(None, ge=0)
    photo_limitation: Optional[str] = Field(None, max_length=200)

    model_config = {"frozen": True}


class TraitOverride(BaseModel):
    """Trait score sourced from the external image-analysis service."""

    score: float = Field(..., ge=0.0, le=10.0)
    confidence: Confidence = Confidence.MEDIUM

    model_config = {"frozen": True}
