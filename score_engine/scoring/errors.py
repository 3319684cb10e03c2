"""Errors raised by the scoring pipeline."""


class ScoringError(ValueError):
    """Raised when a scoring request cannot be processed."""

    pass


class MissingMeasurementError(ScoringError):
    """Raised when a required measurement (e.g. symmetry) is absent."""

    pass


class PhotoQualityBlockedError(ScoringError):
    """Raised when photo quality is below the block threshold."""

    def __init__(self, score: float, threshold: float, issues: list[str] | None = None):
        self.score = score
        self.threshold = threshold
        self.issues = issues or []
        super().__init__(
            f"Photo quality {score:.2f} is below the minimum of {threshold:.2f}; retake the photo"
        )


class InconsistentPhotoQualityError(ScoringError):
    """Raised when an assessment's can_proceed flag contradicts its score."""

    def __init__(self, score: float, threshold: float, can_proceed: bool):
        self.score = score
        self.threshold = threshold
        self.can_proceed = can_proceed
        super().__init__(
            f"Photo quality {score:.2f} with can_proceed={can_proceed} disagrees with the "
            f"block threshold {threshold:.2f}"
        )
