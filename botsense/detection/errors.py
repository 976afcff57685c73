"""Detection Errors"""


class BotSenseError(Exception):
    """Base class for detection errors"""


class DuplicateDetectorError(BotSenseError):
    """Raised when a detector name is registered twice"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Detector already registered: {name}")


class DetectorEvaluationError(BotSenseError):
    """Raised (and captured) when a single detector fails during evaluation"""

    def __init__(self, name: str, cause: BaseException | None = None, reason: str | None = None):
        self.name = name
        self.cause = cause
        if reason is None:
            reason = f"{type(cause).__name__}: {cause}" if cause else "unknown failure"
        super().__init__(f"Detector '{name}' failed: {reason}")


class EmptyRegistryError(BotSenseError):
    """Evaluation was requested with no registered detectors.

    The verdict is trivially negative, which usually points to a
    misconfigured registry rather than a genuine "no bot" answer.
    """

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "No detectors registered; verdict is trivially negative (check configuration)"
        )
