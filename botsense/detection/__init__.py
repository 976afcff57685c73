"""Bot Signal Detection"""

# registry first: importing it registers the built-in detectors
from botsense.detection.registry import (
    DetectorRegistry,
    get_default_registry,
    list_registered_detectors,
    register_detector,
)
from botsense.detection.aggregator import FiredDetectors, aggregate, explain
from botsense.detection.engine import EvaluationEngine
from botsense.detection.errors import (
    BotSenseError,
    DetectorEvaluationError,
    DuplicateDetectorError,
    EmptyRegistryError,
)
from botsense.detection.result import DetectionReport, DetectionResult, Diagnostic
from botsense.detection.service import DetectionService, detection_service
from botsense.detection.snapshot import Snapshot

__all__ = [
    "BotSenseError",
    "DetectionReport",
    "DetectionResult",
    "DetectionService",
    "DetectorEvaluationError",
    "DetectorRegistry",
    "Diagnostic",
    "DuplicateDetectorError",
    "EmptyRegistryError",
    "EvaluationEngine",
    "FiredDetectors",
    "Snapshot",
    "aggregate",
    "detection_service",
    "explain",
    "get_default_registry",
    "list_registered_detectors",
    "register_detector",
]
