"""Detection Service"""

import logging

from botsense.config import settings
from botsense.detection.aggregator import aggregate, explain
from botsense.detection.audit import AuditLogger
from botsense.detection.engine import EvaluationEngine
from botsense.detection.registry import DetectorRegistry, get_default_registry
from botsense.detection.result import DetectionReport
from botsense.detection.snapshot import Snapshot

logger = logging.getLogger(__name__)


class DetectionService:
    """Evaluates a snapshot, derives the verdict and records the audit trail"""

    def __init__(
        self,
        registry: DetectorRegistry | None = None,
        fail_safe: bool | None = None,
        strict_empty: bool | None = None,
        audit: AuditLogger | None = None,
    ):
        self.registry = registry if registry is not None else get_default_registry()
        self.engine = EvaluationEngine(
            self.registry,
            fail_safe=settings.fail_safe if fail_safe is None else fail_safe,
            strict_empty=(
                settings.STRICT_EMPTY_REGISTRY if strict_empty is None else strict_empty
            ),
        )
        self.audit = audit or AuditLogger()

    def check(self, snapshot: Snapshot) -> DetectionReport:
        """Run all detectors against the snapshot"""
        results = self.engine.evaluate(snapshot)
        # verdict is derived from the finished result, never accumulated
        verdict = aggregate(results)
        report = DetectionReport(
            verdict=verdict,
            results=results,
            fired=tuple(explain(verdict, results)),
            diagnostics=results.diagnostics,
            timestamp=results.timestamp,
        )

        if verdict:
            logger.info("Bot detected: %s", ", ".join(report.fired))
        else:
            logger.debug("No bot detected (%d detectors)", len(results))

        self.audit.record(report)
        return report


# Shared instance bound to the default registry
detection_service = DetectionService()
