"""Evaluation Engine - runs every registered detector against a snapshot"""

import logging

from botsense.detection.errors import DetectorEvaluationError, EmptyRegistryError
from botsense.detection.registry import DetectorRegistry
from botsense.detection.result import DetectionResult, Diagnostic
from botsense.detection.snapshot import Snapshot

logger = logging.getLogger(__name__)


class EvaluationEngine:
    """Builds a DetectionResult for a snapshot.

    A faulting detector never aborts the batch: its failure is logged,
    recorded as a diagnostic and its outcome is set by the fail policy
    (fail-open records False, fail-safe records True).
    """

    def __init__(
        self,
        registry: DetectorRegistry,
        fail_safe: bool = False,
        strict_empty: bool = False,
    ):
        """Initialize the engine

        Args:
            registry: The detectors to evaluate, in registration order
            fail_safe: Treat a faulting detector as fired instead of absent
            strict_empty: Raise EmptyRegistryError instead of warning when
                the registry has no detectors
        """
        self.registry = registry
        self.fail_safe = fail_safe
        self.strict_empty = strict_empty

    def evaluate(self, snapshot: Snapshot) -> DetectionResult:
        """Evaluate all detectors and collect their outcomes"""
        if len(self.registry) == 0:
            return self._empty_result()

        outcomes: dict[str, bool] = {}
        diagnostics: list[Diagnostic] = []

        for name, predicate in self.registry.list_detectors():
            try:
                outcomes[name] = self._run_detector(name, predicate, snapshot)
            except DetectorEvaluationError as e:
                logger.warning("%s", e, exc_info=e.cause)
                outcomes[name] = self.fail_safe
                diagnostics.append(
                    Diagnostic(
                        level="error",
                        message=str(e),
                        detector=name,
                        error_type=type(e.cause).__name__ if e.cause else type(e).__name__,
                    )
                )

        logger.debug(
            "Evaluated %d detectors (%d failed)", len(outcomes), len(diagnostics)
        )
        return DetectionResult(outcomes, diagnostics)

    def _run_detector(self, name, predicate, snapshot: Snapshot) -> bool:
        """Invoke a single predicate, normalizing any failure to DetectorEvaluationError"""
        try:
            outcome = predicate(snapshot)
        except Exception as e:  # pylint: disable=broad-exception-caught
            raise DetectorEvaluationError(name, cause=e) from e

        if not isinstance(outcome, bool):
            raise DetectorEvaluationError(
                name, reason=f"returned {type(outcome).__name__}, expected bool"
            )
        return outcome

    def _empty_result(self) -> DetectionResult:
        error = EmptyRegistryError()
        if self.strict_empty:
            raise error
        logger.warning("%s", error)
        return DetectionResult(
            {},
            [
                Diagnostic(
                    level="warning",
                    message=str(error),
                    error_type=type(error).__name__,
                )
            ],
        )
