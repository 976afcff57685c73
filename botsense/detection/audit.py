"""Audit sink - one structured log record per detection check"""

import json
import logging

from botsense.config import settings
from botsense.detection.result import DetectionReport


class AuditLogger:
    """Writes the full detection report as a JSON line to the audit logger"""

    def __init__(self, logger_name: str | None = None, enabled: bool | None = None):
        self.logger = logging.getLogger(logger_name or settings.AUDIT_LOGGER_NAME)
        self.enabled = settings.AUDIT_LOG_ENABLED if enabled is None else enabled

    def record(self, report: DetectionReport) -> None:
        if not self.enabled:
            return
        level = logging.WARNING if report.diagnostics else logging.INFO
        self.logger.log(level, "%s", json.dumps(report.to_dict(), sort_keys=True))
