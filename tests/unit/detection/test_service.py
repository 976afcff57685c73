"""Detection Service Test Suite - end to end scenarios"""

import json
import logging

import pytest

from botsense.detection import (
    DetectionService,
    DetectorRegistry,
    EmptyRegistryError,
    Snapshot,
    aggregate,
    detection_service,
)
from botsense.detection.audit import AuditLogger
from tests.unit.user_agents import CHROME_UA, HEADLESS_UA

NAMES = ["webDriver", "headlessBrowser", "noLanguages", "inconsistentEval", "domManipulation"]


def _all_false(**overrides):
    outcomes = dict.fromkeys(NAMES, False)
    outcomes.update(overrides)
    return outcomes


class TestScenarios:
    """
    Test Suite: end to end detection

    Validates that the service:
    - evaluates every built-in detector
    - derives the verdict from the finished result
    - reports every detector that fired
    """

    def test_automation_flag_only(self, browser_registry, benign_snapshot, silent_audit):
        service = DetectionService(browser_registry, audit=silent_audit)
        snapshot = benign_snapshot.model_copy(update={"automation_flag": True})

        report = service.check(snapshot)

        assert report.results.as_dict() == _all_false(webDriver=True)
        assert report.verdict is True
        assert report.fired == ("webDriver",)

    def test_headless_user_agent(self, browser_registry, silent_audit):
        service = DetectionService(browser_registry, audit=silent_audit)
        snapshot = Snapshot(automation_flag=False, user_agent=HEADLESS_UA, language_count=2)

        report = service.check(snapshot)

        assert report.results["webDriver"] is False
        assert report.results["headlessBrowser"] is True
        assert report.verdict is True
        assert report.label == "bot detected"

    def test_benign_snapshot(self, browser_registry, benign_snapshot, silent_audit):
        service = DetectionService(browser_registry, audit=silent_audit)

        report = service.check(benign_snapshot)

        assert report.results.as_dict() == _all_false()
        assert report.verdict is False
        assert not report
        assert report.fired == ()
        assert report.label == "no bot detected"

    def test_empty_registry(self, silent_audit):
        service = DetectionService(DetectorRegistry(), audit=silent_audit, strict_empty=False)

        report = service.check(Snapshot())

        assert report.results.as_dict() == {}
        assert report.verdict is False
        assert report.diagnostics[0].level == "warning"

    def test_empty_registry_strict(self, silent_audit):
        service = DetectionService(DetectorRegistry(), audit=silent_audit, strict_empty=True)
        with pytest.raises(EmptyRegistryError):
            service.check(Snapshot())

    def test_every_signal_reported(self, browser_registry, silent_audit):
        service = DetectionService(browser_registry, audit=silent_audit)
        snapshot = Snapshot(
            automation_flag=True,
            user_agent=HEADLESS_UA,
            language_count=0,
            eval_source_length=37,
            root_attribute_names=["webdriver"],
        )

        report = service.check(snapshot)

        assert report.fired == tuple(NAMES)
        assert report.verdict is aggregate(report.results)

    def test_default_service_uses_default_registry(self, benign_snapshot):
        report = detection_service.check(benign_snapshot)
        assert list(report.results) == NAMES


class TestAuditLogger:
    def test_audit_record_contains_full_result(self, browser_registry, caplog):
        service = DetectionService(
            browser_registry, audit=AuditLogger("botsense.audit.test", enabled=True)
        )
        snapshot = Snapshot(automation_flag=True, user_agent=CHROME_UA)

        with caplog.at_level(logging.INFO, logger="botsense.audit.test"):
            service.check(snapshot)

        records = [r for r in caplog.records if r.name == "botsense.audit.test"]
        assert len(records) == 1
        payload = json.loads(records[0].getMessage())
        assert payload["verdict"] is True
        assert payload["fired"] == ["webDriver"]
        assert payload["results"] == _all_false(webDriver=True)
        assert payload["diagnostics"] == []

    def test_audit_warns_when_diagnostics_present(self, caplog):
        def broken(snapshot):
            raise ValueError("boom")

        registry = DetectorRegistry()
        registry.register("broken", broken)
        service = DetectionService(
            registry, audit=AuditLogger("botsense.audit.test", enabled=True)
        )

        with caplog.at_level(logging.INFO, logger="botsense.audit.test"):
            report = service.check(Snapshot())

        assert report.verdict is False
        records = [r for r in caplog.records if r.name == "botsense.audit.test"]
        assert records[0].levelno == logging.WARNING
        payload = json.loads(records[0].getMessage())
        assert payload["diagnostics"][0]["detector"] == "broken"

    def test_disabled_audit_is_silent(self, browser_registry, benign_snapshot, caplog):
        service = DetectionService(
            browser_registry, audit=AuditLogger("botsense.audit.test", enabled=False)
        )

        with caplog.at_level(logging.INFO, logger="botsense.audit.test"):
            service.check(benign_snapshot)

        assert not [r for r in caplog.records if r.name == "botsense.audit.test"]
