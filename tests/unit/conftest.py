"""
Unit test configuration.
"""

import pytest

from botsense.detection import DetectorRegistry, Snapshot
from botsense.detection.audit import AuditLogger
from botsense.detection.implementations import browser
from tests.unit.user_agents import CHROME_UA

BROWSER_DETECTORS = [
    ("webDriver", browser.web_driver),
    ("headlessBrowser", browser.headless_browser),
    ("noLanguages", browser.no_languages),
    ("inconsistentEval", browser.inconsistent_eval),
    ("domManipulation", browser.dom_manipulation),
]


@pytest.fixture
def benign_snapshot():
    """Regular desktop Chrome with two languages and a native eval"""
    return Snapshot(
        automation_flag=False,
        user_agent=CHROME_UA,
        language_count=2,
        eval_source_length=33,
        root_attribute_names=("lang", "class"),
    )


@pytest.fixture
def browser_registry():
    """Fresh registry holding the built-in browser detectors"""
    registry = DetectorRegistry()
    for name, predicate in BROWSER_DETECTORS:
        registry.register(name, predicate)
    return registry


@pytest.fixture
def silent_audit():
    return AuditLogger(enabled=False)
