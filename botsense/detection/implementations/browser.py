"""
Browser Automation Detectors

Client side signals that a page is driven by an automation framework
(Selenium, Puppeteer, Playwright) rather than a person. Each detector is a
pure predicate over a Snapshot.
"""

import logging

from botsense.detection.registry import register_detector
from botsense.detection.snapshot import Snapshot

logger = logging.getLogger(__name__)

HEADLESS_MARKERS = ("HeadlessChrome",)

AUTOMATION_ATTRIBUTES = frozenset({"selenium", "webdriver", "driver"})

# eval.toString().length reported by each browser family
EVAL_LENGTH_FAMILIES = {
    33: frozenset({"chrome", "opera", "edge"}),
    37: frozenset({"firefox", "safari"}),
    39: frozenset({"internet_explorer"}),
}

# Checked in order, first match wins ("edg/" and "opr" UAs also contain "chrome")
_BROWSER_MARKERS = (
    ("edge", ("edg/",)),
    ("internet_explorer", ("trident", "msie")),
    ("firefox", ("firefox",)),
    ("opera", ("opera", "opr")),
    ("chrome", ("chrome",)),
    ("safari", ("safari",)),
)


def browser_family(user_agent: str) -> str:
    """Classify a user agent string into a browser family, or "unknown" """
    ua = user_agent.lower()
    for family, markers in _BROWSER_MARKERS:
        if any(marker in ua for marker in markers):
            return family
    return "unknown"


@register_detector("webDriver")
def web_driver(snapshot: Snapshot) -> bool:
    """navigator.webdriver is set by WebDriver controlled browsers"""
    return snapshot.automation_flag is True


@register_detector("headlessBrowser")
def headless_browser(snapshot: Snapshot) -> bool:
    return any(marker in snapshot.user_agent for marker in HEADLESS_MARKERS)


@register_detector("noLanguages")
def no_languages(snapshot: Snapshot) -> bool:
    """Real browsers always declare at least one language"""
    return snapshot.language_count == 0


@register_detector("inconsistentEval")
def inconsistent_eval(snapshot: Snapshot) -> bool:
    """
    The source length of the native eval function is fixed per engine.
    A length belonging to another family than the one the user agent claims
    means the user agent is spoofed.
    """
    family = browser_family(snapshot.user_agent)
    if family == "unknown":
        return False

    expected_families = EVAL_LENGTH_FAMILIES.get(snapshot.eval_source_length)
    if expected_families is None:
        return False
    return family not in expected_families


@register_detector("domManipulation")
def dom_manipulation(snapshot: Snapshot) -> bool:
    """Some drivers leave marker attributes on the root element"""
    return any(name in AUTOMATION_ATTRIBUTES for name in snapshot.root_attribute_names)
