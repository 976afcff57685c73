"""Detector Implementations"""

# Imports trigger registration via decorators
from botsense.detection.implementations.browser import (
    dom_manipulation,
    headless_browser,
    inconsistent_eval,
    no_languages,
    web_driver,
)

__all__ = [
    "web_driver",
    "headless_browser",
    "no_languages",
    "inconsistent_eval",
    "dom_manipulation",
]
