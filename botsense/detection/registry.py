"""Detector Registry - Maps detector names to predicates"""

import logging
from collections.abc import Callable, ItemsView
from types import MappingProxyType

from botsense.detection.errors import DuplicateDetectorError
from botsense.detection.snapshot import Snapshot

logger = logging.getLogger(__name__)

Predicate = Callable[[Snapshot], bool]


class DetectorRegistry:
    """Ordered set of named detectors.

    Populated at configuration time and only read during evaluation, so a
    single registry can back any number of concurrent evaluations.
    """

    def __init__(self):
        self._detectors: dict[str, Predicate] = {}

    def register(self, name: str, predicate: Predicate) -> Predicate:
        """Add a detector.
        Raises DuplicateDetectorError if the name is taken; the first
        registration is kept.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Detector name must be a non-empty string")
        if not callable(predicate):
            raise ValueError(f"Detector '{name}' predicate is not callable")
        if name in self._detectors:
            logger.error("Rejected duplicate detector registration: %s", name)
            raise DuplicateDetectorError(name)
        self._detectors[name] = predicate
        logger.debug(
            "Registered detector: %s -> %s",
            name,
            getattr(predicate, "__name__", repr(predicate)),
        )
        return predicate

    def detector(self, name: str):
        """
        Decorator form of register().

        Usage:
        @registry.detector("webDriver")
        def web_driver(snapshot: Snapshot) -> bool:
            ...
        """

        def decorator(func: Predicate) -> Predicate:
            return self.register(name, func)

        return decorator

    def list_detectors(self) -> ItemsView[str, Predicate]:
        """Lazy, restartable view of (name, predicate) pairs in registration order"""
        return MappingProxyType(self._detectors).items()

    def names(self) -> list[str]:
        return list(self._detectors)

    def get(self, name: str) -> Predicate:
        """Get a registered predicate by name.
        Raises KeyError if detector is not found.
        """
        try:
            return self._detectors[name]
        except KeyError:
            raise KeyError(f"Detector not found: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._detectors

    def __len__(self) -> int:
        return len(self._detectors)

    def __repr__(self) -> str:
        return f"DetectorRegistry({self.names()!r})"


# Default registry, populated by the implementations package
_DETECTOR_REGISTRY = DetectorRegistry()


def register_detector(name: str):
    """
    Decorator to register a detector with the default registry.

    Usage:
    @register_detector("headlessBrowser")
    def headless_browser(snapshot: Snapshot) -> bool:
        ...
    """
    return _DETECTOR_REGISTRY.detector(name)


def get_default_registry() -> DetectorRegistry:
    return _DETECTOR_REGISTRY


def list_registered_detectors() -> list[str]:
    """List all detector names in the default registry"""
    return _DETECTOR_REGISTRY.names()


# Import implementations to trigger registration


def _register_all_detectors():
    """Import all detector implementations to register them
    - This is called at module load time.
    """
    # pylint: disable=import-outside-toplevel,unused-import
    from botsense.detection.implementations import browser

    logger.info("Registered %d detectors", len(_DETECTOR_REGISTRY))


# Auto-register on import
_register_all_detectors()
