"""Detection Result Model"""

from collections.abc import Iterator, Mapping
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any, Literal

DiagnosticLevel = Literal["warning", "error"]


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal problem observed while evaluating detectors"""

    level: DiagnosticLevel
    message: str
    detector: str | None = None  # None for engine level diagnostics
    error_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class DetectionResult(Mapping[str, bool]):
    """Read-only mapping of detector name to outcome for one evaluation.

    Iteration follows registry order so reports are reproducible.
    """

    def __init__(
        self,
        outcomes: Mapping[str, bool] | None = None,
        diagnostics: list[Diagnostic] | tuple[Diagnostic, ...] = (),
        timestamp: datetime | None = None,
    ):
        self._outcomes = MappingProxyType(dict(outcomes or {}))
        self.diagnostics: tuple[Diagnostic, ...] = tuple(diagnostics)
        self.timestamp = timestamp or datetime.now(UTC)

    def __getitem__(self, name: str) -> bool:
        return self._outcomes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._outcomes)

    def __len__(self) -> int:
        return len(self._outcomes)

    def __eq__(self, other: object) -> bool:
        # timestamp and diagnostics are metadata, equality is about outcomes
        if isinstance(other, Mapping):
            return dict(self._outcomes) == dict(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"DetectionResult({dict(self._outcomes)!r})"

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        """Diagnostics raised by individual detectors"""
        return tuple(d for d in self.diagnostics if d.level == "error")

    def as_dict(self) -> dict[str, bool]:
        return dict(self._outcomes)


@dataclass
class DetectionReport:
    """Full outcome of a detection check: verdict plus supporting evidence"""

    verdict: bool
    results: DetectionResult
    fired: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __bool__(self) -> bool:
        return self.verdict

    @property
    def label(self) -> str:
        """Human readable verdict for the display layer"""
        return "bot detected" if self.verdict else "no bot detected"

    def to_dict(self) -> dict[str, Any]:
        """Structured record used for audit logging and API responses"""
        return {
            "verdict": self.verdict,
            "label": self.label,
            "results": self.results.as_dict(),
            "fired": list(self.fired),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "timestamp": self.timestamp.isoformat(),
        }
