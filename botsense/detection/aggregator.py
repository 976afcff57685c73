"""Verdict Aggregator - reduces a DetectionResult to a single verdict"""

from collections.abc import Iterator, Mapping


def aggregate(result: Mapping[str, bool]) -> bool:
    """True iff at least one detector fired"""
    return any(result.values())


class FiredDetectors:
    """Lazy, restartable sequence of the detectors that fired, in result order"""

    def __init__(self, result: Mapping[str, bool]):
        self._result = result

    def __iter__(self) -> Iterator[str]:
        return (name for name, fired in self._result.items() if fired)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, name: object) -> bool:
        return bool(self._result.get(name, False))

    def __repr__(self) -> str:
        return f"FiredDetectors({list(self)!r})"


def explain(verdict: bool, result: Mapping[str, bool]) -> FiredDetectors:
    """Name every detector that fired (all of them, not just the first).
    Raises ValueError if the verdict does not match the result.
    """
    if verdict != aggregate(result):
        raise ValueError(
            f"Verdict {verdict} is inconsistent with detection result {dict(result)!r}"
        )
    return FiredDetectors(result)
