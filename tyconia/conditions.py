"""Unlock conditions for research, evaluated against tracked metrics."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

__all__ = [
    "ConditionFlag",
    "SatisfyAll",
    "SatisfyAny",
    "ReachedMetric",
    "UnderMetric",
    "evaluate_condition",
]


class ConditionFlag(ABC):
    """A condition that holds or fails for a set of tracked metrics."""

    @abstractmethod
    def evaluate(self, tracked: Mapping[str, float]) -> bool:
        """Return whether the condition holds for ``tracked``."""


@dataclass(frozen=True)
class SatisfyAll(ConditionFlag):
    """Holds when every nested condition holds (vacuously true when empty)."""

    conditions: tuple[ConditionFlag, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "conditions", tuple(self.conditions))

    def evaluate(self, tracked: Mapping[str, float]) -> bool:
        return all(condition.evaluate(tracked) for condition in self.conditions)


@dataclass(frozen=True)
class SatisfyAny(ConditionFlag):
    """Holds when at least one nested condition holds."""

    conditions: tuple[ConditionFlag, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "conditions", tuple(self.conditions))

    def evaluate(self, tracked: Mapping[str, float]) -> bool:
        return any(condition.evaluate(tracked) for condition in self.conditions)


@dataclass(frozen=True)
class ReachedMetric(ConditionFlag):
    """Holds when the metric is at least ``value``; missing metrics count as 0."""

    metric: str
    value: float

    def evaluate(self, tracked: Mapping[str, float]) -> bool:
        return tracked.get(self.metric, 0.0) >= self.value


@dataclass(frozen=True)
class UnderMetric(ConditionFlag):
    """Holds when the metric is below ``value``; missing metrics count as 0."""

    metric: str
    value: float

    def evaluate(self, tracked: Mapping[str, float]) -> bool:
        return tracked.get(self.metric, 0.0) < self.value


def evaluate_condition(condition: ConditionFlag, tracked: Mapping[str, float]) -> bool:
    """Evaluate ``condition`` against the tracked metrics."""
    return condition.evaluate(tracked)


def _conditions(items: Iterable[ConditionFlag]) -> tuple[ConditionFlag, ...]:
    return tuple(items)