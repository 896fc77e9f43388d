"""
Strategy component input/output models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.components.profile import InteractivityLevel, PageProfile


class RenderStrategy(str, Enum):
    """Page rendering strategies, most precomputed first."""

    STATIC = "static"
    INCREMENTAL = "incremental"
    PARTIAL = "partial"
    DYNAMIC = "dynamic"
    CLIENT = "client"


@dataclass(frozen=True)
class DecisionRule:
    """
    One row of the ordered decision table.

    `applies` decides whether the rule selects its strategy;
    `unmet_reason` explains why the strategy was not picked when it doesn't.
    """

    rule_id: str
    strategy: RenderStrategy
    applies: Callable[[PageProfile], bool]
    rationale: str
    unmet_reason: str


@dataclass(frozen=True)
class StrategyDecision:
    """
    Result of classification.

    rationale: rule ids that produced the decision, in evaluation order.
    rejected_alternatives: (strategy, reason) for every strategy not chosen,
        in RenderStrategy order.
    """

    strategy: RenderStrategy
    rationale: tuple[str, ...]
    rejected_alternatives: tuple[tuple[RenderStrategy, str], ...] = ()
    interactivity_level: InteractivityLevel = InteractivityLevel.NONE

    def rejected_reason(self, strategy: RenderStrategy) -> str | None:
        for rejected, reason in self.rejected_alternatives:
            if rejected is strategy:
                return reason
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy.value,
            "rationale": list(self.rationale),
            "rejectedAlternatives": {
                strategy.value: reason for strategy, reason in self.rejected_alternatives
            },
            "interactivityLevel": self.interactivity_level.value,
        }


# --- Input / Output Models ---


@dataclass(frozen=True)
class ClassifyInput:
    """Input for classifying a normalized profile."""

    profile: PageProfile


@dataclass(frozen=True)
class ClassifyOutput:
    """Output of classification. Classification never fails."""

    decision: StrategyDecision
    explanation: list[str] = field(default_factory=list)
