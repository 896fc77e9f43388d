"""
Caching component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.components.strategy import StrategyDecision


class CacheMode(str, Enum):
    NONE = "none"
    TIME_BASED = "time_based"
    TAG_BASED = "tag_based"
    ON_DEMAND = "on_demand"


class InvalidHintError(ValueError):
    """Raised when caching hints cannot produce a plan for the strategy."""

    code = "invalid_hint"

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


@dataclass(frozen=True)
class CachingError:
    """Caching synthesis error as returned by the component."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class CachingHints:
    """
    Caller preferences for the caching plan.

    regenerate_on_demand only matters for static pages. Values arrive as
    given on the wire; synthesize rejects malformed ones only for
    strategies that use them.
    """

    interval_seconds: Any = None
    tags: Any = ()
    regenerate_on_demand: Any = False

    @property
    def is_empty(self) -> bool:
        return self.interval_seconds is None and not self.tags and not self.regenerate_on_demand


@dataclass(frozen=True)
class CachingPolicy:
    """Policy constants for plan synthesis and header generation."""

    static_build_tag: str = "build:static"
    stale_while_revalidate: int = 86400
    tag_max_age: int = 31536000
    tag_header_name: str = "Cache-Tag"


@dataclass(frozen=True)
class CachingPlan:
    """
    Concrete caching directive for a strategy.

    interval_seconds is set iff mode is time_based; tags are non-empty iff
    mode is tag_based or on_demand. notes record discarded hints.
    """

    mode: CacheMode
    interval_seconds: int | None = None
    tags: tuple[str, ...] = ()
    notes: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"mode": self.mode.value}
        if self.interval_seconds is not None:
            result["intervalSeconds"] = self.interval_seconds
        if self.tags:
            result["tags"] = list(self.tags)
        if self.notes:
            result["notes"] = list(self.notes)
        return result


# --- Input / Output Models ---


@dataclass(frozen=True)
class SynthesizeInput:
    """Input for synthesizing a caching plan."""

    decision: StrategyDecision
    hints: CachingHints = field(default_factory=CachingHints)


@dataclass(frozen=True)
class SynthesizeOutput:
    """Output of caching plan synthesis."""

    plan: CachingPlan | None
    headers: dict[str, str] = field(default_factory=dict)
    errors: list[CachingError] = field(default_factory=list)
    success: bool = True
