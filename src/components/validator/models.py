"""
Validator component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.components.profile import InteractivityLevel
from src.components.strategy import StrategyDecision


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


# Lower rank sorts first
SEVERITY_RANK: dict[Severity, int] = {Severity.ERROR: 0, Severity.WARNING: 1}


class DeclaredConfigError(ValueError):
    """Raised when a declared page configuration cannot be parsed."""

    code = "invalid_config"

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


@dataclass(frozen=True)
class SuspenseBoundary:
    boundary_id: str
    wraps_dynamic_only: bool


@dataclass(frozen=True)
class DeclaredConfig:
    """
    What the page implementer actually wrote.

    explicit_cache_directives holds (fetch_site, has_explicit_directive)
    pairs in declaration order. component_count is an optional hint used to
    scale the client-boundary threshold.
    """

    async_accessors: frozenset[str] = frozenset()
    client_boundary_scope: frozenset[str] = frozenset()
    suspense_boundaries: tuple[SuspenseBoundary, ...] = ()
    explicit_cache_directives: tuple[tuple[str, bool], ...] = ()
    client_props_contain_secrets: bool = False
    component_count: int | None = None


@dataclass(frozen=True)
class ValidationFinding:
    """A single pitfall detected in a declared configuration."""

    rule_id: str
    severity: Severity
    message: str
    location_hint: str
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "ruleId": self.rule_id,
            "name": self.name,
            "severity": self.severity.value,
            "message": self.message,
            "locationHint": self.location_hint,
        }


def _default_ratios() -> dict[InteractivityLevel, float]:
    return {
        InteractivityLevel.NONE: 0.0,
        InteractivityLevel.PARTIAL: 0.25,
        InteractivityLevel.HEAVY: 0.5,
    }


@dataclass(frozen=True)
class ValidatorPolicy:
    """
    Policy constants for the client-boundary rule.

    Without a component_count hint at most max_root_boundaries client-only
    boundaries are allowed. With one, the allowance grows to
    floor(component_count * ratio) for the page's interactivity level.
    """

    max_root_boundaries: int = 1
    interactivity_ratios: dict[InteractivityLevel, float] = field(
        default_factory=_default_ratios
    )


# --- Input / Output Models ---


@dataclass(frozen=True)
class ValidateConfigInput:
    """Input for validating a declared configuration."""

    decision: StrategyDecision
    config: DeclaredConfig


@dataclass(frozen=True)
class ValidateConfigOutput:
    """Output of validation. Validation never fails."""

    findings: list[ValidationFinding] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(f.severity is Severity.ERROR for f in self.findings)
