"""
Profile component input/output models.

Page characteristics that drive the rendering strategy decision.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# --- Enums ---


class DataFreshness(str, Enum):
    """How often the data behind a page changes."""

    REAL_TIME = "real_time"
    PERIODIC = "periodic"
    ON_EVENT = "on_event"
    STATIC = "static"


class Privacy(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class SeoImportance(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class InteractivityLevel(str, Enum):
    """Fraction of the page that needs client-side interactivity."""

    NONE = "none"
    PARTIAL = "partial"
    HEAVY = "heavy"


class Runtime(str, Enum):
    EDGE = "edge"
    NODE = "node"


# --- Errors ---


class ProfileValidationError(ValueError):
    """Raised when raw page characteristics cannot form a PageProfile."""

    code = "profile_invalid"

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class MissingFieldError(ProfileValidationError):
    code = "missing_field"


class ConflictingConstraintError(ProfileValidationError):
    code = "conflicting_constraint"


class InvalidValueError(ProfileValidationError):
    code = "invalid_value"


@dataclass(frozen=True)
class ProfileError:
    """Profile normalization error as returned by the component."""

    code: str
    message: str
    field: str | None = None


# --- Profile Model ---


@dataclass(frozen=True)
class InfraProfile:
    """Hosting constraints."""

    runtime: Runtime
    supports_incremental_shell: bool


@dataclass(frozen=True)
class PageProfile:
    """
    Canonical page characteristics.

    Built once per decision request by the normalizer and never mutated.
    `defaults_applied` names every field filled in by the defaulting policy.
    """

    data_freshness: DataFreshness
    privacy: Privacy
    seo_importance: SeoImportance
    interactivity_level: InteractivityLevel
    infra: InfraProfile
    defaults_applied: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "dataFreshness": self.data_freshness.value,
            "privacy": self.privacy.value,
            "seoImportance": self.seo_importance.value,
            "interactivityLevel": self.interactivity_level.value,
            "infra": {
                "runtime": self.infra.runtime.value,
                "supportsIncrementalShell": self.infra.supports_incremental_shell,
            },
            "defaultsApplied": list(self.defaults_applied),
        }


@dataclass(frozen=True)
class ProfileDefaults:
    """
    Explicit defaulting policy for optional profile fields.

    `data_freshness` and `privacy` never have a default. When `strict` is
    set no field is defaulted.
    """

    seo_importance: SeoImportance = SeoImportance.HIGH
    interactivity_level: InteractivityLevel = InteractivityLevel.NONE
    runtime: Runtime = Runtime.NODE
    supports_incremental_shell: bool = False
    strict: bool = False


# --- Input / Output Models ---


@dataclass(frozen=True)
class NormalizeProfileInput:
    """Input for normalizing raw page characteristics."""

    raw: dict[str, Any]


@dataclass(frozen=True)
class NormalizeProfileOutput:
    """Output of profile normalization."""

    profile: PageProfile | None
    errors: list[ProfileError] = field(default_factory=list)
    success: bool = True
