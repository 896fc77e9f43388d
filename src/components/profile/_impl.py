"""
Profile normalizer - validates and canonicalizes raw page characteristics.

Functional Core - pure, no I/O.

Invariants:
- I1: data_freshness and privacy are always required
- I2: private data can never be build-time static
- I3: every defaulted field is recorded in PageProfile.defaults_applied
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from .models import (
    ConflictingConstraintError,
    DataFreshness,
    InfraProfile,
    InteractivityLevel,
    InvalidValueError,
    MissingFieldError,
    PageProfile,
    Privacy,
    ProfileDefaults,
    Runtime,
    SeoImportance,
)

E = TypeVar("E", bound=Enum)

# Wire names accepted for each field, snake_case first.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "data_freshness": ("data_freshness", "dataFreshness"),
    "privacy": ("privacy",),
    "seo_importance": ("seo_importance", "seoImportance"),
    "interactivity_level": ("interactivity_level", "interactivityLevel"),
    "infra": ("infra",),
    "runtime": ("runtime",),
    "supports_incremental_shell": (
        "supports_incremental_shell",
        "supportsIncrementalShell",
    ),
}

_SEPARATORS = re.compile(r"[\s_\-]")


def _token(value: str) -> str:
    return _SEPARATORS.sub("", value).lower()


def _lookup(raw: Mapping[str, Any], name: str) -> Any | None:
    """Return the value for a field under any of its aliases, None if absent."""
    for alias in FIELD_ALIASES[name]:
        value = raw.get(alias)
        if value is not None:
            return value
    return None


def parse_enum(enum_cls: type[E], value: Any, field: str) -> E:
    """
    Parse an enum member leniently.

    Matching ignores case and `_`/`-`/space separators, so "RealTime",
    "real_time" and "real-time" all resolve to the same member.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        wanted = _token(value)
        for member in enum_cls:
            if _token(member.value) == wanted:
                return member
    allowed = ", ".join(m.value for m in enum_cls)
    raise InvalidValueError(
        f"Invalid value {value!r} for {field}; expected one of: {allowed}",
        field=field,
    )


def _parse_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    raise InvalidValueError(f"{field} must be a boolean, got {value!r}", field=field)


def _require(raw: Mapping[str, Any], name: str, field: str | None = None) -> Any:
    value = _lookup(raw, name)
    if value is None:
        field = field or name
        raise MissingFieldError(f"Missing required field: {field}", field=field)
    return value


def _normalize_infra(
    raw: Mapping[str, Any],
    defaults: ProfileDefaults,
    applied: list[str],
) -> InfraProfile:
    infra_raw = _lookup(raw, "infra")
    if infra_raw is None:
        if defaults.strict:
            raise MissingFieldError("Missing required field: infra", field="infra")
        infra_raw = {}
    if not isinstance(infra_raw, Mapping):
        raise InvalidValueError("infra must be a mapping", field="infra")

    runtime_raw = _lookup(infra_raw, "runtime")
    if runtime_raw is None:
        if defaults.strict:
            raise MissingFieldError(
                "Missing required field: infra.runtime", field="infra.runtime"
            )
        runtime = defaults.runtime
        applied.append("infra.runtime")
    else:
        runtime = parse_enum(Runtime, runtime_raw, "infra.runtime")

    shell_raw = _lookup(infra_raw, "supports_incremental_shell")
    if shell_raw is None:
        if defaults.strict:
            raise MissingFieldError(
                "Missing required field: infra.supports_incremental_shell",
                field="infra.supports_incremental_shell",
            )
        supports_shell = defaults.supports_incremental_shell
        applied.append("infra.supports_incremental_shell")
    else:
        supports_shell = _parse_bool(shell_raw, "infra.supports_incremental_shell")

    return InfraProfile(runtime=runtime, supports_incremental_shell=supports_shell)


def normalize(
    raw: Mapping[str, Any],
    defaults: ProfileDefaults | None = None,
) -> PageProfile:
    """
    Validate raw page characteristics and build a PageProfile.

    Args:
        raw: Mapping with snake_case or camelCase field names.
        defaults: Defaulting policy. Uses ProfileDefaults() if None.

    Returns:
        Immutable PageProfile.

    Raises:
        MissingFieldError: A required field is absent.
        InvalidValueError: A field holds an unrecognised value.
        ConflictingConstraintError: privacy=private with data_freshness=static.
    """
    if defaults is None:
        defaults = ProfileDefaults()
    if not isinstance(raw, Mapping):
        raise InvalidValueError("Profile input must be a mapping")

    applied: list[str] = []

    data_freshness = parse_enum(
        DataFreshness, _require(raw, "data_freshness"), "data_freshness"
    )
    privacy = parse_enum(Privacy, _require(raw, "privacy"), "privacy")

    seo_raw = _lookup(raw, "seo_importance")
    if seo_raw is None:
        if defaults.strict:
            _require(raw, "seo_importance")
        seo_importance = defaults.seo_importance
        applied.append("seo_importance")
    else:
        seo_importance = parse_enum(SeoImportance, seo_raw, "seo_importance")

    interactivity_raw = _lookup(raw, "interactivity_level")
    if interactivity_raw is None:
        if defaults.strict:
            _require(raw, "interactivity_level")
        interactivity_level = defaults.interactivity_level
        applied.append("interactivity_level")
    else:
        interactivity_level = parse_enum(
            InteractivityLevel, interactivity_raw, "interactivity_level"
        )

    infra = _normalize_infra(raw, defaults, applied)

    if privacy is Privacy.PRIVATE and data_freshness is DataFreshness.STATIC:
        raise ConflictingConstraintError(
            "Private data cannot be build-time static "
            "(privacy=private with data_freshness=static)",
            field="privacy",
        )

    return PageProfile(
        data_freshness=data_freshness,
        privacy=privacy,
        seo_importance=seo_importance,
        interactivity_level=interactivity_level,
        infra=infra,
        defaults_applied=tuple(applied),
    )
