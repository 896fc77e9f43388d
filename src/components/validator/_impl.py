"""
Configuration validator - fixed pitfall rule set.

Functional Core - pure, stateless, never raises.

Rules:
- R1 (error): dynamic data read without asynchronous access
- R2 (warning): client-only scope broader than the page's interactivity
- R3 (error): suspense boundary wrapping static content on a partial page
- R4 (warning): fetch site without an explicit cache directive on an incremental page
- R5 (error): secrets passed to client-side props

Rules are evaluated independently; one firing never suppresses another.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from src.components.strategy import RenderStrategy, StrategyDecision

from .models import (
    SEVERITY_RANK,
    DeclaredConfig,
    DeclaredConfigError,
    Severity,
    SuspenseBoundary,
    ValidationFinding,
    ValidatorPolicy,
)

RULE_NAMES: dict[str, str] = {
    "R1": "IncompleteAsyncAccess",
    "R2": "OverbroadClientBoundary",
    "R3": "MisplacedSuspenseBoundary",
    "R4": "ImplicitCache",
    "R5": "SecretLeak",
}

RULE_SEVERITIES: dict[str, Severity] = {
    "R1": Severity.ERROR,
    "R2": Severity.WARNING,
    "R3": Severity.ERROR,
    "R4": Severity.WARNING,
    "R5": Severity.ERROR,
}


def _finding(rule_id: str, message: str, location_hint: str) -> ValidationFinding:
    return ValidationFinding(
        rule_id=rule_id,
        severity=RULE_SEVERITIES[rule_id],
        message=message,
        location_hint=location_hint,
        name=RULE_NAMES[rule_id],
    )


# --- Rules ---


def check_async_access(
    decision: StrategyDecision, config: DeclaredConfig, policy: ValidatorPolicy
) -> list[ValidationFinding]:
    """R1: per-request pages must declare their awaited data accessors."""
    if decision.strategy not in (RenderStrategy.DYNAMIC, RenderStrategy.PARTIAL):
        return []
    if config.async_accessors:
        return []
    return [
        _finding(
            "R1",
            f"{decision.strategy.value} page declares no awaited data accessors; "
            "dynamic data is likely read without asynchronous access, "
            "risking inconsistent output",
            "asyncAccessors",
        )
    ]


def allowed_client_boundaries(
    decision: StrategyDecision, config: DeclaredConfig, policy: ValidatorPolicy
) -> int:
    """Number of client-only boundaries tolerated before R2 fires."""
    allowed = policy.max_root_boundaries
    if config.component_count is not None:
        ratio = policy.interactivity_ratios.get(decision.interactivity_level, 0.0)
        allowed = max(allowed, math.floor(config.component_count * ratio))
    return allowed


def check_client_boundary(
    decision: StrategyDecision, config: DeclaredConfig, policy: ValidatorPolicy
) -> list[ValidationFinding]:
    """R2: client-only scope should stay minimal."""
    count = len(config.client_boundary_scope)
    allowed = allowed_client_boundaries(decision, config, policy)
    if count <= allowed:
        return []
    components = ", ".join(sorted(config.client_boundary_scope))
    return [
        _finding(
            "R2",
            f"{count} client-only boundaries exceed the {allowed} allowed for "
            f"{decision.interactivity_level.value} interactivity ({components}); "
            "push client boundaries down to the interactive leaves",
            "clientBoundaryScope",
        )
    ]


def check_suspense_boundaries(
    decision: StrategyDecision, config: DeclaredConfig, policy: ValidatorPolicy
) -> list[ValidationFinding]:
    """R3: on partial pages, suspense boundaries wrap dynamic content only."""
    if decision.strategy is not RenderStrategy.PARTIAL:
        return []
    return [
        _finding(
            "R3",
            f"Suspense boundary '{boundary.boundary_id}' wraps static content, "
            "which defeats partial prerendering of the shell",
            f"suspenseBoundaries[{index}]:{boundary.boundary_id}",
        )
        for index, boundary in enumerate(config.suspense_boundaries)
        if not boundary.wraps_dynamic_only
    ]


def check_cache_directives(
    decision: StrategyDecision, config: DeclaredConfig, policy: ValidatorPolicy
) -> list[ValidationFinding]:
    """R4: incremental pages state caching intent at every fetch site."""
    if decision.strategy is not RenderStrategy.INCREMENTAL:
        return []
    return [
        _finding(
            "R4",
            f"Fetch site '{site}' has no explicit cache directive; caching intent is ambiguous",
            f"explicitCacheDirectives:{site}",
        )
        for site, explicit in config.explicit_cache_directives
        if not explicit
    ]


def check_secret_leak(
    decision: StrategyDecision, config: DeclaredConfig, policy: ValidatorPolicy
) -> list[ValidationFinding]:
    """R5: secrets never cross into client props, whatever the strategy."""
    if not config.client_props_contain_secrets:
        return []
    return [
        _finding(
            "R5",
            "Client component props contain secrets; this violates the "
            "server/client security boundary",
            "clientProps",
        )
    ]


RuleCheck = Callable[[StrategyDecision, DeclaredConfig, ValidatorPolicy], list[ValidationFinding]]

RULE_CHECKS: tuple[RuleCheck, ...] = (
    check_async_access,
    check_client_boundary,
    check_suspense_boundaries,
    check_cache_directives,
    check_secret_leak,
)


def sort_findings(findings: Iterable[ValidationFinding]) -> list[ValidationFinding]:
    """Order by severity (errors first), then rule id; stable within a rule."""
    return sorted(findings, key=lambda f: (SEVERITY_RANK[f.severity], f.rule_id))


def validate(
    decision: StrategyDecision,
    config: DeclaredConfig,
    policy: ValidatorPolicy | None = None,
) -> list[ValidationFinding]:
    """
    Check a declared configuration against the pitfall rules.

    Args:
        decision: Strategy the page is (or will be) rendered with.
        config: Declared page configuration.
        policy: Policy constants. Uses ValidatorPolicy() if None.

    Returns:
        Ordered findings; empty when the configuration is clean.
    """
    policy = policy or ValidatorPolicy()
    findings: list[ValidationFinding] = []
    for check in RULE_CHECKS:
        findings.extend(check(decision, config, policy))
    return sort_findings(findings)


# --- Parsing ---


def _get(raw: Mapping[str, Any], *names: str, default: Any = None) -> Any:
    for name in names:
        if name in raw and raw[name] is not None:
            return raw[name]
    return default


def _string_set(value: Any, field: str) -> frozenset[str]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise DeclaredConfigError(f"{field} must be a list of strings", field)
    items = list(value)
    if not all(isinstance(item, str) for item in items):
        raise DeclaredConfigError(f"{field} must be a list of strings", field)
    return frozenset(items)


def _parse_boundaries(value: Any) -> tuple[SuspenseBoundary, ...]:
    field = "suspense_boundaries"
    if isinstance(value, (str, Mapping)) or not isinstance(value, Iterable):
        raise DeclaredConfigError(f"{field} must be a list", field)
    boundaries = []
    for index, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise DeclaredConfigError(f"{field}[{index}] must be a mapping", field)
        boundary_id = _get(item, "boundary_id", "boundaryId", "id")
        wraps = _get(item, "wraps_dynamic_only", "wrapsDynamicOnly")
        if not isinstance(boundary_id, str) or not isinstance(wraps, bool):
            raise DeclaredConfigError(
                f"{field}[{index}] needs a string id and boolean wraps_dynamic_only", field
            )
        boundaries.append(SuspenseBoundary(boundary_id=boundary_id, wraps_dynamic_only=wraps))
    return tuple(boundaries)


def _parse_directives(value: Any) -> tuple[tuple[str, bool], ...]:
    field = "explicit_cache_directives"
    if not isinstance(value, Mapping):
        raise DeclaredConfigError(f"{field} must map fetch sites to booleans", field)
    directives = []
    for site, explicit in value.items():
        if not isinstance(site, str) or not isinstance(explicit, bool):
            raise DeclaredConfigError(f"{field} must map fetch sites to booleans", field)
        directives.append((site, explicit))
    return tuple(directives)


def parse_declared_config(raw: Mapping[str, Any]) -> DeclaredConfig:
    """
    Build a DeclaredConfig from a snake_case or camelCase mapping.

    Raises:
        DeclaredConfigError: The mapping is malformed.
    """
    if not isinstance(raw, Mapping):
        raise DeclaredConfigError("Declared config must be a mapping")

    secrets = _get(raw, "client_props_contain_secrets", "clientPropsContainSecrets", default=False)
    if not isinstance(secrets, bool):
        raise DeclaredConfigError(
            "client_props_contain_secrets must be a boolean", "client_props_contain_secrets"
        )

    component_count = _get(raw, "component_count", "componentCount")
    if component_count is not None and (
        isinstance(component_count, bool)
        or not isinstance(component_count, int)
        or component_count < 0
    ):
        raise DeclaredConfigError(
            "component_count must be a non-negative integer", "component_count"
        )

    return DeclaredConfig(
        async_accessors=_string_set(
            _get(raw, "async_accessors", "asyncAccessors", default=()), "async_accessors"
        ),
        client_boundary_scope=_string_set(
            _get(raw, "client_boundary_scope", "clientBoundaryScope", default=()),
            "client_boundary_scope",
        ),
        suspense_boundaries=_parse_boundaries(
            _get(raw, "suspense_boundaries", "suspenseBoundaries", default=())
        ),
        explicit_cache_directives=_parse_directives(
            _get(raw, "explicit_cache_directives", "explicitCacheDirectives", default={})
        ),
        client_props_contain_secrets=secrets,
        component_count=component_count,
    )
