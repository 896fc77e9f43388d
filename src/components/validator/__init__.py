"""
Validator component - Declared configuration pitfall checks.
"""

from ._impl import (
    RULE_CHECKS,
    RULE_NAMES,
    RULE_SEVERITIES,
    allowed_client_boundaries,
    check_async_access,
    check_cache_directives,
    check_client_boundary,
    check_secret_leak,
    check_suspense_boundaries,
    parse_declared_config,
    sort_findings,
    validate,
)
from .component import run
from .models import (
    DeclaredConfig,
    DeclaredConfigError,
    Severity,
    SuspenseBoundary,
    ValidateConfigInput,
    ValidateConfigOutput,
    ValidationFinding,
    ValidatorPolicy,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "validate",
    "parse_declared_config",
    "sort_findings",
    "allowed_client_boundaries",
    # Rule checks
    "check_async_access",
    "check_client_boundary",
    "check_suspense_boundaries",
    "check_cache_directives",
    "check_secret_leak",
    "RULE_CHECKS",
    "RULE_NAMES",
    "RULE_SEVERITIES",
    # Models
    "DeclaredConfig",
    "SuspenseBoundary",
    "Severity",
    "ValidationFinding",
    "ValidatorPolicy",
    "ValidateConfigInput",
    "ValidateConfigOutput",
    # Errors
    "DeclaredConfigError",
    # Ports
    "RulesPort",
]
