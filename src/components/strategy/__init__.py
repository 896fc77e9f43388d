"""
Strategy component - Rendering strategy classification.
"""

from ._impl import (
    DECISION_TABLE,
    RULE_HEAVY_INTERACTIVE_LOW_SEO,
    RULE_INFRA_UNSUPPORTED_PARTIAL,
    RULE_MIXED_PARTIAL,
    RULE_PERIODIC_WHOLE_PAGE,
    RULE_PRIVATE_OR_REALTIME,
    RULE_STATIC_DATA,
    RULES_BY_ID,
    classify,
    explain,
)
from .component import run
from .models import (
    ClassifyInput,
    ClassifyOutput,
    DecisionRule,
    RenderStrategy,
    StrategyDecision,
)

__all__ = [
    # Entry points
    "run",
    "classify",
    "explain",
    # Models
    "RenderStrategy",
    "DecisionRule",
    "StrategyDecision",
    "ClassifyInput",
    "ClassifyOutput",
    # Decision table
    "DECISION_TABLE",
    "RULES_BY_ID",
    "RULE_PRIVATE_OR_REALTIME",
    "RULE_HEAVY_INTERACTIVE_LOW_SEO",
    "RULE_STATIC_DATA",
    "RULE_PERIODIC_WHOLE_PAGE",
    "RULE_MIXED_PARTIAL",
    "RULE_INFRA_UNSUPPORTED_PARTIAL",
]
