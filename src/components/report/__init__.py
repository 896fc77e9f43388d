"""
Report component - Recommendation pipeline and report aggregation.
"""

from ._impl import merge_findings, recommend
from .component import RulesPort, run
from .models import (
    RecommendationReport,
    RecommendInput,
    RecommendOutput,
    ReportError,
)

__all__ = [
    # Entry points
    "run",
    "recommend",
    "merge_findings",
    # Models
    "RecommendationReport",
    "RecommendInput",
    "RecommendOutput",
    "ReportError",
    # Ports
    "RulesPort",
]
