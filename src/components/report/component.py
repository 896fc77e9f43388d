"""
Report component - Full recommendation pipeline for one page.

Test assertions:
- Scenario reports (static, incremental, partial, private dynamic)
- Input failures return errors and no partial report
"""

from __future__ import annotations

import logging
from typing import Protocol

from src.components.caching import InvalidHintError
from src.components.caching import RulesPort as CachingRulesPort
from src.components.profile import ProfileValidationError
from src.components.profile import RulesPort as ProfileRulesPort
from src.components.validator import RulesPort as ValidatorRulesPort

from ._impl import recommend
from .models import RecommendInput, RecommendOutput, ReportError

logger = logging.getLogger(__name__)


class RulesPort(ProfileRulesPort, CachingRulesPort, ValidatorRulesPort, Protocol):
    """Combined rules port for the whole pipeline."""


def run(
    inp: RecommendInput,
    *,
    rules: RulesPort | None = None,
) -> RecommendOutput:
    """
    Build a recommendation report.

    Args:
        inp: Raw profile, caching hints and optional declared config.
        rules: Optional rules port supplying all policies.

    Returns:
        RecommendOutput with the report, or errors and no report.
    """
    try:
        report = recommend(
            inp.raw_profile,
            inp.hints,
            inp.config,
            defaults=rules.get_profile_defaults() if rules else None,
            caching_policy=rules.get_caching_policy() if rules else None,
            validator_policy=rules.get_validator_policy() if rules else None,
        )
    except (ProfileValidationError, InvalidHintError) as e:
        logger.warning("Recommendation rejected (%s): %s", e.code, e.message)
        return RecommendOutput(
            report=None,
            errors=[ReportError(code=e.code, message=e.message, field=e.field)],
            success=False,
        )

    logger.info(
        "Recommended %s (%s) with %d finding(s)",
        report.decision.strategy.value,
        report.caching_plan.mode.value,
        len(report.findings),
    )
    return RecommendOutput(report=report)
