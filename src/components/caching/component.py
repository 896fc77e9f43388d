"""
Caching component - Synthesize a caching plan for a strategy decision.

Test assertions:
- Incremental with interval_seconds=0 is rejected as an invalid hint
- Dynamic and client strategies never cache; hints are discarded with notes
- Plans satisfy the mode/interval/tags invariants
"""

from __future__ import annotations

import logging

from ._impl import generate_cache_headers, synthesize
from .models import CachingError, InvalidHintError, SynthesizeInput, SynthesizeOutput
from .ports import RulesPort

logger = logging.getLogger(__name__)


def run(
    inp: SynthesizeInput,
    *,
    rules: RulesPort | None = None,
) -> SynthesizeOutput:
    """
    Synthesize a caching plan.

    Args:
        inp: Input containing the decision and hints.
        rules: Optional rules port supplying the caching policy.

    Returns:
        SynthesizeOutput with plan and headers, or errors.
    """
    policy = rules.get_caching_policy() if rules is not None else None

    try:
        plan = synthesize(inp.decision, inp.hints, policy)
    except InvalidHintError as e:
        logger.warning("Caching hints rejected: %s", e.message)
        return SynthesizeOutput(
            plan=None,
            errors=[CachingError(code=e.code, message=e.message, field=e.field)],
            success=False,
        )

    for note in plan.notes:
        logger.debug("Caching hint discarded: %s", note)

    return SynthesizeOutput(
        plan=plan,
        headers=generate_cache_headers(plan, inp.decision.strategy, policy),
    )
