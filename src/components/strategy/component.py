"""
Strategy component - Classify a PageProfile into a rendering strategy.

Test assertions:
- Private profiles always classify as dynamic
- Public static profiles always classify as static
- Classification is deterministic and total
"""

from __future__ import annotations

import logging

from ._impl import classify, explain
from .models import ClassifyInput, ClassifyOutput

logger = logging.getLogger(__name__)


def run(inp: ClassifyInput) -> ClassifyOutput:
    """
    Classify a normalized profile.

    Args:
        inp: Input containing the PageProfile.

    Returns:
        ClassifyOutput with the decision and its explanation.
    """
    decision = classify(inp.profile)
    logger.debug(
        "Classified profile as %s via %s",
        decision.strategy.value,
        ", ".join(decision.rationale),
    )
    return ClassifyOutput(decision=decision, explanation=explain(decision))
