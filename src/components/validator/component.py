"""
Validator component - Check a declared page configuration for pitfalls.

Test assertions:
- Secrets in client props always produce an R5 error
- Dynamic/partial pages without awaited accessors produce an R1 error
- Findings are ordered errors first, then by rule id
"""

from __future__ import annotations

import logging

from ._impl import validate
from .models import ValidateConfigInput, ValidateConfigOutput
from .ports import RulesPort

logger = logging.getLogger(__name__)


def run(
    inp: ValidateConfigInput,
    *,
    rules: RulesPort | None = None,
) -> ValidateConfigOutput:
    """
    Validate a declared configuration against a strategy decision.

    Args:
        inp: Input containing the decision and declared config.
        rules: Optional rules port supplying the validator policy.

    Returns:
        ValidateConfigOutput with ordered findings.
    """
    policy = rules.get_validator_policy() if rules is not None else None
    findings = validate(inp.decision, inp.config, policy)
    if findings:
        logger.debug(
            "Validation found %d issue(s): %s",
            len(findings),
            ", ".join(f.rule_id for f in findings),
        )
    return ValidateConfigOutput(findings=findings)
