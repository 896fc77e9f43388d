"""
Profile component - Normalize raw page characteristics into a PageProfile.

Test assertions:
- Private + static profiles are always rejected
- Missing required fields are reported by name
- Applied defaults are recorded on the profile
"""

from __future__ import annotations

import logging

from ._impl import normalize
from .models import (
    NormalizeProfileInput,
    NormalizeProfileOutput,
    ProfileError,
    ProfileValidationError,
)
from .ports import RulesPort

logger = logging.getLogger(__name__)


def run(
    inp: NormalizeProfileInput,
    *,
    rules: RulesPort | None = None,
) -> NormalizeProfileOutput:
    """
    Normalize raw page characteristics.

    Args:
        inp: Input containing the raw profile mapping.
        rules: Optional rules port supplying the defaulting policy.

    Returns:
        NormalizeProfileOutput with the profile or errors.
    """
    defaults = rules.get_profile_defaults() if rules is not None else None

    try:
        profile = normalize(inp.raw, defaults)
    except ProfileValidationError as e:
        logger.warning("Profile rejected (%s): %s", e.code, e.message)
        return NormalizeProfileOutput(
            profile=None,
            errors=[ProfileError(code=e.code, message=e.message, field=e.field)],
            success=False,
        )

    if profile.defaults_applied:
        logger.debug("Profile defaults applied: %s", ", ".join(profile.defaults_applied))
    return NormalizeProfileOutput(profile=profile)
