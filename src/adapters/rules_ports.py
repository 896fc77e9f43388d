"""
Rules adapter - exposes loaded rules through the component rules ports.
"""

from __future__ import annotations

from src.components.caching import CachingPolicy
from src.components.profile import ProfileDefaults
from src.components.validator import ValidatorPolicy
from src.rules.models import Rules


class RulesPortAdapter:
    """Implements the profile, caching and validator RulesPort protocols."""

    def __init__(self, rules: Rules) -> None:
        self._rules = rules

    def get_profile_defaults(self) -> ProfileDefaults:
        profile = self._rules.profile
        return ProfileDefaults(
            seo_importance=profile.defaults.seo_importance,
            interactivity_level=profile.defaults.interactivity_level,
            runtime=profile.defaults.runtime,
            supports_incremental_shell=profile.defaults.supports_incremental_shell,
            strict=profile.strict,
        )

    def get_caching_policy(self) -> CachingPolicy:
        caching = self._rules.caching
        return CachingPolicy(
            static_build_tag=caching.static_build_tag,
            stale_while_revalidate=caching.stale_while_revalidate,
            tag_max_age=caching.tag_max_age,
            tag_header_name=caching.tag_header_name,
        )

    def get_validator_policy(self) -> ValidatorPolicy:
        boundary = self._rules.validator.client_boundary
        return ValidatorPolicy(
            max_root_boundaries=boundary.max_root_boundaries,
            interactivity_ratios=dict(boundary.interactivity_ratios),
        )
