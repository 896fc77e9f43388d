"""
Profile component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import ProfileDefaults


class RulesPort(Protocol):
    """Port for profile rules configuration."""

    def get_profile_defaults(self) -> ProfileDefaults:
        """Get the defaulting policy for optional profile fields."""
        ...
