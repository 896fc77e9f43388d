"""
Caching component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import CachingPolicy


class RulesPort(Protocol):
    """Port for caching rules configuration."""

    def get_caching_policy(self) -> CachingPolicy:
        """Get policy constants for plan synthesis and headers."""
        ...
