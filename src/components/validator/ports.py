"""
Validator component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import ValidatorPolicy


class RulesPort(Protocol):
    """Port for validator rules configuration."""

    def get_validator_policy(self) -> ValidatorPolicy:
        """Get policy constants for the pitfall rules."""
        ...
