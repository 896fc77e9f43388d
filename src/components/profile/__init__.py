"""
Profile component - Page characteristic normalization.
"""

from ._impl import FIELD_ALIASES, normalize, parse_enum
from .component import run
from .models import (
    ConflictingConstraintError,
    DataFreshness,
    InfraProfile,
    InteractivityLevel,
    InvalidValueError,
    MissingFieldError,
    NormalizeProfileInput,
    NormalizeProfileOutput,
    PageProfile,
    Privacy,
    ProfileDefaults,
    ProfileError,
    ProfileValidationError,
    Runtime,
    SeoImportance,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "normalize",
    "parse_enum",
    # Enums
    "DataFreshness",
    "Privacy",
    "SeoImportance",
    "InteractivityLevel",
    "Runtime",
    # Models
    "InfraProfile",
    "PageProfile",
    "ProfileDefaults",
    "NormalizeProfileInput",
    "NormalizeProfileOutput",
    "ProfileError",
    # Errors
    "ProfileValidationError",
    "MissingFieldError",
    "ConflictingConstraintError",
    "InvalidValueError",
    # Ports
    "RulesPort",
    # Constants
    "FIELD_ALIASES",
]
