"""
Caching component - Caching plan synthesis and cache headers.
"""

from ._impl import (
    DEFAULT_IMMUTABLE_CACHE_CONTROL,
    DEFAULT_PRIVATE_CACHE_CONTROL,
    generate_cache_headers,
    hints_from_mapping,
    normalize_tags,
    synthesize,
)
from .component import run
from .models import (
    CacheMode,
    CachingError,
    CachingHints,
    CachingPlan,
    CachingPolicy,
    InvalidHintError,
    SynthesizeInput,
    SynthesizeOutput,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "synthesize",
    "generate_cache_headers",
    "normalize_tags",
    "hints_from_mapping",
    # Models
    "CacheMode",
    "CachingHints",
    "CachingPlan",
    "CachingPolicy",
    "SynthesizeInput",
    "SynthesizeOutput",
    "CachingError",
    # Errors
    "InvalidHintError",
    # Ports
    "RulesPort",
    # Constants
    "DEFAULT_PRIVATE_CACHE_CONTROL",
    "DEFAULT_IMMUTABLE_CACHE_CONTROL",
]
