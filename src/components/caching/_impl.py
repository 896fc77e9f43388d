"""
Caching directive synthesizer.

Maps a strategy decision to a concrete caching plan and renders it as
HTTP cache headers. Functional Core - no I/O.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from src.components.strategy import RenderStrategy, StrategyDecision

from .models import (
    CacheMode,
    CachingHints,
    CachingPlan,
    CachingPolicy,
    InvalidHintError,
)

DEFAULT_PRIVATE_CACHE_CONTROL = "private, no-store"
DEFAULT_IMMUTABLE_CACHE_CONTROL = "public, max-age=31536000, immutable"


def normalize_tags(tags: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Strip and de-duplicate tags, keeping first-seen order."""
    seen: dict[str, None] = {}
    for tag in tags:
        if not isinstance(tag, str) or not tag.strip():
            raise InvalidHintError(f"Cache tags must be non-empty strings, got {tag!r}", "tags")
        seen.setdefault(tag.strip(), None)
    return tuple(seen)


def hints_from_mapping(raw: Mapping[str, Any] | None) -> CachingHints:
    """
    Build CachingHints from a snake_case or camelCase mapping.

    Values are kept as given; synthesize checks their shape once the
    strategy is known.
    """
    if not raw:
        return CachingHints()
    if not isinstance(raw, Mapping):
        raise InvalidHintError("Caching hints must be a mapping")

    interval = raw.get("interval_seconds", raw.get("intervalSeconds"))
    tags = raw.get("tags") or ()
    on_demand = raw.get("regenerate_on_demand", raw.get("regenerateOnDemand", False))

    if isinstance(tags, list):
        tags = tuple(tags)

    return CachingHints(interval_seconds=interval, tags=tags, regenerate_on_demand=on_demand)


def _discard_notes(hints: CachingHints, strategy: RenderStrategy) -> tuple[str, ...]:
    notes = []
    if hints.interval_seconds is not None:
        notes.append(f"interval_seconds ignored for {strategy.value} strategy")
    if hints.tags:
        notes.append(f"tags ignored for {strategy.value} strategy")
    if hints.regenerate_on_demand:
        notes.append(f"regenerate_on_demand ignored for {strategy.value} strategy")
    return tuple(notes)


def _check_hint_shapes(hints: CachingHints) -> None:
    if isinstance(hints.tags, str) or not isinstance(hints.tags, (list, tuple)):
        raise InvalidHintError("tags must be a list of strings", "tags")
    if not isinstance(hints.regenerate_on_demand, bool):
        raise InvalidHintError("regenerate_on_demand must be a boolean", "regenerate_on_demand")


def _require_tags(tags: tuple[str, ...], strategy: RenderStrategy) -> None:
    if not tags:
        raise InvalidHintError(
            f"{strategy.value} strategy needs at least one cache tag", "tags"
        )


def synthesize(
    decision: StrategyDecision,
    hints: CachingHints | None = None,
    policy: CachingPolicy | None = None,
) -> CachingPlan:
    """
    Build a caching plan for a strategy decision.

    Args:
        decision: Classifier output.
        hints: Caller preferences (interval, tags, on-demand regeneration).
        policy: Policy constants. Uses CachingPolicy() if None.

    Returns:
        CachingPlan honouring the mode/interval/tags invariants.

    Raises:
        InvalidHintError: Hints cannot satisfy the strategy.
    """
    hints = hints or CachingHints()
    policy = policy or CachingPolicy()
    strategy = decision.strategy

    # Dynamic and client pages are never cached
    if strategy in (RenderStrategy.DYNAMIC, RenderStrategy.CLIENT):
        return CachingPlan(mode=CacheMode.NONE, notes=_discard_notes(hints, strategy))

    _check_hint_shapes(hints)
    tags = normalize_tags(hints.tags)

    if strategy is RenderStrategy.STATIC:
        notes = []
        if hints.interval_seconds is not None:
            notes.append("interval_seconds ignored for static strategy")
        if not hints.regenerate_on_demand:
            if tags:
                notes.append("tags ignored unless regenerate_on_demand is set")
            return CachingPlan(mode=CacheMode.NONE, notes=tuple(notes))
        return CachingPlan(
            mode=CacheMode.ON_DEMAND,
            tags=tags or (policy.static_build_tag,),
            notes=tuple(notes),
        )

    if strategy is RenderStrategy.INCREMENTAL:
        notes = []
        if hints.regenerate_on_demand:
            notes.append("regenerate_on_demand ignored for incremental strategy")
        if hints.interval_seconds is not None:
            if (
                isinstance(hints.interval_seconds, bool)
                or not isinstance(hints.interval_seconds, int)
                or hints.interval_seconds <= 0
            ):
                raise InvalidHintError(
                    f"interval_seconds must be a positive integer, "
                    f"got {hints.interval_seconds!r}",
                    "interval_seconds",
                )
            if tags:
                notes.append("tags ignored when interval_seconds is given")
            return CachingPlan(
                mode=CacheMode.TIME_BASED,
                interval_seconds=hints.interval_seconds,
                notes=tuple(notes),
            )
        _require_tags(tags, strategy)
        return CachingPlan(mode=CacheMode.TAG_BASED, tags=tags, notes=tuple(notes))

    # Partial: the static shell needs no plan, the dynamic segment's data is tagged
    notes = []
    if hints.interval_seconds is not None:
        notes.append("interval_seconds ignored for partial strategy")
    if hints.regenerate_on_demand:
        notes.append("regenerate_on_demand ignored for partial strategy")
    _require_tags(tags, strategy)
    return CachingPlan(mode=CacheMode.TAG_BASED, tags=tags, notes=tuple(notes))


def generate_cache_headers(
    plan: CachingPlan,
    strategy: RenderStrategy,
    policy: CachingPolicy | None = None,
) -> dict[str, str]:
    """
    Render a caching plan as HTTP response headers.

    Args:
        plan: Synthesized caching plan.
        strategy: Strategy the plan was built for.
        policy: Policy constants. Uses CachingPolicy() if None.

    Returns:
        Dict of header name to value.
    """
    policy = policy or CachingPolicy()
    swr = policy.stale_while_revalidate

    if plan.mode is CacheMode.TIME_BASED:
        cache_control = (
            f"public, max-age=0, s-maxage={plan.interval_seconds}, "
            f"stale-while-revalidate={swr}"
        )
    elif plan.mode in (CacheMode.TAG_BASED, CacheMode.ON_DEMAND):
        cache_control = (
            f"public, max-age=0, s-maxage={policy.tag_max_age}, stale-while-revalidate={swr}"
        )
    elif strategy is RenderStrategy.STATIC:
        cache_control = DEFAULT_IMMUTABLE_CACHE_CONTROL
    else:
        cache_control = DEFAULT_PRIVATE_CACHE_CONTROL

    headers = {"Cache-Control": cache_control}
    if plan.tags:
        headers[policy.tag_header_name] = ",".join(plan.tags)
    if cache_control == DEFAULT_PRIVATE_CACHE_CONTROL:
        headers["Vary"] = "Cookie"
    return headers
