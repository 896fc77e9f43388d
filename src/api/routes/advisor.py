"""
Advisor Routes - rendering strategy recommendation over HTTP.

Key behaviors:
- POST /recommend: full pipeline, report plus blocking flag
- POST /classify: strategy decision only
- POST /validate: findings for an already chosen strategy
- Invalid input maps to 422 with {code, field, message}
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.rules_ports import RulesPortAdapter
from src.api.deps import get_rules_port
from src.api.schemas import (
    ClassifyRequest,
    FindingResponse,
    RecommendRequest,
    ValidateRequest,
    ValidateResponse,
)
from src.components import profile as profile_component
from src.components import report as report_component
from src.components import strategy as strategy_component
from src.components import validator as validator_component
from src.components.caching import CachingHints
from src.components.validator import DeclaredConfigError, parse_declared_config

logger = logging.getLogger(__name__)

router = APIRouter()


def _unprocessable(code: str, message: str, field: str | None = None) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"code": code, "message": message, "field": field},
    )


def _parse_config(raw: dict[str, Any]) -> validator_component.DeclaredConfig:
    try:
        return parse_declared_config(raw)
    except DeclaredConfigError as e:
        raise _unprocessable(e.code, e.message, e.field) from e


@router.post("/recommend")
def recommend(
    body: RecommendRequest,
    rules: RulesPortAdapter = Depends(get_rules_port),
) -> dict[str, Any]:
    """Normalize, classify, synthesize caching and validate in one call."""
    config = _parse_config(body.config) if body.config is not None else None
    hints = body.hints.to_hints() if body.hints is not None else CachingHints()

    result = report_component.run(
        report_component.RecommendInput(raw_profile=body.profile, hints=hints, config=config),
        rules=rules,
    )
    if not result.success or result.report is None:
        error = result.errors[0]
        raise _unprocessable(error.code, error.message, error.field)

    if result.report.has_blocking_findings:
        logger.info(
            "Blocking findings for %s page: %s",
            result.report.decision.strategy.value,
            ", ".join(f.rule_id for f in result.report.errors),
        )
    return result.report.to_dict()


@router.post("/classify")
def classify(
    body: ClassifyRequest,
    rules: RulesPortAdapter = Depends(get_rules_port),
) -> dict[str, Any]:
    """Return the strategy decision for a profile."""
    normalized = profile_component.run(
        profile_component.NormalizeProfileInput(raw=body.profile), rules=rules
    )
    if not normalized.success or normalized.profile is None:
        error = normalized.errors[0]
        raise _unprocessable(error.code, error.message, error.field)

    result = strategy_component.run(strategy_component.ClassifyInput(profile=normalized.profile))
    return {**result.decision.to_dict(), "explanation": result.explanation}


@router.post("/validate", response_model=ValidateResponse)
def validate(
    body: ValidateRequest,
    rules: RulesPortAdapter = Depends(get_rules_port),
) -> ValidateResponse:
    """Validate a declared configuration against an existing strategy."""
    config = _parse_config(body.config)
    decision = strategy_component.StrategyDecision(
        strategy=body.strategy,
        rationale=("declared",),
        interactivity_level=body.interactivity_level,
    )
    result = validator_component.run(
        validator_component.ValidateConfigInput(decision=decision, config=config),
        rules=rules,
    )
    return ValidateResponse(
        findings=[FindingResponse.model_validate(f.to_dict()) for f in result.findings],
        blocking=result.has_errors,
    )
