from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.components.caching import CachingHints
from src.components.profile import InteractivityLevel, parse_enum
from src.components.strategy import RenderStrategy


# --- Caching Hints ---
class CachingHintsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Shapes are checked by the synthesizer, which ignores hints for uncached pages
    interval_seconds: Any = Field(default=None, alias="intervalSeconds")
    tags: Any = None
    regenerate_on_demand: Any = Field(default=False, alias="regenerateOnDemand")

    def to_hints(self) -> CachingHints:
        tags = self.tags or ()
        return CachingHints(
            interval_seconds=self.interval_seconds,
            tags=tuple(tags) if isinstance(tags, list) else tags,
            regenerate_on_demand=self.regenerate_on_demand,
        )


# --- Requests ---
# Profile and config bodies stay raw mappings; the components validate them.
class RecommendRequest(BaseModel):
    profile: dict[str, Any]
    hints: CachingHintsModel | None = None
    config: dict[str, Any] | None = None


class ClassifyRequest(BaseModel):
    profile: dict[str, Any]


class ValidateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    strategy: RenderStrategy
    interactivity_level: InteractivityLevel = Field(
        default=InteractivityLevel.NONE, alias="interactivityLevel"
    )
    config: dict[str, Any]

    @field_validator("strategy", mode="before")
    @classmethod
    def parse_strategy(cls, v: Any) -> RenderStrategy:
        return parse_enum(RenderStrategy, v, "strategy")

    @field_validator("interactivity_level", mode="before")
    @classmethod
    def parse_interactivity(cls, v: Any) -> InteractivityLevel:
        return parse_enum(InteractivityLevel, v, "interactivity_level")


# --- Responses ---
class FindingResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rule_id: str = Field(alias="ruleId")
    name: str
    severity: str
    message: str
    location_hint: str = Field(alias="locationHint")


class ValidateResponse(BaseModel):
    findings: list[FindingResponse]
    blocking: bool


class ErrorDetail(BaseModel):
    code: str
    message: str
    field: str | None = None
