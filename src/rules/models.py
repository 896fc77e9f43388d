from pydantic import BaseModel, Field, field_validator

from src.components.profile import InteractivityLevel, Runtime, SeoImportance


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class ProfileDefaultsRules(BaseModel):
    seo_importance: SeoImportance
    interactivity_level: InteractivityLevel
    runtime: Runtime
    supports_incremental_shell: bool


class ProfileRules(BaseModel):
    strict: bool
    defaults: ProfileDefaultsRules


class CachingRules(BaseModel):
    static_build_tag: str = Field(min_length=1)
    stale_while_revalidate: int = Field(gt=0)
    tag_max_age: int = Field(gt=0)
    tag_header_name: str = Field(min_length=1)


class ClientBoundaryRules(BaseModel):
    max_root_boundaries: int = Field(ge=0)
    interactivity_ratios: dict[InteractivityLevel, float]

    @field_validator("interactivity_ratios")
    @classmethod
    def ratios_in_range(cls, v: dict[InteractivityLevel, float]) -> dict[InteractivityLevel, float]:
        for level, ratio in v.items():
            if not 0.0 <= ratio <= 1.0:
                raise ValueError(f"ratio for {level.value} must be between 0 and 1")
        return v


class ValidatorRules(BaseModel):
    client_boundary: ClientBoundaryRules


class Rules(BaseModel):
    project: ProjectRules
    profile: ProfileRules
    caching: CachingRules
    validator: ValidatorRules
