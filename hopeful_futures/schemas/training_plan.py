"""Training plan request/response schemas."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hopeful_futures.schemas.simplified_job import Provider
from hopeful_futures.utils.helpers import parse_multi_value


def _blank_if_none(value: Any) -> Any:
    return "" if value is None else value


class TrainingResource(BaseModel):
    title: str = ""
    url: str = ""
    cost: Optional[str] = None

    @field_validator("title", "url", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return _blank_if_none(value)


class TrainingPhase(BaseModel):
    title: str = ""
    duration: str = ""
    focus: str = ""
    steps: List[str] = Field(default_factory=list)
    resources: List[TrainingResource] = Field(default_factory=list)

    @field_validator("title", "duration", "focus", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return _blank_if_none(value)

    @field_validator("steps", mode="before")
    @classmethod
    def _string_list(cls, value: Any) -> List[str]:
        return parse_multi_value(value)

    @field_validator("resources", mode="before")
    @classmethod
    def _resource_dicts(cls, value: Any) -> List[Any]:
        if not isinstance(value, list):
            return []
        return [r for r in value if isinstance(r, (dict, TrainingResource))]


class TrainingPlan(BaseModel):
    """Phased skills plan for one listing."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    summary: str
    phases: List[TrainingPhase] = Field(default_factory=list)
    success_metrics: List[str] = Field(default_factory=list, alias="successMetrics")
    encouragement: str = ""
    provider: Provider = Provider.GEMINI

    @field_validator("phases", mode="before")
    @classmethod
    def _phase_dicts(cls, value: Any) -> List[Any]:
        if not isinstance(value, list):
            return []
        return [p for p in value if isinstance(p, (dict, TrainingPhase))]

    @field_validator("success_metrics", mode="before")
    @classmethod
    def _string_list(cls, value: Any) -> List[str]:
        return parse_multi_value(value)


class TrainingPlanRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_title: Optional[str] = Field(default=None, alias="jobTitle")
    current_skills: Optional[List[str]] = Field(default=None, alias="currentSkills")
    interests: List[str] = Field(default_factory=list)
    disabilities: List[str] = Field(default_factory=list)
    medical_conditions: List[str] = Field(default_factory=list, alias="medicalConditions")
    learning_preferences: Optional[str] = Field(default=None, alias="learningPreferences")
    time_available_per_week: Optional[str] = Field(default=None, alias="timeAvailablePerWeek")
    location: Optional[str] = None

    @field_validator("current_skills", mode="before")
    @classmethod
    def _skills(cls, value: Any) -> Optional[List[str]]:
        if value is None:
            return None
        return parse_multi_value(value)

    @field_validator("interests", "disabilities", "medical_conditions", mode="before")
    @classmethod
    def _multi_value(cls, value: Any) -> List[str]:
        return parse_multi_value(value)

    @field_validator("time_available_per_week", mode="before")
    @classmethod
    def _hours_as_text(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @model_validator(mode="after")
    def _needs_target(self) -> "TrainingPlanRequest":
        if not self.job_title and self.current_skills is None:
            raise ValueError("Provide at least jobTitle or currentSkills.")
        return self
