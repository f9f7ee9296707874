"""Plain-language job summary schemas."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hopeful_futures.utils.helpers import parse_multi_value


class Tone(str, Enum):
    ENCOURAGING = "encouraging"
    NEUTRAL = "neutral"
    DIRECT = "direct"


class Provider(str, Enum):
    """Which path produced an enrichment record. Never shown to the user as an error."""

    GEMINI = "gemini"
    FALLBACK = "fallback"


class AudienceProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    interests: List[str] = Field(default_factory=list)
    disabilities: List[str] = Field(default_factory=list)
    medical_conditions: List[str] = Field(default_factory=list, alias="medicalConditions")
    preferred_hours: Optional[str] = Field(default=None, alias="preferredHours")
    location: Optional[str] = None

    @field_validator("interests", "disabilities", "medical_conditions", mode="before")
    @classmethod
    def _multi_value(cls, value: Any) -> List[str]:
        return parse_multi_value(value)


class SimplifyJobRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_title: Optional[str] = Field(default=None, alias="jobTitle")
    job_description: str = Field(..., alias="jobDescription", min_length=1)
    audience_profile: Optional[AudienceProfile] = Field(default=None, alias="audienceProfile")


class SimplifiedJob(BaseModel):
    """Plain-language rewrite of one listing."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    job_title: str = Field(..., alias="jobTitle")
    simplified_description: str = Field(default="", alias="simplifiedDescription")
    key_qualifications: List[str] = Field(default_factory=list, alias="keyQualifications")
    accommodations: List[str] = Field(default_factory=list)
    training_suggestions: List[str] = Field(default_factory=list, alias="trainingSuggestions")
    tone: Tone = Tone.ENCOURAGING
    provider: Provider = Provider.GEMINI

    @field_validator("key_qualifications", "accommodations", "training_suggestions", mode="before")
    @classmethod
    def _string_list(cls, value: Any) -> List[str]:
        return parse_multi_value(value)

    @field_validator("tone", mode="before")
    @classmethod
    def _known_tone(cls, value: Any) -> Tone:
        if isinstance(value, Tone):
            return value
        try:
            return Tone((value or "").strip().lower())
        except (AttributeError, ValueError):
            return Tone.ENCOURAGING
