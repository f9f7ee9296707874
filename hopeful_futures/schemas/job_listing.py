"""Job search request/response schemas."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hopeful_futures.utils.helpers import parse_multi_value


class JobListing(BaseModel):
    """One job opportunity; the unit of enrichment on the results page."""

    id: str = Field(..., description="Unique within one result set")
    title: str
    employer: str
    description: str
    pay: str = Field(..., description="Free-text pay, e.g. '$18/hr · 20 hrs/week'")
    location: str


class JobSearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    location: str = Field(..., min_length=1)
    interests: List[str] = Field(default_factory=list)
    disabilities: List[str] = Field(default_factory=list)
    medical_conditions: List[str] = Field(default_factory=list, alias="medicalConditions")

    @field_validator("location", mode="before")
    @classmethod
    def _strip_location(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("interests", "disabilities", "medical_conditions", mode="before")
    @classmethod
    def _multi_value(cls, value: Any) -> List[str]:
        return parse_multi_value(value)


class JobSearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    jobs: List[JobListing] = Field(default_factory=list)
    fallback_used: bool = Field(default=False, alias="fallbackUsed")
