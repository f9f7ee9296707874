"""Job-seeker profile collected by the form."""

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hopeful_futures.utils.helpers import parse_multi_value


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non-binary"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer-not-to-say"


class HomelessStatus(str, Enum):
    YES = "yes"
    NO = "no"


class Race(str, Enum):
    AMERICAN_INDIAN = "american-indian"
    ASIAN = "asian"
    BLACK = "black"
    HISPANIC = "hispanic"
    NATIVE_HAWAIIAN = "native-hawaiian"
    WHITE = "white"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer-not-to-say"


def _enum_or_none(enum_cls: type, value: Any) -> Any:
    if value in (None, ""):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


class Profile(BaseModel):
    """Submitted profile. Immutable once created; multi-value fields hold unique strings."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    name: str = Field(default="", description="Display name")
    gender: Optional[Gender] = Field(default=None)
    homeless: Optional[HomelessStatus] = Field(default=None, description="Currently experiencing homelessness")
    race: Tuple[Race, ...] = Field(default=())
    interests: Tuple[str, ...] = Field(default=())
    disabilities: Tuple[str, ...] = Field(default=())
    medical_conditions: Tuple[str, ...] = Field(default=())
    location: str = Field(default="", description="City, State")

    @field_validator("name", "location", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> str:
        return value.strip() if isinstance(value, str) else ""

    @field_validator("gender", mode="before")
    @classmethod
    def _tolerant_gender(cls, value: Any) -> Any:
        return _enum_or_none(Gender, value)

    @field_validator("homeless", mode="before")
    @classmethod
    def _tolerant_homeless(cls, value: Any) -> Any:
        return _enum_or_none(HomelessStatus, value)

    @field_validator("race", mode="before")
    @classmethod
    def _known_races(cls, value: Any) -> Tuple[Race, ...]:
        races = (_enum_or_none(Race, v) for v in parse_multi_value(value))
        return tuple(r for r in races if r is not None)

    @field_validator("interests", "disabilities", "medical_conditions", mode="before")
    @classmethod
    def _multi_value(cls, value: Any) -> Tuple[str, ...]:
        return tuple(parse_multi_value(value))
