"""
Domain models for health-screening guidelines and derived schedules.

These models represent the core business concepts and are framework-agnostic.
They use Pydantic for validation and normalize the two record shapes we receive
(snake_case rows from the record store, camelCase payloads from clients) into
a single canonical form at construction time.
"""

from datetime import date
from enum import Enum
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

SYSTEM_OWNER = "system"


class Gender(str, Enum):
    """Gender of a person as recorded in their profile."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class GuidelineGender(str, Enum):
    """Genders a guideline applies to."""

    MALE = "male"
    FEMALE = "female"
    ALL = "all"


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class ScreeningStatus(str, Enum):
    """Status of a screening on a person's schedule."""

    COMPLETED = "completed"
    DUE = "due"
    OVERDUE = "overdue"
    UPCOMING = "upcoming"


def age_on(date_of_birth: date, today: date) -> int:
    """Whole years between a birth date and today."""
    if date_of_birth > today:
        raise ValueError(f"date of birth {date_of_birth} is in the future")
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


class Person(BaseModel):
    """Read-only profile of the person a schedule is computed for."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    age: int = Field(ge=0)
    gender: Gender = Gender.OTHER
    date_of_birth: date | None = Field(
        default=None, validation_alias=AliasChoices("date_of_birth", "dateOfBirth")
    )
    user_id: str | None = Field(default=None, validation_alias=AliasChoices("user_id", "userId"))
    is_admin: bool = Field(default=False, validation_alias=AliasChoices("is_admin", "isAdmin"))
    name: str = ""

    @classmethod
    def from_date_of_birth(
        cls,
        date_of_birth: date,
        gender: Gender | str = Gender.OTHER,
        today: date | None = None,
        **extra: object,
    ) -> "Person":
        today = today or date.today()
        return cls(
            age=age_on(date_of_birth, today),
            gender=gender,
            date_of_birth=date_of_birth,
            **extra,
        )


class AgeBand(BaseModel):
    """One age sub-range of a guideline with its own frequency and notes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    min: int = Field(ge=0, validation_alias=AliasChoices("min", "min_age", "minAge"))
    max: int | None = Field(
        default=None, validation_alias=AliasChoices("max", "max_age", "maxAge")
    )
    label: str = ""
    frequency: str | None = None
    frequency_months: int | None = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("frequency_months", "frequencyMonths"),
    )
    frequency_months_max: int | None = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("frequency_months_max", "frequencyMonthsMax"),
    )
    notes: str | None = None

    @model_validator(mode="before")
    @classmethod
    def default_label(cls, data: object) -> object:
        if isinstance(data, dict) and not data.get("label"):
            low = next((data[k] for k in ("min", "min_age", "minAge") if k in data), None)
            high = next((data[k] for k in ("max", "max_age", "maxAge") if k in data), None)
            if low is not None:
                data = {**data, "label": f"{low}+" if high is None else f"{low}-{high}"}
        return data

    @model_validator(mode="after")
    def check_bounds(self) -> "AgeBand":
        if self.max is not None and self.min > self.max:
            raise ValueError(f"age band min {self.min} is greater than max {self.max}")
        if (
            self.frequency_months is not None
            and self.frequency_months_max is not None
            and self.frequency_months_max < self.frequency_months
        ):
            raise ValueError("frequency_months_max must be >= frequency_months")
        return self

    def contains(self, age: int) -> bool:
        """Inclusive on both ends; an unbounded band contains every age from min."""
        return age >= self.min and (self.max is None or age <= self.max)


class GuidelineResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    description: str | None = None
    type: Literal["risk", "resource"] = "resource"


class Guideline(BaseModel):
    """A reusable, age/gender-scoped screening recommendation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    description: str = ""
    category: str = ""
    genders: list[GuidelineGender] = Field(default_factory=lambda: [GuidelineGender.ALL])
    visibility: Visibility = Visibility.PRIVATE
    # Left unconstrained here so a malformed record reaches the schedule
    # assembler and is isolated there instead of failing the whole load.
    age_ranges: list[AgeBand] = Field(
        default_factory=list, validation_alias=AliasChoices("age_ranges", "ageRanges")
    )
    frequency: str | None = None
    frequency_months: int | None = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("frequency_months", "frequencyMonths"),
    )
    frequency_months_max: int | None = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("frequency_months_max", "frequencyMonthsMax"),
    )
    last_completed_date: date | None = Field(
        default=None,
        validation_alias=AliasChoices("last_completed_date", "lastCompletedDate"),
    )
    next_due_date: date | None = Field(
        default=None, validation_alias=AliasChoices("next_due_date", "nextDueDate")
    )
    tags: list[str] = Field(default_factory=list)
    created_by: str | None = Field(
        default=None, validation_alias=AliasChoices("created_by", "createdBy")
    )
    original_guideline_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("original_guideline_id", "originalGuidelineId"),
    )
    resources: list[GuidelineResource] = Field(default_factory=list)

    def is_visible_to(self, user_id: str | None) -> bool:
        return self.visibility == Visibility.PUBLIC or (
            user_id is not None and self.created_by == user_id
        )


class UserPreferences(BaseModel):
    """Guidelines a user has chosen to track. Empty means no preference set."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    selected_guideline_ids: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("selected_guideline_ids", "selectedGuidelineIds"),
    )


class ScheduleEntry(BaseModel):
    """One derived line of a person's screening schedule. Never persisted."""

    model_config = ConfigDict(frozen=True)

    guideline_id: str
    name: str
    description: str = ""
    frequency_text: str = ""
    status: ScreeningStatus
    due_date: date | None = Field(default=None, description="None when it cannot be computed")
    last_completed_date: date | None = None
    notes: str | None = None
    is_future: bool = Field(default=False, description="Matched band has not started yet")
    age_range_label: str | None = None

    @property
    def due_date_display(self) -> str:
        return self.due_date.isoformat() if self.due_date else "Unknown"
