"""Employee roster models.

Attributes are snake_case in Python and camelCase on the wire, matching the
shape of the seed data (``firstName``, ``performanceRating``, ...).
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    field_validator,
)
from pydantic.alias_generators import to_camel

HIRE_DATE_FORMATS = ("%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%m/%d/%Y")


class Department(str, Enum):
    ENGINEERING = "Engineering"
    MARKETING = "Marketing"
    SALES = "Sales"
    HR = "HR"
    FINANCE = "Finance"


def parse_hire_date(value: str) -> datetime:
    for fmt in HIRE_DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)  # noqa: DTZ007
        except ValueError:
            continue
    raise ValueError(f"Unparseable hire date: {value!r}")


def _split_skills(value: object) -> object:
    # The add/edit form sends skills as one comma-separated string.
    if isinstance(value, str):
        return [s.strip() for s in value.split(",") if s.strip()]
    return value


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class EmployeeFields(_CamelModel):
    """Every field of an employee except its id."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    department: Department
    position: str = Field(..., min_length=1)
    # Whole amounts stay ints so they serialize without a trailing ".0".
    salary: NonNegativeInt | NonNegativeFloat
    hire_date: str = Field(..., min_length=1)
    age: int = Field(..., ge=18, le=100)
    location: str = Field(..., min_length=1)
    performance_rating: float = Field(..., ge=0.0, le=5.0)
    projects_completed: int = Field(..., ge=0)
    is_active: bool
    skills: list[str] = Field(default_factory=list)
    manager: str | None = None

    @field_validator("hire_date")
    @classmethod
    def _check_hire_date(cls, value: str) -> str:
        parse_hire_date(value)
        return value

    @field_validator("skills", mode="before")
    @classmethod
    def _normalize_skills(cls, value: object) -> object:
        return _split_skills(value)


class Employee(EmployeeFields):
    """A roster record. Instances are immutable; edits produce a merged copy."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)


class EmployeeCreate(EmployeeFields):
    """Request body for adding an employee. The id is assigned by the store."""


class EmployeeUpdate(_CamelModel):
    """Partial update; only the fields that were sent are merged."""

    first_name: str | None = Field(default=None, min_length=1)
    last_name: str | None = Field(default=None, min_length=1)
    email: EmailStr | None = None
    department: Department | None = None
    position: str | None = Field(default=None, min_length=1)
    salary: NonNegativeInt | NonNegativeFloat | None = None
    hire_date: str | None = Field(default=None, min_length=1)
    age: int | None = Field(default=None, ge=18, le=100)
    location: str | None = Field(default=None, min_length=1)
    performance_rating: float | None = Field(default=None, ge=0.0, le=5.0)
    projects_completed: int | None = Field(default=None, ge=0)
    is_active: bool | None = None
    skills: list[str] | None = None
    manager: str | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def _normalize_skills(cls, value: object) -> object:
        return _split_skills(value)


class EmployeeDetail(_CamelModel):
    """Display-ready view of one employee for the details panel."""

    id: int
    full_name: str
    email: str
    department: str
    position: str
    location: str
    salary: str
    status: str
    performance_rating: str
    performance_tier: str
    projects_completed: int
    hire_date: str
    age: int
    manager: str | None = None
    skills: list[str] = []
