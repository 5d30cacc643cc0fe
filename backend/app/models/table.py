"""View-state and result models for the employee table."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.employee import Employee

ALL_DEPARTMENTS = "all"


class SortField(str, Enum):
    ID = "id"
    NAME = "name"
    DEPARTMENT = "department"
    SALARY = "salary"
    PERFORMANCE_RATING = "performanceRating"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ViewState(BaseModel):
    """Transient filter, sort and pagination parameters chosen by a user."""

    model_config = ConfigDict(frozen=True)

    search: str = ""
    department: str = ALL_DEPARTMENTS
    sort_field: SortField = SortField.ID
    sort_direction: SortDirection = SortDirection.ASC
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)


class TableView(BaseModel):
    """One visible page of the filtered, sorted roster."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    rows: list[Employee]
    total_matched: int
    total_pages: int
    page: int
    page_size: int
