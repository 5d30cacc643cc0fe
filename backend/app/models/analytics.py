"""Chart datasets and summary figures derived from the roster."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CategoryCount(_CamelModel):
    category: str
    count: int


class GroupAverage(_CamelModel):
    department: str
    average: float
    total: float


class HistogramBucket(_CamelModel):
    name: str
    lower: float
    upper: float
    count: int


class SummaryStats(_CamelModel):
    total_employees: int
    active_employees: int
    avg_salary: int
    avg_performance_rating: float
    total_departments: int


class DepartmentProjects(_CamelModel):
    subject: str
    projects: int
    full_mark: int


class MonthlyHires(_CamelModel):
    month: str
    hires: int
