"""Chart datasets and summary figures, recomputed in full on every call."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from app.models.analytics import (
    CategoryCount,
    DepartmentProjects,
    GroupAverage,
    HistogramBucket,
    MonthlyHires,
    SummaryStats,
)
from app.models.employee import Employee, parse_hire_date
from app.services.table_view import collation_key

PROJECTS_FULL_MARK = 20
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class GroupField(str, Enum):
    DEPARTMENT = "department"
    LOCATION = "location"


class NumericField(str, Enum):
    SALARY = "salary"
    PERFORMANCE_RATING = "performanceRating"
    PROJECTS_COMPLETED = "projectsCompleted"
    AGE = "age"


_GROUP_ACCESSORS: dict[GroupField, Callable[[Employee], str]] = {
    GroupField.DEPARTMENT: lambda e: e.department,
    GroupField.LOCATION: lambda e: e.location,
}

_NUMERIC_ACCESSORS: dict[NumericField, Callable[[Employee], float]] = {
    NumericField.SALARY: lambda e: e.salary,
    NumericField.PERFORMANCE_RATING: lambda e: e.performance_rating,
    NumericField.PROJECTS_COMPLETED: lambda e: e.projects_completed,
    NumericField.AGE: lambda e: e.age,
}

# Currency averages round to whole units, ratings to one decimal.
_AVERAGE_DECIMALS: dict[NumericField, int] = {
    NumericField.SALARY: 0,
    NumericField.PERFORMANCE_RATING: 1,
    NumericField.PROJECTS_COMPLETED: 0,
    NumericField.AGE: 0,
}


@dataclass(frozen=True)
class Bucket:
    name: str
    lower: float
    upper: float
    closed: bool = False

    def contains(self, value: float) -> bool:
        if self.closed:
            return self.lower <= value <= self.upper
        return self.lower <= value < self.upper


PERFORMANCE_BUCKETS: tuple[Bucket, ...] = (
    Bucket("0-2.5", 0.0, 2.5),
    Bucket("2.5-3.5", 2.5, 3.5),
    Bucket("3.5-4.0", 3.5, 4.0),
    Bucket("4.0-4.5", 4.0, 4.5),
    Bucket("4.5-5.0", 4.5, 5.0, closed=True),
)


def round_half_up(value: float, decimals: int = 0) -> float:
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def safe_mean(values: Sequence[float]) -> float:
    """Arithmetic mean; an empty sequence is 0 rather than NaN."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def _partition(
    roster: Sequence[Employee], key: Callable[[Employee], str]
) -> dict[str, list[Employee]]:
    # dicts keep first-seen order of the categories.
    groups: dict[str, list[Employee]] = {}
    for emp in roster:
        groups.setdefault(key(emp), []).append(emp)
    return groups


def group_count(
    roster: Sequence[Employee], field: GroupField = GroupField.DEPARTMENT, *, sort: bool = False
) -> list[CategoryCount]:
    groups = _partition(roster, _GROUP_ACCESSORS[field])
    counts = [CategoryCount(category=name, count=len(members)) for name, members in groups.items()]
    if sort:
        counts.sort(key=lambda c: collation_key(c.category))
    return counts


def group_average(
    roster: Sequence[Employee], field: NumericField = NumericField.SALARY
) -> list[GroupAverage]:
    value_of = _NUMERIC_ACCESSORS[field]
    decimals = _AVERAGE_DECIMALS[field]
    result: list[GroupAverage] = []
    for department, members in _partition(roster, _GROUP_ACCESSORS[GroupField.DEPARTMENT]).items():
        values = [value_of(e) for e in members]
        result.append(
            GroupAverage(
                department=department,
                average=round_half_up(safe_mean(values), decimals),
                total=sum(values),
            )
        )
    return result


def histogram(
    roster: Sequence[Employee],
    buckets: Sequence[Bucket] = PERFORMANCE_BUCKETS,
    field: NumericField = NumericField.PERFORMANCE_RATING,
) -> list[HistogramBucket]:
    value_of = _NUMERIC_ACCESSORS[field]
    values = [value_of(e) for e in roster]
    return [
        HistogramBucket(
            name=b.name,
            lower=b.lower,
            upper=b.upper,
            count=sum(1 for v in values if b.contains(v)),
        )
        for b in buckets
    ]


def performance_histogram(roster: Sequence[Employee]) -> list[HistogramBucket]:
    return histogram(roster, PERFORMANCE_BUCKETS, NumericField.PERFORMANCE_RATING)


def field_mean(roster: Sequence[Employee], field: NumericField) -> float:
    value_of = _NUMERIC_ACCESSORS[field]
    return round_half_up(safe_mean([value_of(e) for e in roster]), _AVERAGE_DECIMALS[field])


def summary_stats(roster: Sequence[Employee]) -> SummaryStats:
    return SummaryStats(
        total_employees=len(roster),
        active_employees=sum(1 for e in roster if e.is_active),
        avg_salary=int(field_mean(roster, NumericField.SALARY)),
        avg_performance_rating=field_mean(roster, NumericField.PERFORMANCE_RATING),
        total_departments=len({e.department for e in roster}),
    )


def projects_by_department(roster: Sequence[Employee]) -> list[DepartmentProjects]:
    return [
        DepartmentProjects(
            subject=avg.department,
            projects=int(avg.average),
            full_mark=PROJECTS_FULL_MARK,
        )
        for avg in group_average(roster, NumericField.PROJECTS_COMPLETED)
    ]


def hires_by_month(roster: Sequence[Employee], year: int | None = None) -> list[MonthlyHires]:
    """Hires per calendar month, optionally restricted to one year."""
    counts = [0] * 12
    for emp in roster:
        hired = parse_hire_date(emp.hire_date)
        if year is not None and hired.year != year:
            continue
        counts[hired.month - 1] += 1
    return [MonthlyHires(month=m, hires=n) for m, n in zip(MONTHS, counts)]
