from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.dependencies import get_roster_store
from app.models.analytics import (
    CategoryCount,
    DepartmentProjects,
    GroupAverage,
    HistogramBucket,
    MonthlyHires,
    SummaryStats,
)
from app.services.aggregations import (
    GroupField,
    NumericField,
    group_average,
    group_count,
    hires_by_month,
    performance_histogram,
    projects_by_department,
    summary_stats,
)
from app.services.roster_store import RosterStore

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/summary", response_model=SummaryStats)
async def get_summary(store: RosterStore = Depends(get_roster_store)):  # noqa: B008
    return summary_stats(store.snapshot)


@router.get("/departments", response_model=list[CategoryCount])
async def get_department_distribution(store: RosterStore = Depends(get_roster_store)):  # noqa: B008
    return group_count(store.snapshot, GroupField.DEPARTMENT)


@router.get("/locations", response_model=list[CategoryCount])
async def get_location_distribution(store: RosterStore = Depends(get_roster_store)):  # noqa: B008
    return group_count(store.snapshot, GroupField.LOCATION)


@router.get("/salary-by-department", response_model=list[GroupAverage])
async def get_salary_by_department(store: RosterStore = Depends(get_roster_store)):  # noqa: B008
    return group_average(store.snapshot, NumericField.SALARY)


@router.get("/performance", response_model=list[HistogramBucket])
async def get_performance_distribution(store: RosterStore = Depends(get_roster_store)):  # noqa: B008
    return performance_histogram(store.snapshot)


@router.get("/projects-by-department", response_model=list[DepartmentProjects])
async def get_projects_by_department(store: RosterStore = Depends(get_roster_store)):  # noqa: B008
    return projects_by_department(store.snapshot)


@router.get("/hires-by-month", response_model=list[MonthlyHires])
async def get_hires_by_month(
    year: int | None = None,
    store: RosterStore = Depends(get_roster_store),  # noqa: B008
):
    return hires_by_month(store.snapshot, year=year)
