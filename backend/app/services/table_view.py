"""Search, department filter, sort and pagination over the roster.

Everything here is a pure function of ``(roster, view_state)``; the roster is
never modified and nothing is cached between calls.
"""

from __future__ import annotations

import math
import unicodedata
from collections.abc import Callable, Iterable, Sequence

from app.models.employee import Employee
from app.models.table import ALL_DEPARTMENTS, SortDirection, SortField, TableView, ViewState

SortKey = tuple[str, str] | float


def collation_key(value: str) -> tuple[str, str]:
    """Accent- and case-insensitive ordering, then exact text."""
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), value


_SORT_ACCESSORS: dict[SortField, Callable[[Employee], SortKey]] = {
    SortField.ID: lambda e: float(e.id),
    SortField.NAME: lambda e: collation_key(e.first_name),
    SortField.DEPARTMENT: lambda e: collation_key(e.department),
    SortField.SALARY: lambda e: float(e.salary),
    SortField.PERFORMANCE_RATING: lambda e: float(e.performance_rating),
}


def _search_fields(emp: Employee) -> tuple[str, ...]:
    return (emp.first_name, emp.last_name, emp.email, emp.department, emp.position)


def matches_search(emp: Employee, term: str) -> bool:
    if not term:
        return True
    needle = term.casefold()
    return any(needle in field.casefold() for field in _search_fields(emp))


def matches_department(emp: Employee, department: str) -> bool:
    return department == ALL_DEPARTMENTS or emp.department == department


def filter_rows(roster: Iterable[Employee], search: str = "", department: str = ALL_DEPARTMENTS) -> list[Employee]:
    return [emp for emp in roster if matches_search(emp, search) and matches_department(emp, department)]


def sort_rows(
    rows: Iterable[Employee],
    field: SortField = SortField.ID,
    direction: SortDirection = SortDirection.ASC,
) -> list[Employee]:
    # sorted() keeps equal keys in input order in both directions.
    return sorted(rows, key=_SORT_ACCESSORS[field], reverse=direction == SortDirection.DESC)


def filtered_rows(roster: Iterable[Employee], view_state: ViewState) -> list[Employee]:
    """Filtered and sorted, before pagination. This is what export receives."""
    rows = filter_rows(roster, view_state.search, view_state.department)
    return sort_rows(rows, view_state.sort_field, view_state.sort_direction)


def total_pages(total_matched: int, page_size: int) -> int:
    return max(1, math.ceil(total_matched / page_size))


def paginate(rows: Sequence[Employee], page: int, page_size: int) -> list[Employee]:
    start = min((page - 1) * page_size, len(rows))
    end = min(page * page_size, len(rows))
    return list(rows[start:end])


def build_view(roster: Iterable[Employee], view_state: ViewState) -> TableView:
    """Produce the visible page plus pagination metadata.

    A page past the end yields no rows; the requested page is echoed back
    unchanged. Callers reset to page 1 on any filter change (``with_filters``).
    """
    rows = filtered_rows(roster, view_state)
    return TableView(
        rows=paginate(rows, view_state.page, view_state.page_size),
        total_matched=len(rows),
        total_pages=total_pages(len(rows), view_state.page_size),
        page=view_state.page,
        page_size=view_state.page_size,
    )


def department_options(roster: Iterable[Employee]) -> list[str]:
    return sorted({emp.department for emp in roster}, key=collation_key)


def toggle_sort(view_state: ViewState, field: SortField) -> ViewState:
    if view_state.sort_field == field:
        direction = SortDirection.DESC if view_state.sort_direction == SortDirection.ASC else SortDirection.ASC
        return view_state.model_copy(update={"sort_direction": direction})
    return view_state.model_copy(update={"sort_field": field, "sort_direction": SortDirection.ASC})


def with_filters(
    view_state: ViewState,
    *,
    search: str | None = None,
    department: str | None = None,
) -> ViewState:
    update: dict[str, object] = {"page": 1}
    if search is not None:
        update["search"] = search
    if department is not None:
        update["department"] = department
    return view_state.model_copy(update=update)


def clear_filters(view_state: ViewState) -> ViewState:
    return with_filters(view_state, search="", department=ALL_DEPARTMENTS)


def with_page_size(view_state: ViewState, page_size: int) -> ViewState:
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    return view_state.model_copy(update={"page_size": page_size, "page": 1})
