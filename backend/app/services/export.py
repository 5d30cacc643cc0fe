"""CSV export of the filtered, sorted table (not the full roster)."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from app.models.employee import Employee
from app.services.formatting import format_full_name, status_label

EXPORT_FILENAME = "employees.csv"
EXPORT_COLUMNS = ["ID", "Name", "Email", "Department", "Position", "Location", "Salary", "Performance", "Status"]


def _plain_number(value: float) -> int | float:
    # 125000.0 is written as 125000, 4.0 as 4.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def export_frame(rows: Iterable[Employee]) -> pd.DataFrame:
    records = [
        [
            emp.id,
            format_full_name(emp.first_name, emp.last_name),
            emp.email,
            emp.department,
            emp.position,
            emp.location,
            _plain_number(emp.salary),
            _plain_number(emp.performance_rating),
            status_label(emp.is_active),
        ]
        for emp in rows
    ]
    # object columns keep each cell's own type, so one fractional salary
    # does not turn every other salary into a float.
    return pd.DataFrame(records, columns=EXPORT_COLUMNS, dtype=object)


def export_csv(rows: Iterable[Employee]) -> str:
    return export_frame(rows).to_csv(index=False)
