from __future__ import annotations

import csv
import io

from app.models.table import SortDirection, SortField, ViewState
from app.services.export import EXPORT_COLUMNS, export_csv, export_frame
from app.services.table_view import filtered_rows


def _parse(content: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(content)))


def test_export_header_and_column_order(new_employee):
    emp = new_employee(
        7,
        firstName="Sarah",
        lastName="Johnson",
        email="sarah@acme.com",
        department="Engineering",
        position="Senior Engineer",
        location="San Francisco",
        salary=125000,
        performanceRating=4.8,
        isActive=True,
    )
    rows = _parse(export_csv([emp]))

    assert rows[0] == EXPORT_COLUMNS
    assert rows[1] == [
        "7",
        "Sarah Johnson",
        "sarah@acme.com",
        "Engineering",
        "Senior Engineer",
        "San Francisco",
        "125000",
        "4.8",
        "Active",
    ]


def test_export_inactive_label(new_employee):
    rows = _parse(export_csv([new_employee(1, isActive=False)]))
    assert rows[1][-1] == "Inactive"


def test_export_quotes_values_with_commas(new_employee):
    emp = new_employee(1, position="Engineer, Platform")
    rows = _parse(export_csv([emp]))
    assert rows[1][4] == "Engineer, Platform"


def test_export_empty_view_has_only_header():
    assert _parse(export_csv([])) == [EXPORT_COLUMNS]


def test_export_follows_view_order_not_roster(new_employee):
    roster = (
        new_employee(1, salary=90000, department="Sales"),
        new_employee(2, salary=50000, department="Sales"),
        new_employee(3, salary=70000, department="HR"),
    )
    state = ViewState(department="Sales", sort_field=SortField.SALARY, sort_direction=SortDirection.ASC, page_size=1)
    frame = export_frame(filtered_rows(roster, state))

    assert frame["ID"].tolist() == [2, 1]


def test_export_writes_whole_numbers_without_decimals(new_employee):
    rows = _parse(
        export_csv(
            [
                new_employee(1, salary=125000, performanceRating=4.0),
                new_employee(2, salary=98000.5, performanceRating=4.5),
                new_employee(3, salary=70000.0, performanceRating=3.9),
            ]
        )
    )

    assert [(r[6], r[7]) for r in rows[1:]] == [("125000", "4"), ("98000.5", "4.5"), ("70000", "3.9")]
