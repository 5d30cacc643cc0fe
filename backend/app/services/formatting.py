"""Display formatting for the details panel and CSV export."""

from __future__ import annotations

import math

from app.models.employee import Employee, EmployeeDetail, parse_hire_date
from app.models.preferences import PrivacyPreferences

NOT_AVAILABLE = "N/A"
HIDDEN = "Hidden"


def format_currency(value: float | None) -> str:
    if value is None or math.isnan(value):
        return NOT_AVAILABLE
    rounded = int(math.floor(abs(value) + 0.5))
    sign = "-" if value < 0 else ""
    return f"{sign}${rounded:,}"


def format_date(value: str | None) -> str:
    if not value:
        return NOT_AVAILABLE
    try:
        parsed = parse_hire_date(value)
    except ValueError:
        return NOT_AVAILABLE
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def format_full_name(first_name: str, last_name: str) -> str:
    return f"{first_name} {last_name}"


def status_label(is_active: bool) -> str:
    return "Active" if is_active else "Inactive"


def performance_tier(rating: float) -> str:
    if rating >= 4.5:
        return "excellent"
    if rating >= 4.0:
        return "good"
    if rating >= 3.5:
        return "average"
    return "needs-improvement"


def employee_detail(emp: Employee, privacy: PrivacyPreferences | None = None) -> EmployeeDetail:
    """Details-panel view; email and salary are masked when privacy hides them."""
    show_email = privacy is None or privacy.show_email
    show_salary = privacy is None or privacy.show_salary
    return EmployeeDetail(
        id=emp.id,
        full_name=format_full_name(emp.first_name, emp.last_name),
        email=emp.email if show_email else HIDDEN,
        department=emp.department,
        position=emp.position,
        location=emp.location,
        salary=format_currency(emp.salary) if show_salary else HIDDEN,
        status=status_label(emp.is_active),
        performance_rating=f"{emp.performance_rating:.1f}/5.0",
        performance_tier=performance_tier(emp.performance_rating),
        projects_completed=emp.projects_completed,
        hire_date=format_date(emp.hire_date),
        age=emp.age,
        manager=emp.manager,
        skills=list(emp.skills),
    )
