"""Reads the static sample roster the store starts from."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from app.models.employee import Employee

logger = logging.getLogger(__name__)


class SeedDataError(Exception):
    pass


def parse_seed_records(raw: Any) -> tuple[Employee, ...]:
    """Validate a ``{"employees": [...]}`` document (or a bare list)."""
    records = raw.get("employees") if isinstance(raw, dict) else raw
    if not isinstance(records, list):
        raise SeedDataError("Seed data must be a list of employees or an object with an 'employees' list")

    employees: list[Employee] = []
    seen: set[int] = set()
    for position, record in enumerate(records):
        try:
            emp = Employee.model_validate(record)
        except ValidationError as e:
            raise SeedDataError(f"Invalid employee at index {position}: {e}") from e
        if emp.id in seen:
            raise SeedDataError(f"Duplicate employee id {emp.id} at index {position}")
        seen.add(emp.id)
        employees.append(emp)

    return tuple(employees)


def load_seed_roster(path: str | Path) -> tuple[Employee, ...]:
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SeedDataError(f"Could not read seed data from {path}: {e}") from e

    employees = parse_seed_records(raw)
    logger.info("Loaded %d employees from %s", len(employees), path.name)
    return employees
