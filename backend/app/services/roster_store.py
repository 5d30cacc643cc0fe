"""In-memory employee roster with immutable snapshots.

The pure functions (``add_employee``, ``update_employee``, ``remove_employee``)
never touch their input; each returns a new tuple. ``RosterStore`` owns the
current snapshot and publishes a replacement after a fixed simulated delay.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from app.core.config import Settings
from app.models.employee import Employee
from app.services.seed_loader import load_seed_roster

logger = logging.getLogger(__name__)

Roster = tuple[Employee, ...]
RosterListener = Callable[[Roster], None]


class RosterError(Exception):
    pass


class RosterValidationError(RosterError):
    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class EmployeeNotFoundError(RosterError):
    def __init__(self, employee_id: int) -> None:
        super().__init__(f"Employee with id {employee_id} not found")
        self.employee_id = employee_id


def next_employee_id(roster: Roster) -> int:
    """One past the highest id in use; an empty roster starts at 1."""
    return max((e.id for e in roster), default=0) + 1


_FIELD_BY_ALIAS: dict[str, str] = {
    (info.alias or name): name for name, info in Employee.model_fields.items()
}


def _field_names(record: Mapping[str, Any]) -> dict[str, Any]:
    # Accept both wire (camelCase) and attribute (snake_case) keys.
    return {_FIELD_BY_ALIAS.get(key, key): value for key, value in record.items()}


def _validate(data: Mapping[str, Any]) -> Employee:
    try:
        return Employee.model_validate(data)
    except ValidationError as e:
        raise RosterValidationError(
            f"Invalid employee record: {e.error_count()} error(s)",
            errors=e.errors(include_url=False, include_context=False),
        ) from e


def _index_of(roster: Roster, employee_id: int) -> int:
    for i, emp in enumerate(roster):
        if emp.id == employee_id:
            return i
    raise EmployeeNotFoundError(employee_id)


def add_employee(roster: Roster, record: Mapping[str, Any]) -> Roster:
    data = _field_names(record)
    data.pop("id", None)
    data["id"] = next_employee_id(roster)
    return (*roster, _validate(data))


def update_employee(roster: Roster, employee_id: int, changes: Mapping[str, Any]) -> Roster:
    idx = _index_of(roster, employee_id)
    current = roster[idx]

    changes = _field_names(changes)
    if "id" in changes and changes.pop("id") != employee_id:
        raise RosterValidationError("Employee id cannot be changed")

    merged = {**current.model_dump(), **changes}
    updated = _validate(merged)
    return (*roster[:idx], updated, *roster[idx + 1 :])


def remove_employee(roster: Roster, employee_id: int) -> Roster:
    idx = _index_of(roster, employee_id)
    return (*roster[:idx], *roster[idx + 1 :])


class RosterStore:
    def __init__(self, latency_seconds: float = 0.0) -> None:
        self.latency_seconds = latency_seconds
        self.initialized: bool = False
        self._snapshot: Roster = ()
        self._listeners: list[RosterListener] = []

    def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        self.latency_seconds = settings.SIMULATED_LATENCY_SECONDS
        self.load(load_seed_roster(settings.SEED_DATA_PATH))
        self.initialized = True
        logger.info("RosterStore initialized (employees=%d)", len(self._snapshot))

    def close(self) -> None:
        self._snapshot = ()
        self._listeners.clear()
        self.initialized = False

    def load(self, employees: Iterable[Employee]) -> None:
        self._publish(tuple(employees))

    @property
    def snapshot(self) -> Roster:
        return self._snapshot

    def get(self, employee_id: int) -> Employee:
        return self._snapshot[_index_of(self._snapshot, employee_id)]

    def subscribe(self, listener: RosterListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def add(self, record: Mapping[str, Any]) -> Employee:
        await self._simulate_latency()
        roster = add_employee(self._snapshot, record)
        self._publish(roster)
        created = roster[-1]
        logger.info("Added employee id=%d", created.id)
        return created

    async def update(self, employee_id: int, changes: Mapping[str, Any]) -> Employee:
        await self._simulate_latency()
        roster = update_employee(self._snapshot, employee_id, changes)
        self._publish(roster)
        logger.info("Updated employee id=%d fields=%s", employee_id, sorted(changes))
        return roster[_index_of(roster, employee_id)]

    async def remove(self, employee_id: int) -> None:
        await self._simulate_latency()
        roster = remove_employee(self._snapshot, employee_id)
        self._publish(roster)
        logger.info("Removed employee id=%d", employee_id)

    async def _simulate_latency(self) -> None:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

    def _publish(self, roster: Roster) -> None:
        self._snapshot = roster
        for listener in list(self._listeners):
            listener(roster)


roster_store = RosterStore()
