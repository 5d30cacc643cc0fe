from __future__ import annotations

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.main import app
from app.models.employee import Employee
from app.services.preferences_service import preferences_service
from app.services.roster_store import roster_store


def employee_record(**overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane.doe@acme.com",
        "department": "Engineering",
        "position": "Software Engineer",
        "salary": 100000,
        "hireDate": "2020-01-15",
        "age": 30,
        "location": "Berlin",
        "performanceRating": 4.0,
        "projectsCompleted": 10,
        "isActive": True,
        "skills": ["Python"],
        "manager": None,
    }
    record.update(overrides)
    return record


def make_employee(employee_id: int, **overrides: Any) -> Employee:
    return Employee.model_validate({"id": employee_id, **employee_record(**overrides)})


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _fresh_state():
    from app.core.config import settings

    original_latency = settings.SIMULATED_LATENCY_SECONDS
    settings.SIMULATED_LATENCY_SECONDS = 0.0
    roster_store.close()
    roster_store.initialize(settings)
    preferences_service.initialize(settings)
    yield
    roster_store.close()
    settings.SIMULATED_LATENCY_SECONDS = original_latency


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def small_roster() -> tuple[Employee, ...]:
    return (
        make_employee(1, firstName="Carol", salary=90000, department="Engineering", performanceRating=4.2),
        make_employee(2, firstName="alice", salary=50000, department="Marketing", performanceRating=3.6),
        make_employee(3, firstName="Bob", salary=70000, department="Sales", performanceRating=2.0),
    )


@pytest.fixture
def new_employee():
    return make_employee


@pytest.fixture
def new_record():
    return employee_record
