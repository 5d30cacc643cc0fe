from __future__ import annotations

import csv
import io

import pytest

from app.services.roster_store import roster_store


def test_list_employees_default_page(client):
    response = client.get("/api/v1/employees")
    assert response.status_code == 200
    data = response.json()

    assert data["totalMatched"] == 15
    assert data["totalPages"] == 2
    assert data["page"] == 1
    assert data["pageSize"] == 10
    assert [row["id"] for row in data["rows"]] == list(range(1, 11))
    assert data["rows"][0]["firstName"] == "Sarah"
    assert "performanceRating" in data["rows"][0]


def test_list_employees_second_page(client):
    data = client.get("/api/v1/employees", params={"page": 2}).json()
    assert [row["id"] for row in data["rows"]] == [11, 12, 13, 14, 15]


def test_list_employees_search_department_and_sort(client):
    params = {"search": "eng", "department": "Marketing", "sort": "salary", "direction": "desc"}
    data = client.get("/api/v1/employees", params=params).json()

    assert [row["id"] for row in data["rows"]] == [15]
    assert data["rows"][0]["position"] == "Marketing Engineer"


def test_list_employees_sorted_by_salary(client):
    data = client.get("/api/v1/employees", params={"sort": "salary", "page_size": 3}).json()

    salaries = [row["salary"] for row in data["rows"]]
    assert salaries == sorted(salaries)
    assert data["totalPages"] == 5


def test_list_employees_zero_matches(client):
    data = client.get("/api/v1/employees", params={"search": "zzz", "page": 2}).json()

    assert data["rows"] == []
    assert data["totalMatched"] == 0
    assert data["totalPages"] == 1
    assert data["page"] == 2


def test_list_employees_search_keeps_whitespace(client):
    assert client.get("/api/v1/employees", params={"search": "johnson"}).json()["totalMatched"] == 1
    assert client.get("/api/v1/employees", params={"search": "johnson "}).json()["totalMatched"] == 0

    # Only a position can contain a space; CFO (7) and Accountant (14) cannot.
    data = client.get("/api/v1/employees", params={"search": " ", "page_size": 100}).json()
    assert data["totalMatched"] == 13
    assert {7, 14}.isdisjoint(row["id"] for row in data["rows"])


@pytest.mark.parametrize(
    "params",
    [{"page": 0}, {"page_size": 0}, {"page_size": 101}, {"sort": "age"}, {"direction": "up"}],
)
def test_list_employees_rejects_bad_view_state(client, params):
    assert client.get("/api/v1/employees", params=params).status_code == 422


def test_list_departments(client):
    response = client.get("/api/v1/employees/departments")
    assert response.json() == ["Engineering", "Finance", "HR", "Marketing", "Sales"]


def test_get_employee(client):
    response = client.get("/api/v1/employees/7")
    assert response.status_code == 200
    assert response.json()["lastName"] == "Brown"


def test_get_employee_whole_salary_stays_integer(client):
    salary = client.get("/api/v1/employees/1").json()["salary"]
    assert salary == 125000
    assert isinstance(salary, int)


def test_get_employee_not_found(client):
    response = client.get("/api/v1/employees/999")
    assert response.status_code == 404
    assert "999" in response.json()["detail"]


def test_get_employee_details(client):
    data = client.get("/api/v1/employees/1/details").json()

    assert data["fullName"] == "Sarah Johnson"
    assert data["email"] == "sarah.johnson@acme.com"
    assert data["salary"] == "Hidden"
    assert data["hireDate"] == "Mar 15, 2019"
    assert data["performanceTier"] == "excellent"


def test_get_employee_details_follows_privacy_preferences(client):
    client.patch("/api/v1/preferences", json={"privacy": {"showSalary": True, "showEmail": False}})
    data = client.get("/api/v1/employees/1/details").json()

    assert data["salary"] == "$125,000"
    assert data["email"] == "Hidden"


def test_create_employee(client, new_record):
    response = client.post("/api/v1/employees", json=new_record(firstName="Nina", skills="Go, Rust"))
    assert response.status_code == 201
    data = response.json()

    assert data["id"] == 16
    assert data["firstName"] == "Nina"
    assert data["skills"] == ["Go", "Rust"]
    assert roster_store.get(16).first_name == "Nina"


def test_create_employee_invalid(client, new_record):
    response = client.post("/api/v1/employees", json=new_record(email="nope"))
    assert response.status_code == 422
    assert len(roster_store.snapshot) == 15


def test_create_employee_missing_field(client, new_record):
    record = new_record()
    del record["position"]

    assert client.post("/api/v1/employees", json=record).status_code == 422


def test_update_employee_merges_fields(client):
    response = client.patch("/api/v1/employees/4", json={"salary": 91000, "isActive": False})
    assert response.status_code == 200
    data = response.json()

    assert data["salary"] == 91000
    assert data["isActive"] is False
    assert data["firstName"] == "David"


def test_update_employee_not_found(client):
    assert client.patch("/api/v1/employees/404", json={"salary": 1}).status_code == 404


def test_update_employee_out_of_range(client):
    assert client.patch("/api/v1/employees/4", json={"performanceRating": 7}).status_code == 422
    assert roster_store.get(4).performance_rating == 3.9


def test_delete_employee(client):
    response = client.delete("/api/v1/employees/2")
    assert response.status_code == 204

    assert client.get("/api/v1/employees/2").status_code == 404
    assert client.get("/api/v1/employees").json()["totalMatched"] == 14


def test_delete_employee_not_found(client):
    assert client.delete("/api/v1/employees/999").status_code == 404


def test_export_csv_uses_filtered_view(client):
    response = client.get("/api/v1/employees/export", params={"department": "Finance", "sort": "salary"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "employees.csv" in response.headers["content-disposition"]

    rows = list(csv.reader(io.StringIO(response.text)))
    assert rows[0][0] == "ID"
    assert [r[0] for r in rows[1:]] == ["14", "6", "7"]


def test_export_csv_ignores_pagination(client):
    response = client.get("/api/v1/employees/export", params={"page_size": 2, "page": 3})
    rows = list(csv.reader(io.StringIO(response.text)))
    assert len(rows) == 16


def test_export_forbidden_when_disabled(client):
    client.patch("/api/v1/preferences", json={"privacy": {"allowExport": False}})
    assert client.get("/api/v1/employees/export").status_code == 403


@pytest.mark.anyio
async def test_async_create_then_delete_round_trip(async_client, new_record):
    before = [row["id"] for row in (await async_client.get("/api/v1/employees", params={"page_size": 100})).json()["rows"]]

    created = (await async_client.post("/api/v1/employees", json=new_record())).json()
    response = await async_client.delete(f"/api/v1/employees/{created['id']}")
    assert response.status_code == 204

    after = [row["id"] for row in (await async_client.get("/api/v1/employees", params={"page_size": 100})).json()["rows"]]
    assert after == before
