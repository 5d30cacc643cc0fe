from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.core.dependencies import (
    get_preferences_service,
    get_roster_store,
    get_view_state,
    require_export_allowed,
)
from app.models.employee import Employee, EmployeeCreate, EmployeeDetail, EmployeeUpdate
from app.models.table import TableView, ViewState
from app.services.export import EXPORT_FILENAME, export_csv
from app.services.formatting import employee_detail
from app.services.preferences_service import PreferencesService
from app.services.roster_store import EmployeeNotFoundError, RosterStore, RosterValidationError
from app.services.table_view import build_view, department_options, filtered_rows

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _not_found(err: EmployeeNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=str(err),
    )


def _invalid(err: RosterValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=err.errors or str(err),
    )


@router.get("", response_model=TableView)
async def list_employees(
    view_state: ViewState = Depends(get_view_state),  # noqa: B008
    store: RosterStore = Depends(get_roster_store),  # noqa: B008
):
    return build_view(store.snapshot, view_state)


@router.get("/departments", response_model=list[str])
async def list_departments(store: RosterStore = Depends(get_roster_store)):  # noqa: B008
    return department_options(store.snapshot)


@router.get("/export", dependencies=[Depends(require_export_allowed)])
async def export_employees(
    view_state: ViewState = Depends(get_view_state),  # noqa: B008
    store: RosterStore = Depends(get_roster_store),  # noqa: B008
):
    rows = filtered_rows(store.snapshot, view_state)
    logger.info("Exporting %d employees", len(rows))
    return Response(
        content=export_csv(rows).encode("utf-8"),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
    )


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(employee_id: int, store: RosterStore = Depends(get_roster_store)):  # noqa: B008
    try:
        return store.get(employee_id)
    except EmployeeNotFoundError as err:
        raise _not_found(err) from err


@router.get("/{employee_id}/details", response_model=EmployeeDetail)
async def get_employee_details(
    employee_id: int,
    store: RosterStore = Depends(get_roster_store),  # noqa: B008
    prefs: PreferencesService = Depends(get_preferences_service),  # noqa: B008
):
    try:
        return employee_detail(store.get(employee_id), prefs.get().privacy)
    except EmployeeNotFoundError as err:
        raise _not_found(err) from err


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeCreate,
    store: RosterStore = Depends(get_roster_store),  # noqa: B008
):
    try:
        return await store.add(payload.model_dump())
    except RosterValidationError as err:
        raise _invalid(err) from err
    except Exception as err:
        logger.exception("Failed to add employee")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add employee",
        ) from err


@router.patch("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    store: RosterStore = Depends(get_roster_store),  # noqa: B008
):
    try:
        return await store.update(employee_id, payload.model_dump(exclude_unset=True))
    except EmployeeNotFoundError as err:
        raise _not_found(err) from err
    except RosterValidationError as err:
        raise _invalid(err) from err
    except Exception as err:
        logger.exception("Failed to update employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update employee",
        ) from err


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: int, store: RosterStore = Depends(get_roster_store)):  # noqa: B008
    try:
        await store.remove(employee_id)
    except EmployeeNotFoundError as err:
        raise _not_found(err) from err
    except Exception as err:
        logger.exception("Failed to delete employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete employee",
        ) from err
    return Response(status_code=status.HTTP_204_NO_CONTENT)
