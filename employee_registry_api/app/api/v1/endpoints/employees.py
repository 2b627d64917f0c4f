"""
Employee endpoints for API v1.

These routes expose the in-memory employee registry: register an
employee, fetch one by ID and list employees of a given gender.  The
registry itself lives on ``app.state`` and is handed to each route via
the ``get_registry`` dependency.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from employee_registry_api.app.schemas.employee import Employee, EmployeeCreate
from employee_registry_api.app.services.employee_service import EmployeeRegistry, UnknownGenderError

router = APIRouter()


def get_registry(request: Request) -> EmployeeRegistry:
    """Return the registry owned by the running application."""
    return request.app.state.registry


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_in: EmployeeCreate,
    registry: EmployeeRegistry = Depends(get_registry),
) -> Employee:
    """Register a new employee.

    The identifier is assigned by the registry; an ``id`` in the body
    is ignored.
    """
    return registry.create(employee_in)


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: int,
    registry: EmployeeRegistry = Depends(get_registry),
) -> Employee:
    """Retrieve a single employee by ID.

    Returns HTTP 404 if no employee has that ID.
    """
    employee = registry.get_by_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.get("", response_model=List[Employee])
async def list_employees_by_gender(
    gender: str = Query(..., description="MALE or FEMALE, case-insensitive"),
    registry: EmployeeRegistry = Depends(get_registry),
) -> List[Employee]:
    """Return every employee of the given gender.

    Returns HTTP 400 if ``gender`` is not a recognized value.
    """
    try:
        return registry.get_by_gender(gender)
    except UnknownGenderError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
