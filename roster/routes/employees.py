"""
Roster — Employee Collection Routes (Local Store)
==================================================

What:  CRUD on the employee collection, shaped like the hosted store.
How:   Thin handlers over EmployeeStore; errors are raised as RosterError
       subclasses and rendered by the app's exception handlers.
Who:   EmployeeDirectoryClient when pointed at the local store.

Routes (mounted under settings.store_collection_path):
    GET     ""        list, optional ?Name= filter
    GET     /{id}     one record
    POST    ""        create, 201
    PUT     /{id}     full replacement
    DELETE  /{id}     remove, returns {}
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from roster.exceptions import ValidationError
from roster.schemas.store import ErrorResponse
from roster.store import EmployeeStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Employees"])

_not_found = {404: {"description": "No employee with this id", "model": ErrorResponse}}
_bad_body = {400: {"description": "Body is not a JSON object", "model": ErrorResponse}}


def _require_object(body: Any) -> Dict[str, Any]:
    if not isinstance(body, dict):
        raise ValidationError(
            "Request body must be a JSON object",
            field="body",
            context={"type": type(body).__name__},
        )
    return body


@router.get("", summary="List employees, optionally filtered by name")
async def list_employees(
    name: Optional[str] = Query(
        default=None,
        alias="Name",
        description="Case-insensitive substring of the employee's Name",
    ),
    store: EmployeeStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    if name:
        return store.filter_by_name(name)
    return store.list()


@router.get("/{employee_id}", responses=_not_found, summary="Get one employee")
async def get_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_store),
) -> Dict[str, Any]:
    return store.get(employee_id)


@router.post("", status_code=201, responses=_bad_body, summary="Create an employee")
async def create_employee(
    body: Any = Body(...),
    store: EmployeeStore = Depends(get_store),
) -> Dict[str, Any]:
    record = store.create(_require_object(body))
    logger.info("Stored employee %s", record["id"])
    return record


@router.put(
    "/{employee_id}",
    responses={**_not_found, **_bad_body},
    summary="Replace an employee",
)
async def replace_employee(
    employee_id: str,
    body: Any = Body(...),
    store: EmployeeStore = Depends(get_store),
) -> Dict[str, Any]:
    return store.replace(employee_id, _require_object(body))


@router.delete("/{employee_id}", responses=_not_found, summary="Delete an employee")
async def delete_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_store),
) -> Dict[str, Any]:
    store.delete(employee_id)
    logger.info("Deleted employee %s", employee_id)
    return {}
