"""
Roster — Roster Service (Screen Workflows)
===========================================

What:  The list, create and edit/delete screen workflows, without any UI.
How:   Validates user input with EmployeeForm, delegates I/O to
       EmployeeDirectoryClient and hands back normalized EmployeeRecords.
Who:   Any front end; it renders the results and shows `str(error)` for
       any RosterError raised here.

Workflows:
    search(text)          list screen, search box (empty text lists everyone)
    load(id)              edit screen, initial fill
    add(form)             create screen, save button
    save(id, form)        edit screen, save button
    remove(id, current)   list/edit screens, confirmed delete

Errors from the client propagate unchanged, so the caller keeps its
previous state on failure.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from roster.exceptions import ValidationError
from roster.schemas.employee import EmployeeForm, EmployeeRecord
from roster.services.employee_client import EmployeeDirectoryClient
from roster.services.normalizer import normalize

logger = logging.getLogger(__name__)

FormInput = Union[EmployeeForm, Mapping[str, Any]]


class RosterService:
    """
    Stateless workflows over one EmployeeDirectoryClient.

    Args:
        client: The directory client to use; a default one (configured from
                settings) is created when omitted.
    """

    def __init__(self, client: Optional[EmployeeDirectoryClient] = None):
        self.client = client or EmployeeDirectoryClient()

    async def search(self, text: Optional[str] = None) -> List[EmployeeRecord]:
        raw_records = await self.client.filter_by_name(text)
        records = [normalize(raw) for raw in raw_records]
        logger.debug("Search %r returned %d employees", text, len(records))
        return records

    async def load(self, employee_id: Any) -> EmployeeRecord:
        return normalize(await self.client.get_by_id(employee_id))

    async def add(self, form: FormInput) -> EmployeeRecord:
        """
        Validate the create form and store a new employee.

        Raises:
            ValidationError: blank field or bad age; nothing is sent
        """
        record = self.validate(form).to_record()
        created = normalize(await self.client.create(record))
        logger.info("Employee %s created", created.id)
        return created

    async def save(self, employee_id: Any, form: FormInput) -> EmployeeRecord:
        """Validate the edit form and replace the stored employee."""
        record = self.validate(form).to_record(employee_id)
        updated = normalize(await self.client.update(employee_id, record))
        logger.info("Employee %s updated", employee_id)
        return updated

    async def remove(
        self,
        employee_id: Any,
        current: Iterable[EmployeeRecord] = (),
    ) -> List[EmployeeRecord]:
        """
        Delete an employee, then drop it from the caller's list.

        The list is only filtered after the store confirms the delete; on
        error nothing is filtered and the error propagates.

        Returns:
            `current` without the records whose id matches `employee_id`
        """
        await self.client.delete(employee_id)
        logger.info("Employee %s deleted", employee_id)
        target = str(employee_id)
        return [record for record in current if str(record.id) != target]

    @staticmethod
    def validate(form: FormInput) -> EmployeeForm:
        """
        Turn raw form input into a validated EmployeeForm.

        Raises:
            ValidationError: naming the first offending field
        """
        if isinstance(form, EmployeeForm):
            return form
        try:
            return EmployeeForm.model_validate(dict(form))
        except PydanticValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]).lower() if error.get("loc") else None
            message = error.get("msg", "Validation failed")
            if message.startswith("Value error, "):
                message = message[len("Value error, "):]
            elif error.get("type") == "missing":
                message = "Please fill in all fields"
            raise ValidationError(message, field=field) from exc
