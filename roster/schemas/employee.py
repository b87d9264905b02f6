"""
Roster — Employee Schemas
==========================

What:  Pydantic models for the canonical employee record and the user form.
How:   Python attributes are snake_case; the wire uses the store's keys
       (Name, Age, Job, Phone) through field aliases. Both spellings are
       accepted on construction.
Who:   EmployeeRecord is produced by the normalizer and serialized by the
       directory client. EmployeeForm is validated by RosterService before
       a create or update.
"""

import math
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class EmployeeRecord(BaseModel):
    """
    Canonical employee record.

    Fields:
        id:    Opaque store-assigned identifier (int or str); None before creation
        name:  Display name ("" when the store supplied none)
        age:   Non-negative whole number, None when absent
        job:   Job title, may be empty
        phone: Phone number as text, may be empty
    """

    id: Any = Field(default=None, description="Store-assigned identifier")
    name: str = Field(default="", alias="Name")
    age: Optional[int] = Field(default=None, alias="Age", ge=0)
    job: str = Field(default="", alias="Job")
    phone: str = Field(default="", alias="Phone")

    model_config = {"populate_by_name": True, "frozen": True}

    def to_payload(self) -> Dict[str, Any]:
        """Request body for create/update: canonical keys, no id, Age only when present."""
        return self.model_dump(by_alias=True, exclude={"id"}, exclude_none=True)

    def to_wire(self) -> Dict[str, Any]:
        """Full record in the store's key spelling, including id."""
        body = {"id": self.id}
        body.update(self.model_dump(by_alias=True, exclude={"id"}))
        return body


class EmployeeForm(BaseModel):
    """
    What:  Text the user typed into the create or edit screen.
    How:   Every field is trimmed and must be non-empty; age must be a
           non-negative whole number.

    Raises pydantic.ValidationError; RosterService translates it into
    roster.exceptions.ValidationError naming the first bad field.
    """

    name: str = Field(alias="Name")
    age: str = Field(alias="Age")
    job: str = Field(alias="Job")
    phone: str = Field(alias="Phone")

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}

    @field_validator("age", mode="before")
    @classmethod
    def age_to_text(cls, v: Any) -> Any:
        """Numbers typed through a non-text widget are accepted as text."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("name", "job", "phone", "age")
    @classmethod
    def require_text(cls, v: str) -> str:
        if not v:
            raise ValueError("Please fill in all fields")
        return v

    @field_validator("age")
    @classmethod
    def validate_age(cls, v: str) -> str:
        try:
            number = float(v)
        except ValueError:
            raise ValueError(f"Age '{v}' is not a number") from None
        if not math.isfinite(number) or number < 0 or not number.is_integer():
            raise ValueError(f"Age '{v}' must be a whole number of years")
        return v

    def to_record(self, employee_id: Any = None) -> EmployeeRecord:
        return EmployeeRecord(
            id=employee_id,
            name=self.name,
            age=int(float(self.age)),
            job=self.job,
            phone=self.phone,
        )
