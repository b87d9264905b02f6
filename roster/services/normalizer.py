"""
Roster — Employee Record Normalizer
====================================

What:  Pure mapping from whatever the store returns to an EmployeeRecord.
How:   Each canonical field has an ordered tuple of accepted source keys.
       The first key holding a usable value wins; later keys are fallbacks
       for records written by older or localized front ends.
Who:   EmployeeDirectoryClient.normalize, RosterService and the client's
       create/update serialization.

Source keys (priority order):
    name   ← Name, nombre
    age    ← Age, edad
    job    ← Job, puesto, Workstation
    phone  ← Phone, telefono, PhoneNumber

The function never raises and never mutates its input. Anything that is not
a mapping normalizes to an empty record.
"""

import math
from typing import Any, Dict, Mapping, Optional, Tuple

from roster.schemas.employee import EmployeeRecord

FIELD_SOURCES: Dict[str, Tuple[str, ...]] = {
    "name": ("Name", "nombre"),
    "age": ("Age", "edad"),
    "job": ("Job", "puesto", "Workstation"),
    "phone": ("Phone", "telefono", "PhoneNumber"),
}

TEXT_FIELDS = ("name", "job", "phone")

_MISSING = object()


def _is_blank(value: Any) -> bool:
    return value is _MISSING or value is None or value == ""


def first_present(raw: Mapping[str, Any], keys: Tuple[str, ...]) -> Any:
    """Value of the first key in `keys` that is set and not blank, else None."""
    for key in keys:
        value = raw.get(key, _MISSING)
        if not _is_blank(value):
            return value
    return None


def coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def coerce_age(value: Any) -> Optional[int]:
    """
    Best-effort conversion of an age value to a non-negative int.

    28, 28.0, "28" and " 28.0 " all give 28. Booleans, non-numeric text,
    fractional, negative and non-finite numbers give None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, float):
        return None
    if not math.isfinite(value) or value < 0 or not value.is_integer():
        return None
    return int(value)


def normalize(raw: Any) -> EmployeeRecord:
    """
    Map a raw store record onto the canonical EmployeeRecord.

    Args:
        raw: A decoded JSON object, an EmployeeRecord, or anything else.

    Returns:
        EmployeeRecord with id passed through, text fields defaulting to ""
        and age None when no source key gave a usable number.
    """
    if isinstance(raw, EmployeeRecord):
        raw = raw.to_wire()
    if not isinstance(raw, Mapping):
        return EmployeeRecord()

    fields: Dict[str, Any] = {"id": raw.get("id")}
    for field in TEXT_FIELDS:
        fields[field] = coerce_text(first_present(raw, FIELD_SOURCES[field]))
    fields["age"] = coerce_age(first_present(raw, FIELD_SOURCES["age"]))
    return EmployeeRecord(**fields)
