"""
Roster — In-Memory Employee Store
==================================

What:  Process-local stand-in for the remote persistence store.
How:   Records are kept as the JSON objects clients sent, keyed by an
       integer id assigned on creation (1, 2, 3, ...). Ids are never reused.
Who:   The local store's routes, through the `get_store` dependency.

Filtering:
    filter_by_name() matches a case-insensitive substring of the `Name`
    key. The hosted store may apply different rules; clients must not
    depend on these.
"""

import copy
import itertools
from typing import Any, Dict, Iterable, List, Optional

from fastapi import Request

from roster.exceptions import NotFoundError


class EmployeeStore:
    """Ordered dict of raw records with sequential ids."""

    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None):
        self._records: Dict[int, Dict[str, Any]] = {}
        self._ids = itertools.count(1)
        for record in seed or ():
            self.create(record)

    def __len__(self) -> int:
        return len(self._records)

    def list(self) -> List[Dict[str, Any]]:
        return [copy.deepcopy(record) for record in self._records.values()]

    def filter_by_name(self, pattern: str) -> List[Dict[str, Any]]:
        needle = pattern.casefold()
        return [
            record
            for record in self.list()
            if needle in str(record.get("Name") or "").casefold()
        ]

    def get(self, employee_id: str) -> Dict[str, Any]:
        return copy.deepcopy(self._records[self._key(employee_id)])

    def create(self, body: Dict[str, Any]) -> Dict[str, Any]:
        new_id = next(self._ids)
        record = {k: v for k, v in body.items() if k != "id"}
        record["id"] = new_id
        self._records[new_id] = record
        return copy.deepcopy(record)

    def replace(self, employee_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        key = self._key(employee_id)
        record = {k: v for k, v in body.items() if k != "id"}
        record["id"] = key
        self._records[key] = record
        return copy.deepcopy(record)

    def delete(self, employee_id: str) -> None:
        del self._records[self._key(employee_id)]

    def _key(self, employee_id: str) -> int:
        """Resolve a path id to a stored key or raise NotFoundError."""
        text = str(employee_id)
        key = int(text) if text.isascii() and text.isdigit() else None
        if key is None or key not in self._records:
            raise NotFoundError(resource="employee", resource_id=str(employee_id))
        return key


def get_store(request: Request) -> EmployeeStore:
    """FastAPI dependency: the store attached to the running app."""
    return request.app.state.store
