"""
Roster — Test Configuration (conftest.py)
==========================================

What:  Shared pytest fixtures for the test suite.
How:   The local FastAPI store is driven in-process through
       httpx.ASGITransport; wire-level failures are simulated with
       httpx.MockTransport. No test touches the network.

Fixtures (function-scoped):
    ├── seed_records:      Raw records preloaded into the store (ids 1..3)
    ├── store_app:         Fresh in-memory store application
    ├── directory_client:  EmployeeDirectoryClient bound to store_app
    ├── make_mock_client:  Factory for a client over an httpx.MockTransport
    └── test_client:       Plain httpx AsyncClient for store route tests
"""

import os

# Before any roster import: settings are read at import time
os.environ["ROSTER_API_URL"] = "http://store.test/employees"
os.environ["LOG_LEVEL"] = "WARNING"

import httpx
import pytest
import pytest_asyncio

from roster.main import create_app
from roster.services.employee_client import EmployeeDirectoryClient

STORE_BASE_URL = "http://store.test/employees"


@pytest.fixture
def seed_records():
    """
    Three records in the spellings found on the hosted store.

    id 1: canonical keys
    id 2: Spanish keys from the first version of the app
    id 3: alternate English keys (Workstation / PhoneNumber)
    """
    return [
        {"Name": "Ana Martinez", "Age": 28, "Job": "Analyst", "Phone": "7123-4567"},
        {"nombre": "Luis Gómez", "edad": "41", "puesto": "Contador", "telefono": "7000-1111"},
        {"Name": "Marta Ruiz", "Age": 35, "Workstation": "Recepción", "PhoneNumber": "7555-0000"},
    ]


@pytest.fixture
def store_app(seed_records):
    """Fresh local store with the seed records; state never leaks between tests."""
    return create_app(seed=seed_records)


@pytest.fixture
def directory_client(store_app):
    """
    EmployeeDirectoryClient talking to store_app in-process.

    Usage:
        async def test_list(directory_client):
            records = await directory_client.list_all()
    """
    transport = httpx.ASGITransport(app=store_app)
    return EmployeeDirectoryClient(STORE_BASE_URL, transport=transport)


@pytest.fixture
def make_mock_client():
    """
    Build a client whose every request is answered by `handler`.

    Usage:
        client = make_mock_client(lambda request: httpx.Response(500))
    """
    def _make(handler):
        return EmployeeDirectoryClient(
            STORE_BASE_URL,
            transport=httpx.MockTransport(handler),
        )
    return _make


@pytest_asyncio.fixture
async def test_client(store_app):
    """Raw HTTP client for asserting on the store's own responses."""
    transport = httpx.ASGITransport(app=store_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://store.test") as client:
        yield client
