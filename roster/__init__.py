"""
Roster — Package Initializer
=============================

What: Async data-access layer for the employee roster manager.
Who:  Imported by any front end (CLI, web, tests) that lists, searches,
      creates, edits or deletes employee records on the remote store.

Layout:

    ┌─────────────────────────────────────┐
    │   RosterService (screen workflows)  │  ← form validation, list upkeep
    ├─────────────────────────────────────┤
    │   EmployeeDirectoryClient (HTTP)    │  ← six operations + normalize
    ├─────────────────────────────────────┤
    │   Schemas & normalizer (data)       │  ← canonical EmployeeRecord
    └─────────────────────────────────────┘

    roster.main builds an in-memory FastAPI stand-in for the remote store,
    used for local development and as the backing store in tests.
"""

__version__ = "1.0.0"
