# Services package init
"""
Roster — Services Layer
========================

Service Inventory:
    - normalizer:       pure raw-record → EmployeeRecord mapping
    - employee_client:  EmployeeDirectoryClient, the HTTP data-access layer
    - roster_service:   RosterService, the screen workflows over the client
"""
