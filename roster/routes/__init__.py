# Routes package init
"""
Roster — Local Store Routes
============================

What:  HTTP handlers of the in-memory stand-in for the remote store.

Route Inventory:
    - employees.py:  GET/POST        {collection}
                     GET/PUT/DELETE  {collection}/{id}
    - health.py:     GET             /health

Handlers stay thin: they resolve the store dependency and call it.
"""
