"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  API handlers
call the services and translate their results into HTTP responses, so
the in‑memory store could be replaced without touching the routes.
"""
