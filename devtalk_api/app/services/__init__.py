"""
Service layer abstraction.

Each service encapsulates the CRUD logic for a resource.  Route
handlers only translate between HTTP and service calls, so the
storage behind a service can change without touching the API.
"""
