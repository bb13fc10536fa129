"""
Service layer package.

Services encapsulate the business rules and are the only layer that
talks to repositories; callers never access the database directly.

Import services as needed::

    from workrooms.services.worker_service import build_worker_service
"""
