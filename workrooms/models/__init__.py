"""
Model package — imports all models so Alembic and SQLAlchemy can
discover them automatically when ``flask db`` commands are run.

  - location.py -> office and room tables
  - worker.py   -> worker table
"""

from workrooms.models.location import Office, Room  # noqa: F401
from workrooms.models.worker import Gender, Worker  # noqa: F401
