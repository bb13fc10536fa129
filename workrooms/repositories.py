"""
Repository classes for data access.

Each repository wraps a SQLAlchemy session handed to it at
construction time.  The worker service only talks to these objects,
never to ``db.session`` directly.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from workrooms.models import Office, Room, Worker


class OfficeRepository:
    """Repository for office lookups."""

    def __init__(self, session: Session):
        self.session = session

    def exists_by_id(self, office_id: int) -> bool:
        """Return True if an office with this id exists."""
        return self.session.get(Office, office_id) is not None


class RoomRepository:
    """Repository for room lookups."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, room_number: int, lock: bool = False) -> Optional[Room]:
        """
        Get a room by its number.

        Args:
            room_number: Room primary key.
            lock:        Take a row lock (``SELECT ... FOR UPDATE``) held
                         until the session commits.  Ignored by SQLite.
        """
        stmt = select(Room).where(Room.room_number == room_number)
        if lock:
            stmt = stmt.with_for_update()
        return self.session.scalars(stmt).first()

    def exists_by_id(self, room_number: int) -> bool:
        """Return True if a room with this number exists."""
        return self.session.get(Room, room_number) is not None


class WorkerRepository:
    """Repository for worker data access."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, worker_id: int) -> Optional[Worker]:
        """Get worker by ID."""
        return self.session.get(Worker, worker_id)

    def find_all(self) -> list[Worker]:
        """Get all workers."""
        return list(self.session.scalars(select(Worker)))

    def find_all_where_firing_date_set(self) -> list[Worker]:
        """Get all workers that have a firing date, past or future."""
        stmt = select(Worker).where(Worker.firing_date.is_not(None))
        return list(self.session.scalars(stmt))

    def find_all_where_room_unset(self) -> list[Worker]:
        """Get all workers without a room."""
        stmt = select(Worker).where(Worker.room_number.is_(None))
        return list(self.session.scalars(stmt))

    def find_all_by_office_and_room(
        self, office_id: int, room_number: Optional[int]
    ) -> list[Worker]:
        """
        Get workers in an office and room.

        A ``room_number`` of None matches workers of that office who
        have no room.
        """
        stmt = select(Worker).where(Worker.office_id == office_id)
        if room_number is None:
            stmt = stmt.where(Worker.room_number.is_(None))
        else:
            stmt = stmt.where(Worker.room_number == room_number)
        return list(self.session.scalars(stmt))

    def save(self, worker: Worker) -> Worker:
        """Insert a new worker or write back an existing one, then commit."""
        self.session.add(worker)
        self.session.commit()
        self.session.refresh(worker)
        return worker
