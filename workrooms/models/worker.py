"""
Worker model — one row per employee, hired or fired.

Workers are never deleted; firing sets ``firing_date`` and leaves the
row in place so the directory can still list fired workers.
"""

import enum

from workrooms.extensions import db


class Gender(enum.Enum):
    """Gender values accepted for a worker record."""

    MALE = "MALE"
    FEMALE = "FEMALE"


class Worker(db.Model):
    """
    Employee record tracked by the worker directory.

    ``office_id`` and ``room_number`` are both optional.  A worker with
    no room is a remote worker.  ``firing_date`` is NULL while the
    worker is employed.
    """

    __tablename__ = "worker"
    __table_args__ = (
        db.CheckConstraint(
            "firing_date IS NULL OR firing_date >= hiring_date",
            name="CK_worker_firing_after_hiring",
        ),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    first_name = db.Column(db.String(100), nullable=True)
    last_name = db.Column(db.String(100), nullable=True)
    middle_name = db.Column(db.String(100), nullable=True)
    birth_date = db.Column(db.Date, nullable=True)
    hiring_date = db.Column(db.Date, nullable=False)
    firing_date = db.Column(db.Date, nullable=True)
    gender = db.Column(db.Enum(Gender, name="worker_gender"), nullable=True)
    office_id = db.Column(
        db.Integer,
        db.ForeignKey("office.id"),
        nullable=True,
        index=True,
    )
    room_number = db.Column(
        db.Integer,
        db.ForeignKey("room.room_number"),
        nullable=True,
        index=True,
    )
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())

    # -- Relationships -----------------------------------------------------
    office = db.relationship("Office", back_populates="workers")
    room = db.relationship("Room", back_populates="workers")

    @property
    def full_name(self) -> str:
        """Return the worker's display name, skipping empty parts."""
        parts = [self.last_name, self.first_name, self.middle_name]
        return " ".join(part for part in parts if part)

    @property
    def is_remote(self) -> bool:
        """True when the worker has no room assigned."""
        return self.room_number is None

    def __repr__(self) -> str:
        return f"<Worker {self.id}: {self.full_name}>"
