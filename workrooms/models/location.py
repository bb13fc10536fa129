"""
Location models — offices and the rooms inside them.

Offices only matter to the worker directory as existence checks.
Rooms carry the capacity limit that is enforced whenever a worker is
attached to one.
"""

from workrooms.extensions import db


class Office(db.Model):
    """Top-level location container that workers may be assigned to."""

    __tablename__ = "office"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(200), nullable=False)
    address = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())

    # -- Relationships -----------------------------------------------------
    rooms = db.relationship("Room", back_populates="office", lazy="dynamic")
    workers = db.relationship("Worker", back_populates="office", lazy="dynamic")

    def __repr__(self) -> str:
        return f"<Office {self.id}: {self.name}>"


class Room(db.Model):
    """
    Capacity-bounded room identified by its room number.

    ``workers_limit`` is only checked at the moment a worker is
    attached; lowering it later does not evict anyone.
    """

    __tablename__ = "room"
    __table_args__ = (
        db.CheckConstraint("workers_limit >= 0", name="CK_room_workers_limit"),
    )

    room_number = db.Column(db.Integer, primary_key=True, autoincrement=False)
    office_id = db.Column(
        db.Integer,
        db.ForeignKey("office.id"),
        nullable=True,
        index=True,
    )
    workers_limit = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())

    # -- Relationships -----------------------------------------------------
    office = db.relationship("Office", back_populates="rooms")
    workers = db.relationship("Worker", back_populates="room", lazy="dynamic")

    @property
    def occupant_count(self) -> int:
        """Number of workers currently referencing this room."""
        return self.workers.count()

    def __repr__(self) -> str:
        return f"<Room {self.room_number} (limit={self.workers_limit})>"
