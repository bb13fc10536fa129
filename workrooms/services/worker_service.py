"""
Worker service — the worker directory's business rules.

Lists workers by employment state and location, and guards every
write with the same checks:

  - **References:** an office or room a worker points at must exist.
  - **Dates:**      a firing date may never precede the hiring date.
  - **Capacity:**   a room only accepts a worker while its occupant
                    count is below ``workers_limit``.

Each write validates first and mutates second, so a failed call never
leaves a partial change behind.  The capacity check and the worker
save run inside one session transaction with the room row locked
where the database supports it.
"""

import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime, timezone
from typing import Any, Callable, NoReturn

from workrooms.exceptions import (
    CapacityExceededError,
    InvalidArgumentError,
    NotFoundError,
)
from workrooms.extensions import db
from workrooms.models import Gender, Worker
from workrooms.repositories import OfficeRepository, RoomRepository, WorkerRepository

logger = logging.getLogger(__name__)


# =========================================================================
# Input data
# =========================================================================


@dataclass
class WorkerInput:
    """The writable fields of a worker, as supplied by a caller."""

    hiring_date: date
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    birth_date: date | None = None
    firing_date: date | None = None
    gender: Gender | None = None
    office_id: int | None = None
    room_number: int | None = None

    @classmethod
    def from_worker(cls, worker: Worker) -> "WorkerInput":
        """Snapshot the writable fields of an existing worker."""
        return cls(
            hiring_date=worker.hiring_date,
            first_name=worker.first_name,
            last_name=worker.last_name,
            middle_name=worker.middle_name,
            birth_date=worker.birth_date,
            firing_date=worker.firing_date,
            gender=worker.gender,
            office_id=worker.office_id,
            room_number=worker.room_number,
        )

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly dict (dates as ISO strings)."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, date):
                data[key] = value.isoformat()
            elif isinstance(value, Gender):
                data[key] = value.value
        return data

    def fires_before_hiring(self) -> bool:
        """True when a firing date is set and precedes the hiring date."""
        return self.firing_date is not None and self.firing_date < self.hiring_date


# =========================================================================
# Service
# =========================================================================


class WorkerService:
    """
    Worker lifecycle operations over injected repositories.

    Args:
        workers:        Worker store.
        offices:        Office store (existence checks only).
        rooms:          Room store (capacity and occupant count).
        today_provider: Zero-argument callable returning the current
                        date.  Defaults to ``date.today``.
    """

    def __init__(
        self,
        workers: WorkerRepository,
        offices: OfficeRepository,
        rooms: RoomRepository,
        today_provider: Callable[[], date] = date.today,
    ):
        self.workers = workers
        self.offices = offices
        self.rooms = rooms
        self.today_provider = today_provider

    # -- Queries -----------------------------------------------------------

    def list_all(self) -> set[Worker]:
        """Return every worker, hired or fired."""
        return set(self.workers.find_all())

    def list_active(self) -> set[Worker]:
        """
        Return workers with no firing date or a firing date still ahead.

        A worker fired exactly today is not active.
        """
        today = self.today_provider()
        return {
            worker
            for worker in self.workers.find_all()
            if worker.firing_date is None or today < worker.firing_date
        }

    def list_fired(self) -> set[Worker]:
        """
        Return workers whose firing date has already passed.

        A worker fired exactly today is not fired yet either, so they
        appear in neither this list nor ``list_active()``.
        """
        today = self.today_provider()
        return {
            worker
            for worker in self.workers.find_all_where_firing_date_set()
            if today > worker.firing_date
        }

    def get_by_id(self, worker_id: int) -> Worker:
        """
        Return a worker by primary key.

        Raises:
            NotFoundError: If the worker does not exist.
        """
        return self._get_worker_or_raise(worker_id)

    def list_remote(self) -> set[Worker]:
        """Return workers without a room."""
        return set(self.workers.find_all_where_room_unset())

    def list_by_office_and_room(
        self, office_id: int, room_number: int | None = None
    ) -> set[Worker]:
        """Return workers of an office sitting in the given room (or none)."""
        return set(self.workers.find_all_by_office_and_room(office_id, room_number))

    # -- Writes ------------------------------------------------------------

    def add(self, worker_input: WorkerInput) -> Worker:
        """
        Create a new worker.

        Returns:
            The persisted Worker with its store-assigned id.

        Raises:
            NotFoundError:         Unknown office or room.
            InvalidArgumentError:  Firing date before hiring date.
            CapacityExceededError: The room is already full.
        """
        office_id = worker_input.office_id
        if office_id is not None and not self.offices.exists_by_id(office_id):
            self._fail(
                NotFoundError,
                "Cannot add a new worker: office %s does not exist.",
                office_id,
            )
        room_number = worker_input.room_number
        if room_number is not None and not self.rooms.exists_by_id(room_number):
            self._fail(
                NotFoundError,
                "Cannot add a new worker: room %s does not exist.",
                room_number,
            )
        if worker_input.fires_before_hiring():
            self._fail(
                InvalidArgumentError, "Firing date cannot precede the hiring date."
            )
        self._check_room_capacity(worker_input)

        worker = Worker()
        self._apply_input(worker, worker_input)
        self.workers.save(worker)

        logger.info("Added worker ID %d: %s", worker.id, worker.full_name)
        logger.debug("New worker ID %d fields: %s", worker.id, worker_input.as_dict())
        return worker

    def update(self, worker_id: int, worker_input: WorkerInput) -> Worker:
        """
        Replace every writable field of an existing worker.

        Capacity is only checked when the room changes, and only
        against the new room.

        Raises:
            NotFoundError:         Unknown worker, or unknown new room.
            InvalidArgumentError:  Firing date before hiring date.
            CapacityExceededError: The new room is already full.
        """
        worker = self.workers.find_by_id(worker_id)
        if worker is None:
            self._fail(
                NotFoundError,
                "Cannot update worker: worker %s does not exist.",
                worker_id,
            )

        if worker.room_number != worker_input.room_number:
            self._check_room_capacity(worker_input)
        if worker_input.fires_before_hiring():
            self._fail(
                InvalidArgumentError, "Firing date cannot precede the hiring date."
            )

        self._apply_input(worker, worker_input)
        self.workers.save(worker)

        logger.info("Updated worker ID %d", worker_id)
        logger.debug("Worker ID %d fields: %s", worker_id, worker_input.as_dict())
        return worker

    def move(
        self,
        worker_id: int,
        office_id: int | None = None,
        room_number: int | None = None,
    ) -> Worker:
        """
        Reassign a worker's office and room.

        Both values are written as given, so calling with neither
        detaches the worker from any office and room.

        Raises:
            NotFoundError:         Unknown room or worker.
            CapacityExceededError: The target room is already full.
        """
        if room_number is not None:
            room = self._get_room_or_raise(room_number)
            if room.occupant_count >= room.workers_limit:
                self._fail(
                    CapacityExceededError,
                    "Cannot move worker to room %s: workers limit %s reached.",
                    room_number,
                    room.workers_limit,
                )

        worker = self._get_worker_or_raise(worker_id)
        worker.office_id = office_id
        worker.room_number = room_number
        worker.updated_at = datetime.now(timezone.utc)
        self.workers.save(worker)

        logger.info(
            "Moved worker ID %d to office %s, room %s",
            worker_id,
            office_id,
            room_number,
        )
        return worker

    def fire(self, worker_id: int, fire_date: date) -> Worker:
        """
        Set a worker's firing date.

        Raises:
            NotFoundError:        Unknown worker.
            InvalidArgumentError: The worker was hired after ``fire_date``.
        """
        worker = self._get_worker_or_raise(worker_id)
        if worker.hiring_date > fire_date:
            self._fail(
                InvalidArgumentError,
                "Hiring date %s cannot be later than firing date %s.",
                worker.hiring_date,
                fire_date,
            )

        worker.firing_date = fire_date
        worker.updated_at = datetime.now(timezone.utc)
        self.workers.save(worker)

        logger.info("Fired worker ID %d as of %s", worker_id, fire_date)
        return worker

    # -- Helpers -----------------------------------------------------------

    def _check_room_capacity(self, worker_input: WorkerInput) -> None:
        """Raise unless the input's room (if any) has a free place."""
        room_number = worker_input.room_number
        if room_number is None:
            return
        room = self._get_room_or_raise(room_number)
        if room.workers_limit - room.occupant_count <= 0:
            self._fail(
                CapacityExceededError,
                "Cannot add a worker to room %s: workers limit %s reached.",
                room_number,
                room.workers_limit,
            )

    def _get_worker_or_raise(self, worker_id: int) -> Worker:
        worker = self.workers.find_by_id(worker_id)
        if worker is None:
            self._fail(NotFoundError, "Worker %s not found.", worker_id)
        return worker

    def _get_room_or_raise(self, room_number: int):
        room = self.rooms.find_by_id(room_number, lock=True)
        if room is None:
            self._fail(NotFoundError, "Room %s not found.", room_number)
        return room

    @staticmethod
    def _apply_input(worker: Worker, worker_input: WorkerInput) -> None:
        """Copy every writable field from the input onto the worker."""
        worker.first_name = worker_input.first_name
        worker.last_name = worker_input.last_name
        worker.middle_name = worker_input.middle_name
        worker.birth_date = worker_input.birth_date
        worker.hiring_date = worker_input.hiring_date
        worker.firing_date = worker_input.firing_date
        worker.gender = worker_input.gender
        worker.office_id = worker_input.office_id
        worker.room_number = worker_input.room_number
        worker.updated_at = datetime.now(timezone.utc)

    @staticmethod
    def _fail(error_class: type[Exception], message: str, *args: Any) -> NoReturn:
        """Log a rejected call at WARNING and raise ``error_class``."""
        logger.warning(message, *args)
        raise error_class(message % args)


def build_worker_service(session=None, **kwargs) -> WorkerService:
    """
    Wire a WorkerService to SQLAlchemy repositories.

    Args:
        session: Session to use; defaults to the Flask-SQLAlchemy
                 ``db.session`` of the current app context.
        kwargs:  Passed through to ``WorkerService`` (e.g.
                 ``today_provider``).
    """
    if session is None:
        session = db.session
    return WorkerService(
        workers=WorkerRepository(session),
        offices=OfficeRepository(session),
        rooms=RoomRepository(session),
        **kwargs,
    )
