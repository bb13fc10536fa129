"""
Database connectivity and schema verification tests.

These tests confirm that:
  - The application can connect to the configured database.
  - The directory tables and their check constraints exist.
  - The repositories translate their lookups into the right queries.

Run from your project root with::

    pytest tests/test_services/test_db_connection.py -v
"""

from datetime import date

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError

from workrooms.extensions import db
from workrooms.models import Office, Room, Worker
from workrooms.repositories import OfficeRepository, RoomRepository, WorkerRepository


class TestDatabaseConnectivity:
    """Verify that the app can talk to the database."""

    def test_basic_connection(self, app):
        """
        Execute a simple SELECT 1 query to confirm the database
        is reachable and the connection string is correct.
        """
        result = db.session.execute(db.text("SELECT 1 AS connected"))
        row = result.fetchone()
        assert row is not None
        assert row[0] == 1

    def test_testing_config_uses_sqlite(self, app):
        """The testing config must never touch a real database."""
        assert app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite")


class TestSchemaExists:
    """Verify the tables and constraints created from the models."""

    def test_directory_tables_exist(self, app):
        tables = set(inspect(db.engine).get_table_names())
        assert {"office", "room", "worker"} <= tables

    def test_firing_before_hiring_rejected_by_database(self, db_session):
        """The check constraint backs up the service-level date check."""
        db_session.add(
            Worker(hiring_date=date(2020, 1, 1), firing_date=date(2019, 1, 1))
        )
        with pytest.raises(IntegrityError):
            db_session.flush()
        db_session.rollback()

    def test_negative_workers_limit_rejected_by_database(self, db_session):
        db_session.add(Room(room_number=1, workers_limit=-1))
        with pytest.raises(IntegrityError):
            db_session.flush()
        db_session.rollback()


class TestRepositories:
    """Spot-check the repository queries the worker service relies on."""

    @pytest.fixture(autouse=True)
    def _setup(self, db_session):
        self.session = db_session
        self.office = Office(name="Repo Office")
        db_session.add(self.office)
        db_session.flush()
        self.room = Room(room_number=7, office_id=self.office.id, workers_limit=5)
        db_session.add(self.room)
        db_session.flush()

        self.seated = Worker(
            hiring_date=date(2020, 1, 1), office_id=self.office.id, room_number=7
        )
        self.remote = Worker(hiring_date=date(2020, 1, 1), office_id=self.office.id)
        self.fired = Worker(hiring_date=date(2020, 1, 1), firing_date=date(2022, 1, 1))
        db_session.add_all([self.seated, self.remote, self.fired])
        db_session.commit()

    def test_office_exists_by_id(self):
        offices = OfficeRepository(self.session)
        assert offices.exists_by_id(self.office.id)
        assert not offices.exists_by_id(999999)

    def test_room_lookup_and_occupant_count(self):
        rooms = RoomRepository(self.session)
        room = rooms.find_by_id(7, lock=True)
        assert room is self.room
        assert room.occupant_count == 1
        assert rooms.find_by_id(8) is None
        assert rooms.exists_by_id(7)
        assert not rooms.exists_by_id(8)

    def test_worker_queries(self):
        workers = WorkerRepository(self.session)
        assert set(workers.find_all()) == {self.seated, self.remote, self.fired}
        assert workers.find_all_where_firing_date_set() == [self.fired]
        assert set(workers.find_all_where_room_unset()) == {self.remote, self.fired}
        assert workers.find_all_by_office_and_room(self.office.id, 7) == [self.seated]
        assert workers.find_all_by_office_and_room(self.office.id, None) == [
            self.remote
        ]

    def test_save_assigns_id(self):
        workers = WorkerRepository(self.session)
        worker = workers.save(Worker(hiring_date=date(2024, 1, 1)))
        assert worker.id is not None
        assert workers.find_by_id(worker.id) is worker
