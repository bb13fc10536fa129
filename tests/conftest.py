"""
Pytest configuration and shared fixtures.

Provides a test application, database session, worker service and CLI
runner that all test modules can use. Uses the ``testing``
configuration, which points at an in-memory SQLite database.
"""

from datetime import date

import pytest

from workrooms import create_app
from workrooms.extensions import db as _db
from workrooms.services.worker_service import build_worker_service

# Fixed "today" for date-boundary tests.
_TODAY = date(2024, 6, 15)


@pytest.fixture(scope="function")
def app():
    """
    Create a Flask application configured for testing.

    A fresh app (and so a fresh in-memory database) is created for
    every test function; tables are created from the models.
    """
    app = create_app("testing")

    # Establish an application context for the whole test.
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="function")
def db_session(app):  # pylint: disable=redefined-outer-name,unused-argument
    """Provide the Flask-SQLAlchemy session bound to the test database."""
    return _db.session


@pytest.fixture
def today():
    """The date the worker service treats as today."""
    return _TODAY


@pytest.fixture(scope="function")
def service(db_session, today):  # pylint: disable=redefined-outer-name
    """Provide a WorkerService whose notion of today is pinned."""
    return build_worker_service(db_session, today_provider=lambda: today)


@pytest.fixture(scope="function")
def runner(app):  # pylint: disable=redefined-outer-name
    """
    Provide a Flask CLI runner.

    Usage in tests::

        def test_list(runner):
            result = runner.invoke(args=["workers", "list"])
            assert result.exit_code == 0
    """
    return app.test_cli_runner()
