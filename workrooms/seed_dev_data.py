"""
Seed script — populate a development database with sample data.

Registers a ``flask seed-dev-data`` CLI command that creates two
offices, a few rooms with different limits, and a handful of workers
(one remote, one already fired) so the ``flask workers`` commands have
something to show.

Usage::

    flask db upgrade        # Create the tables first
    flask seed-dev-data

Workers are created through the worker service, so the seed data goes
through the same reference, date and capacity checks as real input.
"""

from datetime import date

import click
from flask.cli import with_appcontext

from workrooms.extensions import db
from workrooms.models import Gender, Office, Room
from workrooms.services.worker_service import WorkerInput, build_worker_service

# -- Sample rooms: (room_number, office index, workers_limit) --------------
_SAMPLE_ROOMS = [
    (101, 0, 2),
    (102, 0, 4),
    (201, 1, 1),
]


@click.command("seed-dev-data")
@with_appcontext
def seed_dev_data_command():
    """
    Create sample offices, rooms and workers for local development.

    Does nothing if any office already exists.
    """
    click.echo("=" * 60)
    click.echo("  Workrooms — Seed Dev Data")
    click.echo("=" * 60)

    if db.session.query(Office.id).first() is not None:
        click.secho("\n  Offices already exist; skipping seed.", fg="yellow")
        return

    # -- Step 1: Offices and rooms -----------------------------------------
    click.echo("\n[1/2] Creating offices and rooms...")
    offices = [
        Office(name="Head Office", address="1 Main Street"),
        Office(name="Riverside Office", address="12 River Road"),
    ]
    db.session.add_all(offices)
    db.session.flush()

    for room_number, office_index, limit in _SAMPLE_ROOMS:
        db.session.add(
            Room(
                room_number=room_number,
                office_id=offices[office_index].id,
                workers_limit=limit,
            )
        )
    db.session.commit()
    click.secho(
        f"      ✓ {len(offices)} offices, {len(_SAMPLE_ROOMS)} rooms.", fg="green"
    )

    # -- Step 2: Workers ---------------------------------------------------
    click.echo("[2/2] Creating workers...")
    head, riverside = offices[0].id, offices[1].id
    samples = [
        WorkerInput(
            first_name="Anna",
            last_name="Petrova",
            birth_date=date(1990, 4, 12),
            hiring_date=date(2019, 2, 1),
            gender=Gender.FEMALE,
            office_id=head,
            room_number=101,
        ),
        WorkerInput(
            first_name="Ivan",
            last_name="Sidorov",
            middle_name="Olegovich",
            birth_date=date(1985, 11, 3),
            hiring_date=date(2020, 6, 15),
            gender=Gender.MALE,
            office_id=head,
            room_number=102,
        ),
        WorkerInput(
            first_name="Maria",
            last_name="Kuznetsova",
            birth_date=date(1995, 1, 20),
            hiring_date=date(2021, 9, 1),
            gender=Gender.FEMALE,
            office_id=riverside,
        ),
        WorkerInput(
            first_name="Pavel",
            last_name="Smirnov",
            birth_date=date(1979, 7, 30),
            hiring_date=date(2015, 3, 10),
            firing_date=date(2022, 12, 31),
            gender=Gender.MALE,
            office_id=riverside,
            room_number=201,
        ),
    ]

    service = build_worker_service()
    for sample in samples:
        service.add(sample)
    click.secho(f"      ✓ {len(samples)} workers.", fg="green")

    click.echo("\n" + "=" * 60)
    click.secho("  Dev data is ready.", fg="green", bold=True)
    click.echo("=" * 60)


def register_seed_commands(app):
    """Register seed-related CLI commands with the Flask application."""
    app.cli.add_command(seed_dev_data_command)
