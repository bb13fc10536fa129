"""
Custom Flask CLI commands.

These commands are registered with the app via ``register_commands()``
in the application factory. Run them with ``flask <command_name>``.

Usage::

    flask db-check                          # Verify connectivity and tables
    flask workers list --active             # Currently employed workers
    flask workers show 12
    flask workers fire 12 2026-03-31
    flask workers move 12 --office-id 1 --room-number 101
"""

import click
from flask import current_app
from flask.cli import AppGroup, with_appcontext
from sqlalchemy import inspect

from workrooms.exceptions import WorkerDirectoryError
from workrooms.extensions import db
from workrooms.services.worker_service import build_worker_service

# Tables the worker directory cannot run without.
_EXPECTED_TABLES = ("office", "room", "worker")


@click.command("db-check")
@with_appcontext
def db_check_command():
    """
    Verify database connectivity and confirm expected tables exist.

    Tests the connection string from the app config, runs a simple
    query against the database, and lists the directory tables with
    their row counts.
    """
    click.echo("=" * 60)
    click.echo("  Workrooms — Database Connectivity Check")
    click.echo("=" * 60)

    db_uri = current_app.config["SQLALCHEMY_DATABASE_URI"]
    click.echo(f"\n  Connection string: {db_uri}\n")

    # -- Step 1: Basic connectivity ----------------------------------------
    click.echo("[1/2] Testing connection...")
    try:
        row = db.session.execute(db.text("SELECT 1 AS connected")).fetchone()
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.secho(f"      ✗ Connection failed: {exc}", fg="red")
        click.echo("\n  Troubleshooting tips:")
        click.echo("    - Is the database server running?")
        click.echo("    - Does your DATABASE_URL match your server config?")
        raise SystemExit(1)
    if row is None or row[0] != 1:
        click.secho("      ✗ Unexpected result from test query.", fg="red")
        raise SystemExit(1)
    click.secho("      ✓ Connected successfully.", fg="green")

    # -- Step 2: Tables and row counts -------------------------------------
    click.echo("[2/2] Checking tables...\n")
    existing = set(inspect(db.engine).get_table_names())
    missing = [name for name in _EXPECTED_TABLES if name not in existing]
    if missing:
        click.secho(f"      ✗ Missing tables: {', '.join(missing)}", fg="red")
        click.echo("        Have you run 'flask db upgrade'?")
        raise SystemExit(1)

    for name in _EXPECTED_TABLES:
        count = db.session.execute(db.text(f"SELECT COUNT(*) FROM {name}")).scalar()
        click.echo(f"      {name:>8}  — {count} row(s)")

    click.echo("\n" + "=" * 60)
    click.secho("  All checks passed. Database is ready.", fg="green", bold=True)
    click.echo("=" * 60)


# =========================================================================
# Worker directory commands
# =========================================================================

workers_cli = AppGroup("workers", help="Inspect and change worker records.")


def _format_worker(worker) -> str:
    """One-line summary of a worker for terminal output."""
    fired = worker.firing_date.isoformat() if worker.firing_date else "-"
    return (
        f"{worker.id:>5}  {worker.full_name:<40}  "
        f"office={worker.office_id or '-'}  room={worker.room_number or '-'}  "
        f"hired={worker.hiring_date.isoformat()}  fired={fired}"
    )


def _report_failure(exc: WorkerDirectoryError) -> None:
    """Roll back the open transaction and exit with the error message."""
    db.session.rollback()
    click.secho(f"Error: {exc}", fg="red", err=True)
    raise SystemExit(1)


@workers_cli.command("list")
@click.option(
    "--active", "selection", flag_value="active", help="Only currently employed."
)
@click.option("--fired", "selection", flag_value="fired", help="Only fired workers.")
@click.option("--remote", "selection", flag_value="remote", help="Only workers without a room.")
def list_workers_command(selection: str | None):
    """List workers, optionally filtered by employment state or room."""
    service = build_worker_service()
    if selection == "active":
        workers = service.list_active()
    elif selection == "fired":
        workers = service.list_fired()
    elif selection == "remote":
        workers = service.list_remote()
    else:
        workers = service.list_all()

    for worker in sorted(workers, key=lambda w: w.id):
        click.echo(_format_worker(worker))
    click.echo(f"\n{len(workers)} worker(s)")


@workers_cli.command("show")
@click.argument("worker_id", type=int)
def show_worker_command(worker_id: int):
    """Show every field of a single worker."""
    service = build_worker_service()
    try:
        worker = service.get_by_id(worker_id)
    except WorkerDirectoryError as exc:
        _report_failure(exc)

    click.echo(f"Worker {worker.id}")
    click.echo(f"  Name:        {worker.full_name}")
    click.echo(f"  Gender:      {worker.gender.value if worker.gender else '-'}")
    click.echo(f"  Birth date:  {worker.birth_date or '-'}")
    click.echo(f"  Hired:       {worker.hiring_date}")
    click.echo(f"  Fired:       {worker.firing_date or '-'}")
    click.echo(f"  Office:      {worker.office_id or '-'}")
    click.echo(f"  Room:        {worker.room_number or '-'}")


@workers_cli.command("fire")
@click.argument("worker_id", type=int)
@click.argument("fire_date", type=click.DateTime(formats=["%Y-%m-%d"]))
def fire_worker_command(worker_id: int, fire_date):
    """Set WORKER_ID's firing date to FIRE_DATE (YYYY-MM-DD)."""
    service = build_worker_service()
    try:
        worker = service.fire(worker_id, fire_date.date())
    except WorkerDirectoryError as exc:
        _report_failure(exc)
    click.secho(f"Worker {worker.id} fired as of {worker.firing_date}.", fg="green")


@workers_cli.command("move")
@click.argument("worker_id", type=int)
@click.option("--office-id", type=int, default=None, help="Target office id.")
@click.option("--room-number", type=int, default=None, help="Target room number.")
def move_worker_command(worker_id: int, office_id: int | None, room_number: int | None):
    """
    Move WORKER_ID to another office and room.

    Omitted options are cleared, so ``flask workers move 7`` makes
    worker 7 a remote worker with no office.
    """
    service = build_worker_service()
    try:
        worker = service.move(worker_id, office_id=office_id, room_number=room_number)
    except WorkerDirectoryError as exc:
        _report_failure(exc)
    click.secho(
        f"Worker {worker.id} moved to office {worker.office_id or '-'}, "
        f"room {worker.room_number or '-'}.",
        fg="green",
    )


def register_commands(app):
    """Register all custom CLI commands with the Flask application."""
    from workrooms.seed_dev_data import (  # pylint: disable=import-outside-toplevel
        register_seed_commands,
    )

    app.cli.add_command(db_check_command)
    app.cli.add_command(workers_cli)
    register_seed_commands(app)

