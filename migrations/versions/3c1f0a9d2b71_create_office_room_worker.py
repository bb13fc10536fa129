"""Create office, room and worker tables

Revision ID: 3c1f0a9d2b71
Revises:
Create Date: 2026-10-18 10:12:44.081523

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3c1f0a9d2b71"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    """Create the worker directory tables."""
    op.create_table(
        "office",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("address", sa.String(length=500), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "room",
        sa.Column("room_number", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("office_id", sa.Integer(), nullable=True),
        sa.Column("workers_limit", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["office_id"], ["office.id"]),
        sa.PrimaryKeyConstraint("room_number"),
        sa.CheckConstraint("workers_limit >= 0", name="CK_room_workers_limit"),
    )
    op.create_index("ix_room_office_id", "room", ["office_id"])

    op.create_table(
        "worker",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=True),
        sa.Column("last_name", sa.String(length=100), nullable=True),
        sa.Column("middle_name", sa.String(length=100), nullable=True),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("hiring_date", sa.Date(), nullable=False),
        sa.Column("firing_date", sa.Date(), nullable=True),
        sa.Column(
            "gender",
            sa.Enum("MALE", "FEMALE", name="worker_gender"),
            nullable=True,
        ),
        sa.Column("office_id", sa.Integer(), nullable=True),
        sa.Column("room_number", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["office_id"], ["office.id"]),
        sa.ForeignKeyConstraint(["room_number"], ["room.room_number"]),
        sa.PrimaryKeyConstraint("id"),
        # Firing may not precede hiring.
        sa.CheckConstraint(
            "firing_date IS NULL OR firing_date >= hiring_date",
            name="CK_worker_firing_after_hiring",
        ),
    )
    op.create_index("ix_worker_office_id", "worker", ["office_id"])
    op.create_index("ix_worker_room_number", "worker", ["room_number"])


def downgrade():
    """Drop the tables created in upgrade()."""
    op.drop_index("ix_worker_room_number", table_name="worker")
    op.drop_index("ix_worker_office_id", table_name="worker")
    op.drop_table("worker")
    op.drop_index("ix_room_office_id", table_name="room")
    op.drop_table("room")
    op.drop_table("office")
    sa.Enum(name="worker_gender").drop(op.get_bind(), checkfirst=True)
