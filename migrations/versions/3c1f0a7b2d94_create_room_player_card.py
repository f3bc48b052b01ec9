"""create room, player and card tables

Revision ID: 3c1f0a7b2d94
Revises:
Create Date: 2026-10-18 09:12:40.118503

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7b2d94"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "room",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("code", sqlmodel.sql.sqltypes.AutoString(length=6), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column(
            "status",
            sa.Enum("WAITING", "DRAWING", "FINISHED", name="roomstatus"),
            nullable=False,
        ),
        sa.Column(
            "organizer_id",
            sqlmodel.sql.sqltypes.AutoString(length=64),
            nullable=False,
        ),
        sa.Column("drawn_numbers", sa.Text(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_room_code"), "room", ["code"], unique=True)

    op.create_table(
        "player",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("room_id", sa.Uuid(), nullable=False),
        sa.Column(
            "session_id",
            sqlmodel.sql.sqltypes.AutoString(length=64),
            nullable=False,
        ),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column(
            "connection_status",
            sa.Enum("CONNECTED", "DISCONNECTED", name="connectionstatus"),
            nullable=False,
        ),
        sa.Column("has_won", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "win_pattern",
            sa.Enum("FULL", "LINE", "COLUMN", "DIAGONAL", name="winpattern"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["room_id"],
            ["room.id"],
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("room_id", "session_id"),
    )
    op.create_index(op.f("ix_player_room_id"), "player", ["room_id"], unique=False)

    op.create_table(
        "card",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("player_id", sa.Uuid(), nullable=False),
        sa.Column("numbers", sa.Text(), nullable=False),
        sa.Column("marked_numbers", sa.Text(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["player_id"],
            ["player.id"],
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("player_id"),
    )


def downgrade() -> None:
    op.drop_table("card")
    op.drop_index(op.f("ix_player_room_id"), table_name="player")
    op.drop_table("player")
    op.drop_index(op.f("ix_room_code"), table_name="room")
    op.drop_table("room")
    sa.Enum(name="winpattern").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="connectionstatus").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="roomstatus").drop(op.get_bind(), checkfirst=True)
