"""Initial schema — events and tasks tables.

Revision ID: 001_initial
Revises:
Create Date: 2026-01-16

Creates the flat record store: local/mirrored calendar events and tasks.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'events',
        sa.Column('id', sa.String(128), primary_key=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('start', sa.String(40), nullable=False),
        sa.Column('end', sa.String(40), nullable=False),
        sa.Column('location', sa.Text(), nullable=False, server_default=''),
        sa.Column('notes', sa.Text(), nullable=False, server_default=''),
        sa.Column('color', sa.String(32), nullable=False, server_default=''),
        sa.Column('google_event_id', sa.String(128), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_events_google_event_id', 'events', ['google_event_id'])

    op.create_table(
        'tasks',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('deadline', sa.String(40), nullable=True),
        sa.Column('importance', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('urgency', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', sa.String(20), nullable=False, server_default='open'),
        sa.Column('scheduled_start', sa.String(40), nullable=True),
        sa.Column('scheduled_end', sa.String(40), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('tasks')
    op.drop_index('ix_events_google_event_id', table_name='events')
    op.drop_table('events')
