"""create_users_and_talks

Revision ID: 7c1d2e9a4b10
Revises:
Create Date: 2026-10-18 09:12:31.402117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '7c1d2e9a4b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, talks and talk_speakers tables."""
    op.create_table('users',
        sa.Column('login', sa.String(length=100), nullable=False),
        sa.Column('firstname', sa.String(length=30), nullable=False),
        sa.Column('lastname', sa.String(length=30), nullable=False),
        sa.Column('email', sa.String(length=500), nullable=False),
        sa.Column('company', sa.String(length=60), nullable=True),
        sa.Column('description', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column('email_hash', sa.String(length=32), nullable=True),
        sa.Column('photo_url', sa.String(length=500), nullable=True),
        sa.Column('role', sa.String(length=20), nullable=False, server_default='USER'),
        sa.Column('links', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column('legacy_id', sa.BigInteger(), nullable=True),
        sa.Column('token_expiration', sa.DateTime(), nullable=True),
        sa.Column('token', sa.String(length=255), nullable=True),
        sa.CheckConstraint(
            "role IN ('STAFF', 'STAFF_IN_PAUSE', 'USER', 'VOLUNTEER')",
            name='ck_users_role',
        ),
        sa.PrimaryKeyConstraint('login'),
        sa.UniqueConstraint('legacy_id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=False)

    op.create_table('talks',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('summary', sa.Text(), nullable=False, server_default=''),
        sa.Column('event', sa.String(length=10), nullable=False),
        sa.Column('language', sa.String(length=20), nullable=False, server_default='FRENCH'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_talks_event', 'talks', ['event'], unique=False)

    op.create_table('talk_speakers',
        sa.Column('talk_id', sa.UUID(), nullable=False),
        sa.Column('login', sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(['talk_id'], ['talks.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('talk_id', 'login'),
    )
    op.create_index('ix_talk_speakers_login', 'talk_speakers', ['login'], unique=False)


def downgrade() -> None:
    """Drop users, talks and talk_speakers tables."""
    op.drop_index('ix_talk_speakers_login', table_name='talk_speakers')
    op.drop_table('talk_speakers')
    op.drop_index('ix_talks_event', table_name='talks')
    op.drop_table('talks')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
