"""initial schema: users, works, sessions, reviews

Revision ID: 20260301_initial
Revises:
Create Date: 2026-03-01 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '20260301_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

WORK_TYPES = ('BOOK', 'MOVIE', 'GAME', 'SHOW', 'OTHER')
WORK_STATUSES = ('TO_EXPLORE', 'IN_PROGRESS', 'FINISHED')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('display_name', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('username', name='uq_users_username'),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )
    op.create_table(
        'works',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('type', sa.Enum(*WORK_TYPES, name='work_type'), nullable=False),
        sa.Column('creator', sa.String(length=255), nullable=True),
        sa.Column('genre', sa.String(length=100), nullable=True),
        sa.Column('status', sa.Enum(*WORK_STATUSES, name='work_status'), nullable=False),
        sa.Column('total_units', sa.Integer(), nullable=True),
        sa.Column('cover_url', sa.String(length=500), nullable=True),
        sa.Column('started_at', sa.Date(), nullable=True),
        sa.Column('finished_at', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
    )
    op.create_index('idx_works_user_id', 'works', ['user_id'])
    op.create_index('idx_works_status', 'works', ['status'])
    op.create_index('idx_works_type', 'works', ['type'])

    op.create_table(
        'sessions',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('work_id', sa.Integer(), nullable=False),
        sa.Column('started_at', sa.DateTime(), nullable=False),
        sa.Column('ended_at', sa.DateTime(), nullable=True),
        sa.Column('minutes', sa.Integer(), nullable=True),
        sa.Column('units_completed', sa.Integer(), nullable=True),
        sa.Column('note', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['work_id'], ['works.id'], ondelete='CASCADE'),
    )
    op.create_index('idx_sessions_user_id', 'sessions', ['user_id'])
    op.create_index('idx_sessions_work_id', 'sessions', ['work_id'])
    op.create_index('idx_sessions_started_at', 'sessions', ['started_at'])

    op.create_table(
        'reviews',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('work_id', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('body', sa.Text(), nullable=True),
        sa.Column('is_private', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['work_id'], ['works.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('user_id', 'work_id', name='uq_reviews_user_work'),
    )
    op.create_index('idx_reviews_user_id', 'reviews', ['user_id'])
    op.create_index('idx_reviews_work_id', 'reviews', ['work_id'])


def downgrade() -> None:
    op.drop_table('reviews')
    op.drop_table('sessions')
    op.drop_table('works')
    op.drop_table('users')
    sa.Enum(name='work_status').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='work_type').drop(op.get_bind(), checkfirst=True)
