"""Create routine planner schema

Revision ID: 001
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profiles, catalogue, schedule and session tables."""
    op.create_table('profiles', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('exercises', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('image', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('muscle_group', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_exercises_name'), 'exercises', ['name'], unique=False)

    op.create_table('routines', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['profile_id'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_routines_profile_id'), 'routines', ['profile_id'], unique=False)

    op.create_table('training_days', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['profile_id'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_training_days_profile_id'), 'training_days', ['profile_id'], unique=False)

    op.create_table('training_day_exercises', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('training_day_id', sa.Integer(), nullable=False),
        sa.Column('exercise_id', sa.Integer(), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('sets', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('reps', sa.Integer(), nullable=False, server_default='10'),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('rest_seconds', sa.Integer(), nullable=False, server_default='60'),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['training_day_id'], ['training_days.id']),
        sa.ForeignKeyConstraint(['exercise_id'], ['exercises.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_training_day_exercises_training_day_id'), 'training_day_exercises',
                    ['training_day_id'], unique=False)

    op.create_table('routine_weeks', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('day_of_week', sa.Integer(), nullable=False),
        sa.Column('day_name', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('is_rest_day', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('routine_id', sa.Integer(), nullable=True),
        sa.Column('routine_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('training_day_id', sa.Integer(), nullable=True),
        sa.Column('exercises_config', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['profile_id'], ['profiles.id']),
        sa.ForeignKeyConstraint(['routine_id'], ['routines.id']),
        sa.ForeignKeyConstraint(['training_day_id'], ['training_days.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('profile_id', 'day_of_week', name='uq_routine_week_profile_day'))
    op.create_index(op.f('ix_routine_weeks_profile_id'), 'routine_weeks', ['profile_id'], unique=False)

    op.create_table('training_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('routine_week_id', sa.Integer(), nullable=True),
        sa.Column('routine_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('day_of_week', sa.Integer(), nullable=False),
        sa.Column('day_name', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('status', sa.Enum('ACTIVE', 'PAUSED', 'COMPLETED', 'CANCELLED', name='sessionstatus'),
                  nullable=False),
        sa.Column('current_exercise_index', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('last_activity', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=True),
        sa.Column('exercises', sa.JSON(), nullable=False),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('rating', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['profile_id'], ['profiles.id']),
        sa.ForeignKeyConstraint(['routine_week_id'], ['routine_weeks.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_training_sessions_profile_id'), 'training_sessions', ['profile_id'], unique=False)
    op.create_index(op.f('ix_training_sessions_status'), 'training_sessions', ['status'], unique=False)


def downgrade() -> None:
    """Drop every routine planner table."""
    op.drop_index(op.f('ix_training_sessions_status'), table_name='training_sessions')
    op.drop_index(op.f('ix_training_sessions_profile_id'), table_name='training_sessions')
    op.drop_table('training_sessions')
    sa.Enum(name='sessionstatus').drop(op.get_bind(), checkfirst=True)
    op.drop_index(op.f('ix_routine_weeks_profile_id'), table_name='routine_weeks')
    op.drop_table('routine_weeks')
    op.drop_index(op.f('ix_training_day_exercises_training_day_id'), table_name='training_day_exercises')
    op.drop_table('training_day_exercises')
    op.drop_index(op.f('ix_training_days_profile_id'), table_name='training_days')
    op.drop_table('training_days')
    op.drop_index(op.f('ix_routines_profile_id'), table_name='routines')
    op.drop_table('routines')
    op.drop_index(op.f('ix_exercises_name'), table_name='exercises')
    op.drop_table('exercises')
    op.drop_table('profiles')
