"""Add routine exercises and favourites

Revision ID: 002
Revises: 001
Create Date: 2026-10-17 11:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Add favourite / update columns to routines and the routine_exercises table."""
    op.add_column('routines', sa.Column('is_favorite', sa.Boolean(), nullable=False, server_default='false'))
    op.add_column('routines', sa.Column('updated_at', sa.DateTime(), nullable=False,
                                        server_default=sa.text('(CURRENT_TIMESTAMP)')))

    op.create_table('routine_exercises', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('routine_id', sa.Integer(), nullable=False),
        sa.Column('exercise_id', sa.Integer(), nullable=False),
        sa.Column('order_in_routine', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('sets', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('reps', sa.Integer(), nullable=False, server_default='12'),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('rest_time_seconds', sa.Integer(), nullable=False, server_default='60'),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.ForeignKeyConstraint(['routine_id'], ['routines.id']),
        sa.ForeignKeyConstraint(['exercise_id'], ['exercises.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_routine_exercises_routine_id'), 'routine_exercises', ['routine_id'], unique=False)


def downgrade() -> None:
    """Drop routine exercises and the added routine columns."""
    op.drop_index(op.f('ix_routine_exercises_routine_id'), table_name='routine_exercises')
    op.drop_table('routine_exercises')
    op.drop_column('routines', 'updated_at')
    op.drop_column('routines', 'is_favorite')
