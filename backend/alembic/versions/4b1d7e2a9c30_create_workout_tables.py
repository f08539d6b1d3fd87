"""create exercises/workouts/workout_exercises/sets

Revision ID: 4b1d7e2a9c30
Revises:
Create Date: 2025-09-01 18:12:44.316520

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1d7e2a9c30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) exercise catalog
    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('muscle_group', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.UniqueConstraint('name', name='exercises_name_unique'),
    )
    op.create_index('idx_exercises_name', 'exercises', ['name'])

    # 2) workouts
    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('idx_workouts_user_id', 'workouts', ['user_id'])
    op.create_index('idx_workouts_user_date', 'workouts', ['user_id', sa.text('date DESC')])

    # 3) workout_exercises
    op.create_table(
        'workout_exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('idx_workout_exercises_workout_id', 'workout_exercises', ['workout_id'])

    # 4) sets
    op.create_table(
        'sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_exercise_id', sa.Integer(), sa.ForeignKey('workout_exercises.id', ondelete='CASCADE'), nullable=False),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Numeric(6, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('idx_sets_workout_exercise_id', 'sets', ['workout_exercise_id'])


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_index('idx_sets_workout_exercise_id', table_name='sets')
    op.drop_table('sets')
    op.drop_index('idx_workout_exercises_workout_id', table_name='workout_exercises')
    op.drop_table('workout_exercises')
    op.drop_index('idx_workouts_user_date', table_name='workouts')
    op.drop_index('idx_workouts_user_id', table_name='workouts')
    op.drop_table('workouts')
    op.drop_index('idx_exercises_name', table_name='exercises')
    op.drop_table('exercises')
