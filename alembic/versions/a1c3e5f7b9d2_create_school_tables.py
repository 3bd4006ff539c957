"""Create the school tables

Revision ID: a1c3e5f7b9d2
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c3e5f7b9d2'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DAYS = ('MONDAY', 'TUESDAY', 'WEDNESDAY', 'THURSDAY', 'FRIDAY')


def upgrade() -> None:
    """Create the roster, timetable, assessment and calendar tables."""
    op.create_table(
        'grades',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('level', sa.Integer(), nullable=False, unique=True),
    )
    op.create_table(
        'teachers',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('surname', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True, unique=True),
    )
    op.create_table(
        'subjects',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
    )
    op.create_table(
        'teacher_subjects',
        sa.Column('teacher_id', sa.String(), sa.ForeignKey('teachers.id'), primary_key=True),
        sa.Column('subject_id', sa.Integer(), sa.ForeignKey('subjects.id'), primary_key=True),
    )
    op.create_table(
        'classes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.Column('supervisor_id', sa.String(), sa.ForeignKey('teachers.id'), nullable=True),
        sa.Column('grade_id', sa.Integer(), sa.ForeignKey('grades.id'), nullable=True),
    )
    op.create_table(
        'parents',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('surname', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True, unique=True),
    )
    op.create_table(
        'students',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('surname', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True, unique=True),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('grade_id', sa.Integer(), sa.ForeignKey('grades.id'), nullable=True),
        sa.Column('parent_id', sa.String(), sa.ForeignKey('parents.id'), nullable=True),
    )
    op.create_index('ix_students_class_id', 'students', ['class_id'])
    op.create_index('ix_students_email', 'students', ['email'])
    op.create_table(
        'lessons',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('day', sa.Enum(*DAYS, name='day'), nullable=False),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=False),
        sa.Column('subject_id', sa.Integer(), sa.ForeignKey('subjects.id'), nullable=True),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('teacher_id', sa.String(), sa.ForeignKey('teachers.id'), nullable=False),
    )
    op.create_index('ix_lessons_class_id', 'lessons', ['class_id'])
    op.create_index('ix_lessons_teacher_id', 'lessons', ['teacher_id'])
    op.create_table(
        'exams',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('start_time', sa.DateTime(), nullable=True),
        sa.Column('end_time', sa.DateTime(), nullable=True),
        sa.Column('lesson_id', sa.Integer(), sa.ForeignKey('lessons.id'), nullable=False),
    )
    op.create_table(
        'assignments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=True),
        sa.Column('due_date', sa.DateTime(), nullable=True),
        sa.Column('lesson_id', sa.Integer(), sa.ForeignKey('lessons.id'), nullable=False),
    )
    op.create_table(
        'results',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('exam_id', sa.Integer(), sa.ForeignKey('exams.id'), nullable=True),
        sa.Column('assignment_id', sa.Integer(), sa.ForeignKey('assignments.id'), nullable=True),
        sa.Column('student_id', sa.String(), sa.ForeignKey('students.id'), nullable=False),
        sa.CheckConstraint(
            '(exam_id IS NULL) <> (assignment_id IS NULL)',
            name='ck_results_single_assessment',
        ),
    )
    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=False),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=True),
    )
    op.create_index('ix_events_start_time', 'events', ['start_time'])
    op.create_table(
        'announcements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=True),
    )
    op.create_index('ix_announcements_date', 'announcements', ['date'])


def downgrade() -> None:
    """Drop every school table, children first."""
    op.drop_index('ix_announcements_date', table_name='announcements')
    op.drop_table('announcements')
    op.drop_index('ix_events_start_time', table_name='events')
    op.drop_table('events')
    op.drop_table('results')
    op.drop_table('assignments')
    op.drop_table('exams')
    op.drop_index('ix_lessons_teacher_id', table_name='lessons')
    op.drop_index('ix_lessons_class_id', table_name='lessons')
    op.drop_table('lessons')
    op.drop_index('ix_students_email', table_name='students')
    op.drop_index('ix_students_class_id', table_name='students')
    op.drop_table('students')
    op.drop_table('parents')
    op.drop_table('classes')
    op.drop_table('teacher_subjects')
    op.drop_table('subjects')
    op.drop_table('teachers')
    op.drop_table('grades')
    sa.Enum(name='day').drop(op.get_bind(), checkfirst=True)
