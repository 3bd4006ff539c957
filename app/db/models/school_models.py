# /app/db/models/school_models.py

"""
This module defines the SQLAlchemy ORM models for the school: the people
(teachers, students, parents), the timetable (grades, classes, subjects,
lessons), the assessments taken in lessons (exams, assignments) with their
results, and the calendar items (events, announcements).

Teacher, student and parent ids are the identity provider's user ids, so
they are strings. Everything else uses an integer surrogate key.
"""

import enum

from sqlalchemy import (
    Column, String, Integer, DateTime, Enum, ForeignKey, Table, CheckConstraint, Text,
)
from sqlalchemy.orm import relationship

from ..base_class import Base


class Day(str, enum.Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"


# Many-to-many link between teachers and the subjects they teach.
teacher_subjects = Table(
    "teacher_subjects",
    Base.metadata,
    Column("teacher_id", String, ForeignKey("teachers.id"), primary_key=True),
    Column("subject_id", Integer, ForeignKey("subjects.id"), primary_key=True),
)


class Grade(Base):
    id = Column(Integer, primary_key=True, index=True)
    level = Column(Integer, unique=True, nullable=False)

    students = relationship("Student", back_populates="grade")
    classes = relationship("Class", back_populates="grade")


class Teacher(Base):
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    surname = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=True)

    subjects = relationship("Subject", secondary=teacher_subjects, back_populates="teachers")
    lessons = relationship("Lesson", back_populates="teacher")
    classes = relationship("Class", back_populates="supervisor")


class Subject(Base):
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)

    teachers = relationship("Teacher", secondary=teacher_subjects, back_populates="subjects")
    lessons = relationship("Lesson", back_populates="subject")


class Class(Base):
    """
    A class (form group) of students. The roster count is never stored; it
    is derived from the students pointing at the class.
    """
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    capacity = Column(Integer, nullable=True)
    supervisor_id = Column(String, ForeignKey("teachers.id"), nullable=True)
    grade_id = Column(Integer, ForeignKey("grades.id"), nullable=True)

    supervisor = relationship("Teacher", back_populates="classes")
    grade = relationship("Grade", back_populates="classes")
    students = relationship("Student", back_populates="class_")
    lessons = relationship("Lesson", back_populates="class_")
    events = relationship("Event", back_populates="class_")
    announcements = relationship("Announcement", back_populates="class_")


class Parent(Base):
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    surname = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=True)

    students = relationship("Student", back_populates="parent")


class Student(Base):
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    surname = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    grade_id = Column(Integer, ForeignKey("grades.id"), nullable=True)
    parent_id = Column(String, ForeignKey("parents.id"), nullable=True)

    class_ = relationship("Class", back_populates="students")
    grade = relationship("Grade", back_populates="students")
    parent = relationship("Parent", back_populates="students")
    results = relationship("Result", back_populates="student", cascade="all, delete-orphan")


class Lesson(Base):
    """One weekly slot: a subject taught to a class by a teacher."""
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    day = Column(Enum(Day), nullable=False, default=Day.MONDAY)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    teacher_id = Column(String, ForeignKey("teachers.id"), nullable=False, index=True)

    subject = relationship("Subject", back_populates="lessons")
    class_ = relationship("Class", back_populates="lessons")
    teacher = relationship("Teacher", back_populates="lessons")
    exams = relationship("Exam", back_populates="lesson", cascade="all, delete-orphan")
    assignments = relationship("Assignment", back_populates="lesson", cascade="all, delete-orphan")


class Exam(Base):
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    start_time = Column(DateTime, nullable=True)
    end_time = Column(DateTime, nullable=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id"), nullable=False)

    lesson = relationship("Lesson", back_populates="exams")
    results = relationship("Result", back_populates="exam", cascade="all, delete-orphan")


class Assignment(Base):
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    start_date = Column(DateTime, nullable=True)
    due_date = Column(DateTime, nullable=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id"), nullable=False)

    lesson = relationship("Lesson", back_populates="assignments")
    results = relationship("Result", back_populates="assignment", cascade="all, delete-orphan")


class Result(Base):
    """
    The score of one student on one assessment. Exactly one of `exam_id` and
    `assignment_id` is set; the check constraint backs up the form schema.
    """
    __table_args__ = (
        CheckConstraint(
            "(exam_id IS NULL) <> (assignment_id IS NULL)",
            name="ck_results_single_assessment",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    score = Column(Integer, nullable=False)
    exam_id = Column(Integer, ForeignKey("exams.id"), nullable=True)
    assignment_id = Column(Integer, ForeignKey("assignments.id"), nullable=True)
    student_id = Column(String, ForeignKey("students.id"), nullable=False)

    exam = relationship("Exam", back_populates="results")
    assignment = relationship("Assignment", back_populates="results")
    student = relationship("Student", back_populates="results")


class Event(Base):
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=False)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=True)

    class_ = relationship("Class", back_populates="events")


class Announcement(Base):
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=True)

    class_ = relationship("Class", back_populates="announcements")
