"""Enrollments service: enrollment records checked against the courses and students services."""

__version__ = "0.1.0"
