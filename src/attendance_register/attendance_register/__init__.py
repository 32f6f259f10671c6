"""Attendance Register package.

Organized by feature modules (users, students, attendance) with thin Flask
controllers over service and repository layers.
"""
