"""Classroom Attendance package.

Organized by feature modules (users, students, attendance) on top of a small
key-value storage layer, with a thin Flask controller layer over the
service/repository layers.
"""
