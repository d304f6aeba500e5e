"""Attendance Tracker package.

This package is organized by feature modules (employees, attendance, stats, ...)
with a thin Flask controller layer over service/repository layers.
"""

__version__ = "1.0.0"
