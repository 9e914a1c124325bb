"""Beacon Attendance package.

Feature modules (employees, attendance, analytics, reports) sit behind a thin
Flask controller layer; services depend on repository protocols, and the
analytics functions are pure over the event snapshot they are given.
"""
