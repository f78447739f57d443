"""Hours Tracker package.

This package is organized by feature modules (entries, payroll, users, ...)
with a thin Flask controller layer over service/repository layers. The hours
computation in ``payroll`` is pure and has no storage dependencies.
"""
