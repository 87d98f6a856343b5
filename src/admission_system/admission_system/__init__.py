"""Admission System package.

This package is organized by feature modules (students, schools, imports,
attendance) with a thin Flask controller layer and service/repository layers
on top of a single query-execution boundary.
"""
