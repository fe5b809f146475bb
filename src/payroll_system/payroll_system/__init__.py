"""Payroll System package.

This package is organized by feature modules (employees, attendance,
additions, loans, payroll) with a pure computation engine in ``payroll`` and
MySQL repository adapters beside each feature.
"""
