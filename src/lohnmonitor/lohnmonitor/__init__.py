"""Lohnmonitor package.

Organized by feature modules (tariff, payroll, notifications, scan, ...)
with a thin Flask controller layer over service/repository layers.
"""
