"""Timeclock reports package.

Feature modules (punches, employees, ledger, payroll, reports, ...) with a thin
Flask controller layer over service/repository layers. The ``ledger`` module
is the pure engine that turns punch streams into worked minutes.
"""
