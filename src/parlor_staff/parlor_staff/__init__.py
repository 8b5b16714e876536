"""Parlor Staff System package.

Feature modules (shifts, payroll, games, shift_board, ...) each keep a pure
domain layer, a repository Protocol with a MySQL implementation, a service
layer and a thin Flask controller.
"""
