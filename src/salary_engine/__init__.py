"""Salary engine: net pay, employer cost and their inverses."""

__version__ = "0.1.0"
