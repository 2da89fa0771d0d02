"""Retirement gap and savings plan calculator."""

__version__ = "0.1.0"
