"""Requirement checker for Python web-framework hosts."""

__version__ = "0.1.0"
