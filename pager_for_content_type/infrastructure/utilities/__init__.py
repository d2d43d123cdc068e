"""
Utilities

Shared constants, exceptions and helpers.
"""
