"""
Pager for content type

Configuration schema and update service for the per content type
"next/previous" pager settings.
"""

__version__ = "1.0.0"
