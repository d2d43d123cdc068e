"""
Utility functions for the pager settings service
"""

from typing import Any

from .constants import FormSettings


def parse_checkbox(value: Any) -> bool:
    """Interpret a checkbox value posted by a form or read back from storage"""
    if isinstance(value, str):
        return value.strip().lower() not in FormSettings.CHECKBOX_OFF_VALUES
    return bool(value)
