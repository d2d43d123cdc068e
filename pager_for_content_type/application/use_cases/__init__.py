"""
Use Cases

Contains the pager settings load and apply operations.
"""

from .pager_settings_use_case import PagerSettingsUseCase

__all__ = [
    'PagerSettingsUseCase'
]
