"""
DTOs

Data Transfer Objects passed between a form host and the settings service.
"""

from .settings_dtos import ContentTypeSubmission, SettingsFormResponse, Submission

__all__ = [
    "ContentTypeSubmission",
    "SettingsFormResponse",
    "Submission",
]
