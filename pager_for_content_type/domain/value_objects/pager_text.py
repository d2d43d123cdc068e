"""Pager link text value object"""

from dataclasses import dataclass

from pager_for_content_type.infrastructure.utilities.constants import PagerLimits


@dataclass(frozen=True)
class PagerText:
    """Text of a "previous" or "next" pager link; empty means inherit"""

    value: str = ""

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError("Pager text must be a string")
        if len(self.value) > PagerLimits.MAX_TEXT_LENGTH:
            raise ValueError(
                f"Pager text cannot exceed {PagerLimits.MAX_TEXT_LENGTH} characters"
            )

    @classmethod
    def required(cls, value: str) -> "PagerText":
        """Build a pager text that must not be blank"""
        text = cls(value)
        if not text.value.strip():
            raise ValueError("Pager text is required")
        return text

    def __str__(self) -> str:
        return self.value
