"""
More links count value object
"""

from dataclasses import dataclass

from pager_for_content_type.infrastructure.utilities.constants import PagerLimits


@dataclass(frozen=True)
class MoreLinksCount:
    """Number of extra node titles shown around the pager (0 = off)"""

    value: int = PagerLimits.DEFAULT_MORE_LINKS

    def __post_init__(self):
        """Validate more links count"""
        # bool is an int subclass but never a valid option
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("More links count must be an integer")
        if self.value not in PagerLimits.MORE_LINKS_OPTIONS:
            allowed = ", ".join(str(option) for option in PagerLimits.MORE_LINKS_OPTIONS)
            raise ValueError(f"More links count must be one of {allowed}")

    @property
    def is_off(self) -> bool:
        return self.value == 0

    def __int__(self) -> int:
        return self.value
