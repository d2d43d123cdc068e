"""
Content type ID value object
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContentTypeId:
    """Machine name of a content type (e.g. "article")"""

    value: str

    def __post_init__(self):
        """Validate content type machine name"""
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Content type ID cannot be empty")

        cleaned_id = self.value.strip()
        if any(char.isspace() for char in cleaned_id):
            raise ValueError("Content type ID cannot contain whitespace")

        object.__setattr__(self, "value", cleaned_id)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def of(cls, value) -> "ContentTypeId":
        """Accept either a ContentTypeId or a plain machine name"""
        return value if isinstance(value, cls) else cls(value)
