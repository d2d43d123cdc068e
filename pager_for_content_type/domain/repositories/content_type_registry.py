"""
Content type registry interface

Defines the contract for listing the content types of the host system.
"""

from abc import ABC, abstractmethod
from typing import List

from pager_for_content_type.domain.entities.content_type import ContentType


class ContentTypeRegistry(ABC):
    """Repository interface for content type lookups"""

    @abstractmethod
    def list_content_types(self) -> List[ContentType]:
        """List all registered content types in host display order"""
