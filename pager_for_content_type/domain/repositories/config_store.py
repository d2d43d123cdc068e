"""
Configuration store interface

Defines the contract for the namespaced key-value configuration object.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ConfigStore(ABC):
    """Key-value configuration store with atomic save"""

    @property
    @abstractmethod
    def namespace(self) -> str:
        """Name of the configuration object (e.g. "pager_for_content_type.settings")"""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Read a value, including values set but not yet saved"""

    @abstractmethod
    def get_all(self) -> Dict[str, Any]:
        """Every value of the namespace, including values not yet saved"""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Stage a value to be written by the next save()"""

    @abstractmethod
    def save(self) -> None:
        """Commit all staged values atomically"""
