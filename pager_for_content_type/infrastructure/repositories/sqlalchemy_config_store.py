"""
SQLAlchemy implementation of ConfigStore
"""

import logging
from typing import Any, Callable, Dict, Optional

from sqlalchemy.orm import Session

from pager_for_content_type.domain.repositories.config_store import ConfigStore
from pager_for_content_type.infrastructure.database.models import ConfigEntry
from pager_for_content_type.infrastructure.repositories.session_handler import managed_session
from pager_for_content_type.infrastructure.utilities.exceptions import StoreUnavailableError


class SQLAlchemyConfigStore(ConfigStore):
    """Namespaced key-value store backed by the config_entries table"""

    def __init__(
        self,
        namespace: str,
        session_factory: Optional[Callable[[], Session]] = None,
    ):
        self._namespace = namespace
        self._session_factory = session_factory
        self._pending: Dict[str, Any] = {}
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def has_pending_changes(self) -> bool:
        return bool(self._pending)

    def get(self, key: str, default: Any = None) -> Any:
        """Read a value, preferring values staged by set()"""
        if key in self._pending:
            return self._pending[key]

        with managed_session(self._session_factory, "get") as session:
            entry = (
                session.query(ConfigEntry)
                .filter(
                    ConfigEntry.namespace == self._namespace,
                    ConfigEntry.key == key,
                )
                .first()
            )
            if entry is None or entry.value is None:
                return default
            return entry.value

    def get_all(self) -> Dict[str, Any]:
        """Every saved key of the namespace in one query, overlaid with staged values"""
        with managed_session(self._session_factory, "get_all") as session:
            entries = (
                session.query(ConfigEntry)
                .filter(ConfigEntry.namespace == self._namespace)
                .all()
            )
            values = {entry.key: entry.value for entry in entries}

        values.update(self._pending)
        return values

    def set(self, key: str, value: Any) -> None:
        """Stage a value; nothing is written until save()"""
        self._pending[key] = value

    def save(self) -> None:
        """Write all staged values in a single transaction"""
        if not self._pending:
            return

        pending, self._pending = self._pending, {}
        try:
            with managed_session(self._session_factory, "save") as session:
                existing = {
                    entry.key: entry
                    for entry in session.query(ConfigEntry)
                    .filter(
                        ConfigEntry.namespace == self._namespace,
                        ConfigEntry.key.in_(list(pending)),
                    )
                    .all()
                }
                for key, value in pending.items():
                    entry = existing.get(key)
                    if entry is None:
                        session.add(
                            ConfigEntry(namespace=self._namespace, key=key, value=value)
                        )
                    else:
                        entry.value = value
        except StoreUnavailableError:
            self._logger.error(
                "Failed to save %d keys to %s", len(pending), self._namespace
            )
            raise

        self._logger.info("Saved %d keys to %s", len(pending), self._namespace)
