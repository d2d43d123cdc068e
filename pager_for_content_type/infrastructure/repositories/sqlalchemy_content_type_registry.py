"""
SQLAlchemy implementation of ContentTypeRegistry
"""

import logging
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from pager_for_content_type.domain.entities.content_type import ContentType
from pager_for_content_type.domain.repositories.content_type_registry import ContentTypeRegistry
from pager_for_content_type.infrastructure.database.models import ContentTypeRecord
from pager_for_content_type.infrastructure.repositories.session_handler import managed_session


class SQLAlchemyContentTypeRegistry(ContentTypeRegistry):
    """Content type registry backed by the content_types table"""

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        self._session_factory = session_factory
        self._logger = logging.getLogger(self.__class__.__name__)

    def list_content_types(self) -> List[ContentType]:
        """List content types in registration order"""
        with managed_session(self._session_factory, "list_content_types") as session:
            records = (
                session.query(ContentTypeRecord)
                .order_by(ContentTypeRecord.id)
                .all()
            )
            return [self._to_entity(record) for record in records]

    def register(self, type_: str, name: str) -> ContentType:
        """Register a content type, updating the label when it already exists"""
        content_type = ContentType.create(type_, name)
        with managed_session(self._session_factory, "register") as session:
            record = (
                session.query(ContentTypeRecord)
                .filter(ContentTypeRecord.type == content_type.type)
                .first()
            )
            if record is None:
                session.add(ContentTypeRecord(type=content_type.type, name=content_type.name))
            else:
                record.name = content_type.name
        self._logger.info("Registered content type %s", content_type.type)
        return content_type

    def remove(self, type_: str) -> bool:
        """Remove a content type; its pager settings are left in place"""
        with managed_session(self._session_factory, "remove") as session:
            record = (
                session.query(ContentTypeRecord)
                .filter(ContentTypeRecord.type == type_)
                .first()
            )
            if not record:
                return False

            session.delete(record)
            return True

    @staticmethod
    def _to_entity(record: ContentTypeRecord) -> ContentType:
        return ContentType.create(record.type, record.name)
