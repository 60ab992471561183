import json
import logging

from sqlalchemy import Column, Integer, Text

from taskboard.database import Base, make_engine, make_session_factory
from taskboard.models.document import Document
from taskboard.store.base import DocumentStore, empty_document

logger = logging.getLogger(__name__)

DOCUMENT_ROW_ID = 1


class StoredDocument(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True)
    body = Column(Text, nullable=False)


class SqlDocumentStore(DocumentStore):
    """Keeps the serialized document in a single database row."""

    def __init__(self, url: str, serialize: bool = True):
        super().__init__(serialize=serialize)
        self.engine = make_engine(url)
        Base.metadata.create_all(bind=self.engine)
        self.SessionLocal = make_session_factory(self.engine)

    def load(self) -> Document:
        db = self.SessionLocal()
        try:
            row = db.get(StoredDocument, DOCUMENT_ROW_ID)
            if row is None:
                return empty_document()
            try:
                return Document.model_validate(json.loads(row.body))
            except ValueError as e:
                logger.warning("Stored document is not valid (%s), starting empty", e)
                return empty_document()
        finally:
            db.close()

    def save(self, document: Document) -> None:
        body = json.dumps(document.to_json(), ensure_ascii=False)
        db = self.SessionLocal()
        try:
            db.merge(StoredDocument(id=DOCUMENT_ROW_ID, body=body))
            db.commit()
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
