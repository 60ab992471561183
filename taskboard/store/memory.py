from typing import Optional

from taskboard.models.document import Document
from taskboard.store.base import DocumentStore, empty_document


class MemoryStore(DocumentStore):
    """In-process store; hands out copies so callers never share state with it."""

    def __init__(self, document: Optional[Document] = None, serialize: bool = True):
        super().__init__(serialize=serialize)
        if document is None:
            document = empty_document()
        self._document = document.model_copy(deep=True)

    def load(self) -> Document:
        return self._document.model_copy(deep=True)

    def save(self, document: Document) -> None:
        self._document = document.model_copy(deep=True)
