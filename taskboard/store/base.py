import contextlib
import threading
from abc import ABC, abstractmethod
from typing import Iterator

from taskboard.models.document import Document


def empty_document() -> Document:
    return Document(users=[], boards=[], tasks=[], invites=[])


class DocumentStore(ABC):
    """Whole-document persistence: ``load`` everything, mutate, ``save`` everything.

    ``transaction`` wraps that sequence. With ``serialize=True`` (the default)
    concurrent transactions run one at a time; without it two racing requests
    can lose an update, last writer wins.
    """

    def __init__(self, serialize: bool = True):
        self._lock = threading.RLock() if serialize else None

    @abstractmethod
    def load(self) -> Document:
        """Return the stored document, or an empty one if none is readable."""

    @abstractmethod
    def save(self, document: Document) -> None:
        """Replace the stored document."""

    @contextlib.contextmanager
    def transaction(self) -> Iterator[Document]:
        guard = self._lock if self._lock is not None else contextlib.nullcontext()
        with guard:
            document = self.load()
            yield document
            # not reached when the block raised, so failed operations persist nothing
            self.save(document)
