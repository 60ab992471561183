import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path

from taskboard.models.document import Document
from taskboard.store.base import DocumentStore, empty_document

logger = logging.getLogger(__name__)


class JsonFileStore(DocumentStore):
    def __init__(self, path, serialize: bool = True):
        super().__init__(serialize=serialize)
        self.path = Path(path)

    def load(self) -> Document:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No data file at %s, starting empty", self.path)
            return empty_document()
        except OSError as e:
            logger.warning("Could not read %s (%s), starting empty", self.path, e)
            return empty_document()
        try:
            # pydantic's ValidationError is a ValueError, as is JSONDecodeError
            return Document.model_validate(json.loads(raw))
        except ValueError as e:
            logger.warning("Data file %s is not a valid document (%s), starting empty", self.path, e)
            return empty_document()

    def save(self, document: Document) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(document.to_json(), indent=2, ensure_ascii=False)
        # write next to the target and rename, so readers never see half a file
        fd, tmp = tempfile.mkstemp(prefix=self.path.name + ".", suffix=".tmp", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp, self.path)
        except OSError:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp)
            raise
