from typing import Optional

from taskboard.models.base import Record


class BoardCreate(Record):
    name: Optional[str] = None
    user_id: Optional[str] = None


class BoardDelete(Record):
    user_id: Optional[str] = None
