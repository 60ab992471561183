from typing import List

from taskboard.models.base import Record


class Board(Record):
    id: str
    name: str
    color: str
    owner_id: str
    members: List[str] = []
