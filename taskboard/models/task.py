from typing import List

from pydantic import Field

from taskboard.models.base import Record


class SubItem(Record):
    id: str
    content: str
    completed: bool = False


class Task(Record):
    id: str
    title: str
    description: str = ""
    due_date: str = ""
    board_id: str
    # "" means unassigned; persisted as userId
    assigned_user_id: str = Field(default="", alias="userId")
    items: List[SubItem] = []
