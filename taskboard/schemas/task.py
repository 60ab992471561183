from typing import List, Optional

from pydantic import Field

from taskboard.models.base import Record
from taskboard.models.task import SubItem


class TaskCreate(Record):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[str] = None
    board_id: Optional[str] = None
    assigned_user_id: Optional[str] = None
    creator_id: Optional[str] = None


class TaskUpdate(Record):
    """Fields a PATCH may change. Anything else in the body is ignored."""

    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[str] = None
    board_id: Optional[str] = None
    assigned_user_id: Optional[str] = Field(default=None, alias="userId")
    items: Optional[List[SubItem]] = None
