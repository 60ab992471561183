from typing import List, Optional

from taskboard.models.base import Record
from taskboard.models.board import Board
from taskboard.models.invite import Invite
from taskboard.models.task import Task
from taskboard.models.user import User


class Document(Record):
    """The whole persisted state: every request loads and saves one of these."""

    users: List[User] = []
    boards: List[Board] = []
    tasks: List[Task] = []
    invites: List[Invite] = []

    def find_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users if u.email == email), None)

    def find_board(self, board_id: str) -> Optional[Board]:
        return next((b for b in self.boards if b.id == board_id), None)

    def find_task(self, task_id: str) -> Optional[Task]:
        return next((t for t in self.tasks if t.id == task_id), None)
