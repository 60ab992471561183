from typing import List, Optional

from taskboard.errors import ForbiddenError, NotFoundError, ValidationError
from taskboard.models.base import new_id
from taskboard.models.task import Task
from taskboard.schemas.task import TaskUpdate
from taskboard.services.boards import has_access
from taskboard.store.base import DocumentStore


def list_tasks(store: DocumentStore, user_id: str) -> List[Task]:
    """Every task on a board the user can access, assigned to them or not."""
    if not user_id:
        raise ValidationError("userId is required.")
    doc = store.load()
    board_ids = {b.id for b in doc.boards if has_access(b, user_id)}
    return [t for t in doc.tasks if t.board_id in board_ids]


def create_task(
    store: DocumentStore,
    title: str,
    board_id: str,
    creator_id: str,
    description: Optional[str] = None,
    due_date: Optional[str] = None,
    assigned_user_id: Optional[str] = None,
) -> Task:
    if not title or not board_id or not creator_id:
        raise ValidationError("title, boardId and creatorId are required.")

    with store.transaction() as doc:
        board = doc.find_board(board_id)
        if board is None:
            raise NotFoundError("Board not found.")
        if not has_access(board, creator_id):
            raise ForbiddenError("You are not a member of this board.")
        task = Task(
            id=new_id("task"),
            title=title,
            description=description or "",
            due_date=due_date or "",
            board_id=board_id,
            assigned_user_id=assigned_user_id or "",
            items=[],
        )
        doc.tasks.append(task)

    return task


def update_task(store: DocumentStore, task_id: str, changes: TaskUpdate) -> Task:
    """Apply the fields present in ``changes``; ``items`` replaces the whole list.

    Anyone holding the task id may update it, and a move to another board is
    not checked against the caller's access.
    """
    fields = changes.model_dump(exclude_unset=True, exclude_none=True)

    with store.transaction() as doc:
        task = doc.find_task(task_id)
        if task is None:
            raise NotFoundError("Task not found.")
        for key, value in fields.items():
            if key == "items":
                value = list(changes.items)
            setattr(task, key, value)

    return task


def delete_task(store: DocumentStore, task_id: str) -> None:
    """Idempotent: deleting an unknown id is not an error."""
    with store.transaction() as doc:
        doc.tasks = [t for t in doc.tasks if t.id != task_id]
