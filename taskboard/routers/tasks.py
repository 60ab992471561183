from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from taskboard.dependencies import get_store
from taskboard.models.task import Task
from taskboard.schemas.common import MessageOut
from taskboard.schemas.task import TaskCreate, TaskUpdate
from taskboard.services import tasks
from taskboard.store.base import DocumentStore

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=List[Task])
def list_tasks(user_id: Optional[str] = Query(None, alias="userId"), store: DocumentStore = Depends(get_store)):
    return tasks.list_tasks(store, user_id)


@router.post("", response_model=Task)
def create_task(payload: TaskCreate, store: DocumentStore = Depends(get_store)):
    return tasks.create_task(
        store,
        title=payload.title,
        board_id=payload.board_id,
        creator_id=payload.creator_id,
        description=payload.description,
        due_date=payload.due_date,
        assigned_user_id=payload.assigned_user_id,
    )


@router.patch("/{task_id}", response_model=Task)
def update_task(task_id: str, payload: TaskUpdate, store: DocumentStore = Depends(get_store)):
    return tasks.update_task(store, task_id, payload)


@router.delete("/{task_id}", response_model=MessageOut)
def delete_task(task_id: str, store: DocumentStore = Depends(get_store)):
    tasks.delete_task(store, task_id)
    return {"message": "Task deleted."}
