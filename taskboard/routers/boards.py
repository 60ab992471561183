from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from taskboard.dependencies import get_store
from taskboard.models.board import Board
from taskboard.schemas.board import BoardCreate, BoardDelete
from taskboard.schemas.common import MessageOut
from taskboard.services import boards
from taskboard.store.base import DocumentStore

router = APIRouter(prefix="/api/boards", tags=["boards"])


@router.get("", response_model=List[Board])
def list_boards(user_id: Optional[str] = Query(None, alias="userId"), store: DocumentStore = Depends(get_store)):
    return boards.list_boards(store, user_id)


@router.post("", response_model=Board)
def create_board(payload: BoardCreate, store: DocumentStore = Depends(get_store)):
    return boards.create_board(store, payload.name, payload.user_id)


@router.delete("/{board_id}", response_model=MessageOut)
def delete_board(board_id: str, payload: Optional[BoardDelete] = None, store: DocumentStore = Depends(get_store)):
    user_id = payload.user_id if payload is not None else None
    boards.delete_board(store, board_id, user_id)
    return {"message": "Board deleted."}
