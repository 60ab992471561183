import logging
from typing import List

from taskboard.errors import ForbiddenError, NotFoundError, ValidationError
from taskboard.models.base import new_id
from taskboard.models.board import Board
from taskboard.store.base import DocumentStore

logger = logging.getLogger(__name__)

BOARD_COLORS = [
    "#4A90E2",  # blue
    "#50E3C2",  # teal
    "#F5A623",  # orange
    "#BD10E0",  # purple
    "#B8E986",  # green
    "#F8E71C",  # yellow
    "#D0021B",  # red
]


def has_access(board: Board, user_id: str) -> bool:
    return user_id in board.members or user_id == board.owner_id


def list_boards(store: DocumentStore, user_id: str) -> List[Board]:
    if not user_id:
        raise ValidationError("userId is required.")
    return [b for b in store.load().boards if has_access(b, user_id)]


def create_board(store: DocumentStore, name: str, user_id: str) -> Board:
    if not name or not user_id:
        raise ValidationError("Name and userId are required.")

    with store.transaction() as doc:
        color = BOARD_COLORS[len(doc.boards) % len(BOARD_COLORS)]
        board = Board(id=new_id("board"), name=name, color=color, owner_id=user_id, members=[user_id])
        doc.boards.append(board)

    logger.info("User %s created board %s", user_id, board.id)
    return board


def delete_board(store: DocumentStore, board_id: str, user_id: str) -> None:
    """Remove a board and every task on it. Only the owner may do this."""
    with store.transaction() as doc:
        board = doc.find_board(board_id)
        if board is None:
            raise NotFoundError("Board not found.")
        if board.owner_id != user_id:
            raise ForbiddenError("Only the owner can delete this board.")
        doc.boards = [b for b in doc.boards if b.id != board_id]
        before = len(doc.tasks)
        doc.tasks = [t for t in doc.tasks if t.board_id != board_id]

    logger.info("User %s deleted board %s with %d task(s)", user_id, board_id, before - len(doc.tasks))
