from typing import Optional

from taskboard.models.base import Record


class InviteCreate(Record):
    board_id: Optional[str] = None
    email: Optional[str] = None
    inviter_id: Optional[str] = None
