import logging
import smtplib
from datetime import datetime, UTC

from taskboard.errors import ForbiddenError, NotFoundError, ValidationError
from taskboard.models.base import new_id
from taskboard.models.invite import Invite
from taskboard.services.boards import has_access
from taskboard.store.base import DocumentStore
from taskboard.utils.mailer import Mailer

logger = logging.getLogger(__name__)


def invite(store: DocumentStore, mailer: Mailer, board_id: str, email: str, inviter_id: str) -> Invite:
    """Share a board with ``email``.

    A registered user with that email joins the board right away. The invite
    record is written either way, but an unregistered invitee gets no access
    when they sign up later. The notification mail is best effort: once the
    document is saved the invite has succeeded, whatever the mailer does.
    """
    if not board_id or not email or not inviter_id:
        raise ValidationError("boardId, email and inviterId are required.")

    with store.transaction() as doc:
        board = doc.find_board(board_id)
        if board is None:
            raise NotFoundError("Board not found.")
        if not has_access(board, inviter_id):
            raise ForbiddenError("You are not a member of this board.")

        user = doc.find_user_by_email(email)
        if user is not None and user.id not in board.members:
            board.members.append(user.id)
            logger.info("User %s joined board %s", user.id, board.id)

        record = Invite(
            id=new_id("invite"),
            board_id=board_id,
            email=email,
            inviter_id=inviter_id,
            created_at=datetime.now(UTC).isoformat(),
        )
        doc.invites.append(record)
        board_name = board.name

    try:
        mailer.send_invitation(email, board_name)
    except (smtplib.SMTPException, OSError, ValueError) as e:
        # the invite is already saved; mail problems are only logged
        logger.error("Error sending invitation email to %r: %s", email, e)

    return record
