from fastapi import APIRouter, Depends
from taskboard.dependencies import get_mailer, get_store
from taskboard.schemas.common import MessageOut
from taskboard.schemas.invite import InviteCreate
from taskboard.services import invites
from taskboard.store.base import DocumentStore
from taskboard.utils.mailer import Mailer

router = APIRouter(prefix="/api", tags=["invites"])


@router.post("/invite", response_model=MessageOut)
def invite(payload: InviteCreate, store: DocumentStore = Depends(get_store), mailer: Mailer = Depends(get_mailer)):
    invites.invite(store, mailer, payload.board_id, payload.email, payload.inviter_id)
    return {"message": "Invitation processed."}
