from typing import List

from fastapi import APIRouter, Depends
from taskboard.dependencies import get_store
from taskboard.schemas.user import LoginRequest, RegisterRequest, SessionOut, UserOut
from taskboard.services import identity
from taskboard.store.base import DocumentStore

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=SessionOut)
def register(payload: RegisterRequest, store: DocumentStore = Depends(get_store)):
    user = identity.register(store, payload.name, payload.email, payload.password)
    return SessionOut(user_id=user.id, name=user.name)


@router.post("/login", response_model=SessionOut)
def login(payload: LoginRequest, store: DocumentStore = Depends(get_store)):
    user = identity.login(store, payload.email, payload.password)
    return SessionOut(user_id=user.id, name=user.name)


@router.get("/users", response_model=List[UserOut])
def list_users(store: DocumentStore = Depends(get_store)):
    """All users without password hashes, for assignment pickers."""
    return [UserOut(id=u.id, name=u.name, email=u.email) for u in identity.list_users(store)]
