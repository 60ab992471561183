import logging
from typing import List

from taskboard.errors import AuthError, ConflictError, ValidationError
from taskboard.models.base import new_id
from taskboard.models.user import User
from taskboard.store.base import DocumentStore
from taskboard.utils.auth import hash_password, pwd_context, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."


def register(store: DocumentStore, name: str, email: str, password: str) -> User:
    if not name or not email or not password:
        raise ValidationError("Name, email and password are required.")

    try:
        hashed = hash_password(password)
    except ValueError as e:
        raise ValidationError(str(e))

    with store.transaction() as doc:
        if doc.find_user_by_email(email) is not None:
            raise ConflictError("Email is already registered.")
        user = User(id=new_id("user"), name=name, email=email, password_hash=hashed)
        doc.users.append(user)

    logger.info("Registered user %s", user.id)
    return user


def login(store: DocumentStore, email: str, password: str) -> User:
    if not email or not password:
        raise ValidationError("Email and password are required.")

    user = store.load().find_user_by_email(email)
    if user is None:
        # spend the same hashing time as a real check so unknown emails are not detectable
        pwd_context.dummy_verify()
        raise AuthError(INVALID_CREDENTIALS)
    if not verify_password(password, user.password_hash):
        raise AuthError(INVALID_CREDENTIALS)
    return user


def list_users(store: DocumentStore) -> List[User]:
    return list(store.load().users)
