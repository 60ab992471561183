from typing import Optional

from taskboard.models.base import Record


# Fields are optional here so a missing value becomes a 400 from the service
# layer rather than a schema error.
class RegisterRequest(Record):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(Record):
    email: Optional[str] = None
    password: Optional[str] = None


class SessionOut(Record):
    user_id: str
    name: str


class UserOut(Record):
    id: str
    name: str
    email: str
