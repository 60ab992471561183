from taskboard.models.base import Record


class User(Record):
    id: str
    name: str
    email: str
    password_hash: str
