from pydantic import AliasChoices, Field

from taskboard.models.base import Record


class Invite(Record):
    """Audit record of an invitation; never consulted for authorization."""

    id: str
    board_id: str
    email: str
    inviter_id: str
    # older data files wrote this as "created"; always saved back as createdAt
    created_at: str = Field(
        validation_alias=AliasChoices("createdAt", "created", "created_at"),
        serialization_alias="createdAt",
    )
