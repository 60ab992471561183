import uuid

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id(kind: str) -> str:
    return f"{kind}-{uuid.uuid4().hex[:12]}"


class Record(BaseModel):
    """Stored record; Python attributes are snake_case, persisted keys camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
