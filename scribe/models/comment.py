"""Comment on an issue."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Comment(BaseModel):
    """Comment on an issue, as returned by the tracker."""

    model_config = ConfigDict(frozen=True)

    id: int
    body: str
    author: str = ""
    created_at: datetime
