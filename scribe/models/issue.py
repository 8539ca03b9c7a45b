"""Git hosting platform issue model."""

from datetime import datetime

from pydantic import BaseModel


class Issue(BaseModel):
    """Git hosting platform issue."""

    number: int
    title: str
    body: str = ""
    state: str = "open"
    created_at: datetime
    html_url: str | None = None
