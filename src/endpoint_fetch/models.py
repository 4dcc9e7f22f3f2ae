"""
Wire records served by the hws.dev sandbox resources.
"""
from pydantic import BaseModel, Field, HttpUrl


class News(BaseModel):
    """A single headline."""
    model_config = {"frozen": True}

    id: int
    title: str
    strap: str
    url: HttpUrl


class Message(BaseModel):
    """A single inbox message.

    ``from`` is a reserved word, so the sender is exposed as ``sender`` and
    read from the ``from`` key on the wire.
    """
    model_config = {"frozen": True, "populate_by_name": True}

    id: int
    sender: str = Field(alias="from")
    text: str
