"""File reference models."""

from enum import Enum

from pydantic import BaseModel


class LinkMode(str, Enum):
    """View the composed link points at."""

    TREE = "tree"
    BLAME = "blame"


class FileReference(BaseModel):
    """A path with an optional line anchor, parsed from one input token.

    ``end_line`` is only ever set together with ``start_line``. A value
    of ``0`` is kept as parsed and means "no anchor" when composing.
    """

    path: str
    start_line: int | None = None
    end_line: int | None = None

    class Config:
        frozen = True
