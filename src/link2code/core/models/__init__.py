"""Domain models for link2code."""

from link2code.core.models.link import BatchResult, LinkResult
from link2code.core.models.reference import FileReference, LinkMode

__all__ = [
    "FileReference",
    "LinkMode",
    "LinkResult",
    "BatchResult",
]
