"""Service layer for link2code."""

from link2code.services.linking import LinkService

__all__ = ["LinkService"]
