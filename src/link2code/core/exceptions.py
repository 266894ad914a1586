"""Exceptions raised while turning file references into links."""

from typing import Any


class Link2CodeError(Exception):
    """Base exception for link2code.

    Every error is scoped to a single input token and is reported
    without aborting the rest of the batch.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def kind(self) -> str:
        return type(self).__name__


class ConfigurationError(Link2CodeError):
    """Invalid settings."""


class ReferenceParseError(Link2CodeError):
    """A token could not be split into a path and line range."""


class InvalidLineSuffixError(ReferenceParseError):
    """A line suffix component is not a non-negative integer."""


class GitError(Link2CodeError):
    """Base class for failures reported by git."""


class NotARepositoryError(GitError):
    """The directory is not inside a git working tree."""


class NoUpstreamCommonError(GitError):
    """HEAD shares no commit with any remote-tracking ref."""


class GitCommandError(GitError):
    """git exited non-zero or could not be executed."""


class RemoteURLError(Link2CodeError):
    """Base class for remote URL problems."""


class UnsupportedRemoteHostError(RemoteURLError):
    """The remote does not point at the configured hosting service."""


class MalformedRemoteURLError(RemoteURLError):
    """The remote is neither SSH (git@host:org/repo) nor HTTPS."""
