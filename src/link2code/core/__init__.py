"""Core domain models and exceptions for link2code."""

from link2code.core.exceptions import (
    ConfigurationError,
    GitCommandError,
    GitError,
    InvalidLineSuffixError,
    Link2CodeError,
    MalformedRemoteURLError,
    NotARepositoryError,
    NoUpstreamCommonError,
    ReferenceParseError,
    RemoteURLError,
    UnsupportedRemoteHostError,
)
from link2code.core.models import BatchResult, FileReference, LinkMode, LinkResult

__all__ = [
    # Models
    "FileReference",
    "LinkMode",
    "LinkResult",
    "BatchResult",
    # Exceptions
    "Link2CodeError",
    "ConfigurationError",
    "ReferenceParseError",
    "InvalidLineSuffixError",
    "GitError",
    "NotARepositoryError",
    "NoUpstreamCommonError",
    "GitCommandError",
    "RemoteURLError",
    "UnsupportedRemoteHostError",
    "MalformedRemoteURLError",
]
