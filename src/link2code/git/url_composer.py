"""Composition of direct links to files on the hosting service."""

import os
from urllib.parse import quote

from link2code.core.models.reference import FileReference, LinkMode

# RFC 3986 sub-delims plus ":" and "@" are valid in a path segment
_PATH_SAFE = "/:@!$&'()*+,;="


def relative_to_worktree(absolute_path: str, worktree_root: str) -> str:
    """Strip the worktree root from a path, keeping the leading separator.

    Falls back to comparing real paths when the plain paths disagree,
    e.g. when the file was reached through a symlinked directory.
    """
    if not absolute_path.startswith(worktree_root):
        real_path = os.path.realpath(absolute_path)
        real_root = os.path.realpath(worktree_root)
        if real_path.startswith(real_root):
            absolute_path, worktree_root = real_path, real_root
    relative = absolute_path.replace(worktree_root, "", 1)
    return relative.replace(os.sep, "/")


def line_fragment(reference: FileReference) -> str:
    """Build the ``L<start>[-L<end>]`` fragment, or ``""`` without a start line."""
    if not reference.start_line:
        return ""
    fragment = f"L{reference.start_line}"
    if reference.end_line:
        fragment += f"-L{reference.end_line}"
    return fragment


def compose_url(
    base_url: str,
    mode: LinkMode,
    revision: str,
    absolute_path: str,
    worktree_root: str,
    reference: FileReference,
) -> str:
    """Compose a link to a file (and optional line range) at a revision.

    Example:
        https://github.com/org/repo/blame/0123456789/src/main.py#L5-L10
    """
    mode = LinkMode(mode)
    relative = relative_to_worktree(absolute_path, worktree_root)
    segments = [mode.value, revision, *relative.split("/")]
    path = "/".join(quote(segment, safe=_PATH_SAFE) for segment in segments if segment)

    url = f"{base_url.rstrip('/')}/{path}"
    fragment = line_fragment(reference)
    if fragment:
        url += f"#{fragment}"
    return url
