"""Normalization of git remote URLs to web base URLs."""

import re

from link2code.core.exceptions import MalformedRemoteURLError, UnsupportedRemoteHostError


def remote_to_base_url(remote_url: str, host: str = "github.com") -> str:
    """Normalize a git remote URL to an HTTPS base URL on ``host``.

    Handles:
    - git@github.com:org/repo.git -> https://github.com/org/repo
    - https://github.com/org/repo.git -> https://github.com/org/repo

    Raises:
        UnsupportedRemoteHostError: If the remote is not on ``host``.
        MalformedRemoteURLError: If the remote is neither SSH nor HTTPS.
    """
    url = re.sub(r"\.git$", "", remote_url.strip())

    if host not in url:
        raise UnsupportedRemoteHostError(
            f"origin doesn't look like {host}: {url}",
            details={"remote_url": remote_url, "host": host},
        )

    if url.startswith("git@"):
        repo = url.split(":", 1)[1] if ":" in url else ""
    elif url.startswith("https"):
        repo = url.split(f"{host}/", 1)[1] if f"{host}/" in url else ""
    else:
        raise MalformedRemoteURLError(
            f"origin doesn't look like SSH or HTTPS: {url}",
            details={"remote_url": remote_url},
        )

    repo = re.sub(r"\.git$", "", repo.strip("/"))
    if not repo:
        raise MalformedRemoteURLError(
            f"origin has no repository path: {url}",
            details={"remote_url": remote_url},
        )
    return f"https://{host}/{repo}"
