"""Parsing of file references with optional line suffixes."""

import re

from link2code.core.exceptions import InvalidLineSuffixError
from link2code.core.models.reference import FileReference

# Matches the first ":<line>[:<col>]" or ":<start>-<end>" anywhere in the
# token, so grep-style "path:12:34: matched text" keeps only the path.
LINE_SUFFIX_RE = re.compile(r"(:[0-9\-]+){1,2}")

# Only matches at the end of the token; used when paths may contain colons.
TRAILING_LINE_SUFFIX_RE = re.compile(r"(:[0-9\-]+)+\Z")


def parse_reference(token: str, colon_filenames: bool = False) -> FileReference:
    """Split a token into a path and an optional line range.

    Accepted shapes::

        path/to/file.txt
        path/to/file.txt:1
        path/to/file.txt:1-5
        path/to/file.txt:1:2        (column is discarded)
        path/to/file.go:3:import (  (grep output, trailing text ignored)

    With ``colon_filenames`` the suffix must sit at the very end of the
    token, so ``path/t:123/file.txt:1:20`` keeps ``t:123`` in the path.

    Raises:
        InvalidLineSuffixError: If a suffix component is not a
            non-negative integer, e.g. ``file:5-`` or ``file:1-2-3``.
    """
    pattern = TRAILING_LINE_SUFFIX_RE if colon_filenames else LINE_SUFFIX_RE

    match = pattern.search(token)
    if match is None:
        return FileReference(path=token)

    path = token[: match.start()]
    suffix = match.group(0).lstrip(":")

    if suffix.count(":") == 1:
        start = _to_line(suffix.split(":")[0], token)
        return FileReference(path=path, start_line=start)

    if suffix.count("-") == 1:
        start_text, end_text = suffix.split("-")
        return FileReference(
            path=path,
            start_line=_to_line(start_text, token),
            end_line=_to_line(end_text, token),
        )

    return FileReference(path=path, start_line=_to_line(suffix, token))


def _to_line(text: str, token: str) -> int:
    if not text.isdigit():
        raise InvalidLineSuffixError(
            f"invalid line number {text!r}",
            details={"token": token, "component": text},
        )
    return int(text)
