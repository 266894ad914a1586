"""Tests for URL composition."""

import os

import pytest

from link2code.core.models.reference import FileReference, LinkMode
from link2code.git.url_composer import compose_url, line_fragment, relative_to_worktree

BASE = "https://github.com/org/repo"
REV = "0123456789"


@pytest.mark.unit
class TestComposeURL:
    """Tests for compose_url."""

    def test_tree_without_lines(self) -> None:
        url = compose_url(
            BASE, LinkMode.TREE, REV, "/work/repo/docs/entity.md", "/work/repo",
            FileReference(path="docs/entity.md"),
        )
        assert url == "https://github.com/org/repo/tree/0123456789/docs/entity.md"
        assert "#" not in url

    def test_blame_with_start_line(self) -> None:
        url = compose_url(
            BASE, LinkMode.BLAME, REV, "/work/repo/Makefile", "/work/repo",
            FileReference(path="Makefile", start_line=5),
        )
        assert url == "https://github.com/org/repo/blame/0123456789/Makefile#L5"

    def test_line_range(self) -> None:
        url = compose_url(
            BASE, LinkMode.TREE, REV, "/work/repo/src/main.py", "/work/repo",
            FileReference(path="src/main.py", start_line=5, end_line=10),
        )
        assert url.endswith("/tree/0123456789/src/main.py#L5-L10")

    def test_mode_accepts_string(self) -> None:
        url = compose_url(
            BASE, "blame", REV, "/work/repo/a.txt", "/work/repo", FileReference(path="a.txt")
        )
        assert "/blame/" in url

    def test_trailing_slash_in_base(self) -> None:
        url = compose_url(
            BASE + "/", LinkMode.TREE, REV, "/work/repo/a.txt", "/work/repo",
            FileReference(path="a.txt"),
        )
        assert url == "https://github.com/org/repo/tree/0123456789/a.txt"

    def test_special_characters_are_quoted(self) -> None:
        url = compose_url(
            BASE, LinkMode.TREE, REV, "/work/repo/my docs/t:1.md", "/work/repo",
            FileReference(path="my docs/t:1.md"),
        )
        assert url == "https://github.com/org/repo/tree/0123456789/my%20docs/t:1.md"


@pytest.mark.unit
class TestLineFragment:
    """Tests for line_fragment."""

    def test_no_lines(self) -> None:
        assert line_fragment(FileReference(path="a")) == ""

    def test_start_only(self) -> None:
        assert line_fragment(FileReference(path="a", start_line=5)) == "L5"

    def test_range(self) -> None:
        assert line_fragment(FileReference(path="a", start_line=5, end_line=10)) == "L5-L10"

    def test_zero_start_has_no_fragment(self) -> None:
        assert line_fragment(FileReference(path="a", start_line=0)) == ""


@pytest.mark.unit
class TestRelativeToWorktree:
    """Tests for relative_to_worktree."""

    def test_keeps_leading_separator(self) -> None:
        assert relative_to_worktree("/work/repo/src/a.py", "/work/repo") == "/src/a.py"

    def test_symlinked_directory(self, tmp_path) -> None:
        real = tmp_path / "real"
        (real / "src").mkdir(parents=True)
        (real / "src" / "a.py").write_text("")
        link = tmp_path / "link"
        os.symlink(real, link)

        relative = relative_to_worktree(str(link / "src" / "a.py"), str(real))
        assert relative == "/src/a.py"
