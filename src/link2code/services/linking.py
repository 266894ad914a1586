"""Linking service: turns input tokens into direct links."""

import os
from collections.abc import Iterable, Iterator

import structlog

from link2code.config.settings import Settings
from link2code.core.exceptions import Link2CodeError
from link2code.core.models.link import BatchResult, LinkResult
from link2code.core.models.reference import LinkMode
from link2code.git.resolver import GitMetadataResolver
from link2code.git.url_composer import compose_url
from link2code.utils.concurrency import run_in_order
from link2code.utils.references import parse_reference

logger = structlog.get_logger(__name__)


class LinkService:
    """Resolves tokens to links, one batch at a time.

    Orchestrates, per token:
    1. Parse the path and line range out of the token
    2. Find the working tree containing the file
    3. Resolve the upstream revision and remote base URL (cached per tree)
    4. Compose the URL

    Failures are reported per token and never abort the batch.
    """

    def __init__(
        self,
        resolver: GitMetadataResolver | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._resolver = resolver or GitMetadataResolver(self._settings)

    def link(
        self,
        token: str,
        mode: LinkMode = LinkMode.TREE,
        colon_filenames: bool = False,
    ) -> LinkResult:
        """Resolve a single token."""
        try:
            url = self._link(token, LinkMode(mode), colon_filenames)
        except Link2CodeError as e:
            logger.debug(
                "Failed to link token",
                token=token,
                error=e.message,
                kind=e.kind,
                details=e.details,
            )
            return LinkResult(token=token, error=e.message, error_kind=e.kind)

        logger.debug("Linked token", token=token, url=url)
        return LinkResult(token=token, url=url)

    def _link(self, token: str, mode: LinkMode, colon_filenames: bool) -> str:
        reference = parse_reference(token, colon_filenames=colon_filenames)
        absolute_path = os.path.abspath(reference.path)

        root = self._resolver.worktree(os.path.dirname(absolute_path))
        revision = self._resolver.upstream_revision(root)
        base_url = self._resolver.base_url(root)

        return compose_url(
            base_url=base_url,
            mode=mode,
            revision=revision,
            absolute_path=absolute_path,
            worktree_root=root,
            reference=reference,
        )

    def iter_links(
        self,
        tokens: Iterable[str],
        mode: LinkMode = LinkMode.TREE,
        colon_filenames: bool = False,
        workers: int | None = None,
    ) -> Iterator[LinkResult]:
        """Yield a result per token, in input order.

        Sequentially each result is yielded as soon as its token resolves.
        With ``workers`` > 1 tokens are resolved on a thread pool first; the
        resolver's caches keep git queries at one per working tree.
        """
        tokens = list(tokens)
        workers = workers or self._settings.workers

        logger.info("Linking tokens", count=len(tokens), mode=LinkMode(mode).value, workers=workers)

        if workers <= 1:
            for token in tokens:
                yield self.link(token, mode, colon_filenames)
            return

        yield from run_in_order(
            [lambda token=token: self.link(token, mode, colon_filenames) for token in tokens],
            max_workers=workers,
        )

    def link_all(
        self,
        tokens: Iterable[str],
        mode: LinkMode = LinkMode.TREE,
        colon_filenames: bool = False,
        workers: int | None = None,
    ) -> BatchResult:
        """Resolve every token, keeping input order."""
        return BatchResult(
            results=list(self.iter_links(tokens, mode, colon_filenames, workers))
        )
