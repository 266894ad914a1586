"""Link result models."""

from pydantic import BaseModel, Field


class LinkResult(BaseModel):
    """Outcome of resolving a single input token.

    Exactly one of ``url`` and ``error`` is set.
    """

    token: str
    url: str | None = None
    error: str | None = None
    error_kind: str | None = None

    class Config:
        frozen = True

    @property
    def ok(self) -> bool:
        return self.url is not None


class BatchResult(BaseModel):
    """Results for a batch of tokens, in input order."""

    results: list[LinkResult] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """Whether at least one token resolved to a URL."""
        return any(result.ok for result in self.results)

    @property
    def urls(self) -> list[str]:
        return [result.url for result in self.results if result.url is not None]

    @property
    def failures(self) -> list[LinkResult]:
        return [result for result in self.results if not result.ok]
