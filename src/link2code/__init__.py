"""link2code: direct links to source on GitHub for local files."""

__version__ = "0.1.0"
