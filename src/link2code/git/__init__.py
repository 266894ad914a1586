"""Git integration module for link2code."""

from link2code.git.resolver import GitMetadataResolver
from link2code.git.url_composer import compose_url

__all__ = ["GitMetadataResolver", "compose_url"]
