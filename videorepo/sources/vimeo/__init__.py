"""Vimeo repository plugin.

Supports:
- Public videos of a Vimeo user or channel, by name
- Pages of 27 videos, returned as external links

No API key required.
"""

from videorepo.sources.base import SourcePlugin
from videorepo.sources.vimeo.adapter import VimeoRepository, feed_url, paginate, parse_videos
from videorepo.strings import get_string

# Plugin instance for auto-discovery
plugin = SourcePlugin(
    factory=VimeoRepository,
    repository_type=VimeoRepository.repository_type,
    description=get_string("pluginname"),
)

__all__ = ["VimeoRepository", "feed_url", "paginate", "parse_videos", "plugin"]
