"""Repository plugins for videorepo.

Each remote catalog (Vimeo, ...) is a plugin in its own directory.
See videorepo/sources/base.py for the RepositoryPlugin protocol.
"""

# Base protocols
from videorepo.sources.base import (
    RepositoryPlugin,
    SourcePlugin,
    ReturnType,
    RepositoryError,
    FetchError,
    ParseError,
)

# Registry
from videorepo.sources.registry import (
    PluginRegistry,
    get_registry,
    create_registry,
    discover_plugins,
)

__all__ = [
    # Protocols
    "RepositoryPlugin",
    "SourcePlugin",
    "ReturnType",
    # Errors
    "RepositoryError",
    "FetchError",
    "ParseError",
    # Registry
    "PluginRegistry",
    "get_registry",
    "create_registry",
    "discover_plugins",
]
