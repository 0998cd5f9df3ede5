"""Plugin registry with auto-discovery.

The registry finds all plugins in videorepo/sources/ subdirectories
and builds repository instances from them.
"""

import importlib
import logging
from pathlib import Path
from typing import Any, Iterator

from videorepo.session.base import SessionStore
from videorepo.sources.base import RepositoryPlugin, SourcePlugin

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Registry of repository plugin types."""

    def __init__(self):
        self._plugins: dict[str, SourcePlugin] = {}

    def register(self, plugin: SourcePlugin) -> None:
        """Register a repository plugin."""
        self._plugins[plugin.repository_type] = plugin
        logger.info(f"Registered plugin: {plugin.repository_type}")

    @property
    def plugins(self) -> list[SourcePlugin]:
        """All registered plugins."""
        return list(self._plugins.values())

    @property
    def repository_types(self) -> list[str]:
        return list(self._plugins)

    def get(self, repository_type: str) -> SourcePlugin | None:
        """Get a plugin by its repository type."""
        return self._plugins.get(repository_type)

    def create_instance(
        self,
        repository_type: str,
        instance_id: str,
        session_store: SessionStore,
        **kwargs: Any,
    ) -> RepositoryPlugin:
        """Build a repository instance.

        Raises:
            ValueError: If no plugin is registered for the type.
        """
        plugin = self.get(repository_type)
        if plugin is None:
            raise ValueError(f"Unknown repository type: {repository_type}")
        return plugin.create(instance_id, session_store, **kwargs)


def discover_plugins() -> Iterator[SourcePlugin]:
    """Discover all plugins in videorepo/sources/ subdirectories.

    Each subdirectory should have an __init__.py with a `plugin`
    variable (SourcePlugin instance).
    """
    sources_dir = Path(__file__).parent

    for item in sorted(sources_dir.iterdir()):
        if not item.is_dir():
            continue
        if item.name.startswith("_") or item.name.startswith("."):
            continue

        module_name = f"videorepo.sources.{item.name}"
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            logger.warning(f"Failed to import plugin {module_name}: {e}")
            continue

        for attr_name in dir(module):
            if attr_name == "plugin" or attr_name.endswith("_plugin"):
                attr = getattr(module, attr_name)
                if isinstance(attr, SourcePlugin):
                    yield attr


def create_registry() -> PluginRegistry:
    """Create a registry with all discovered plugins."""
    registry = PluginRegistry()
    for plugin in discover_plugins():
        registry.register(plugin)
    return registry


# Singleton registry
_registry: PluginRegistry | None = None


def get_registry() -> PluginRegistry:
    """Get or create the default plugin registry."""
    global _registry
    if _registry is None:
        _registry = create_registry()
    return _registry
