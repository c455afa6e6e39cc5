"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus local directory discovery of single-file plugins.
Capabilities: new shapes, animals, and payment processors.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from types import ModuleType
from typing import Any

import pluggy

from solidctl.plugins.hookspecs import SolidctlHookSpec

PROJECT_NAME = "solidctl"
ENTRY_POINT_GROUP = "solidctl.plugins"

logger = logging.getLogger(__name__)


def _registrars() -> dict[str, Callable[[str, Any], None]]:
    """Map each registration hook to the registry function it feeds."""
    from solidctl.domain.animals import register_animal
    from solidctl.domain.shapes import register_shape
    from solidctl.infrastructure.payments import register_payment_processor

    return {
        "register_shapes": register_shape,
        "register_animals": register_animal,
        "register_payment_processors": register_payment_processor,
    }


class PluginManager:
    """Manages plugin discovery, loading, and registry population.

    Nothing that goes wrong in a plugin is raised to the caller; each
    problem is logged and kept in :attr:`warnings`.
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(SolidctlHookSpec)
        self._loaded: bool = False
        self._warnings: list[str] = []

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Discover plugins from entry points and an optional local directory.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        for plugin in self._pm.get_plugins():
            self._apply_registrations(plugin, self._plugin_name(plugin))
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        if self._loaded:
            self._apply_registrations(plugin, resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def warnings(self) -> list[str]:
        """Problems skipped during discovery and registration, oldest first."""
        return list(self._warnings)

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._plugin_name(p) for p in self._pm.get_plugins()]

    def _plugin_name(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or plugin.__class__.__name__

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Register hook-carrying classes from each ``*.py`` file in *local_dir*.

        Files starting with ``_`` are skipped. A file that fails to import,
        or a class that fails to register, becomes a warning and is skipped.
        The first class in a file is named after the module; any further
        class gets ``<module>.<ClassName>``.
        """
        if not local_dir.is_dir():
            return
        for py_file in sorted(local_dir.glob("[!_]*.py")):
            module_name = f"{PROJECT_NAME}_local_plugin_{py_file.stem}"
            module = self._import_file(module_name, py_file)
            if module is None:
                continue
            for index, cls in enumerate(_plugin_classes(module)):
                # The first class keeps the module name; later ones are qualified.
                name = module_name if index == 0 else f"{module_name}.{cls.__name__}"
                try:
                    self._pm.register(cls(), name=name)
                except Exception:
                    self._warn(
                        f"Failed to register plugin class {cls.__name__} from {py_file}",
                        exc_info=True,
                    )
                    continue
                logger.debug("Loaded local plugin %s from %s", cls.__name__, py_file)

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly; hook calls
        against a class leave ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not _has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                self._warn(f"Failed to instantiate entry-point plugin {plugin_name}", exc_info=True)
                continue
            self._pm.register(instance, name=plugin_name)

    def _apply_registrations(self, plugin: object, plugin_name: str) -> None:
        """Feed every registration hook a plugin implements into its registry."""
        for hook_name, register in _registrars().items():
            hook = getattr(plugin, hook_name, None)
            if hook is None:
                continue
            try:
                mapping = hook()
            except Exception:
                self._warn(f"Plugin {plugin_name} failed in {hook_name}", exc_info=True)
                continue
            if mapping is None:
                continue
            if not isinstance(mapping, dict):
                self._warn(f"Plugin {plugin_name} returned a non-dict from {hook_name}")
                continue
            for name, cls in mapping.items():
                try:
                    register(name, cls)
                except (TypeError, ValueError) as exc:
                    self._warn(f"Skipping {name!r} from plugin {plugin_name}: {exc}")

    def _import_file(self, module_name: str, path: Path) -> ModuleType | None:
        """Import *path* as *module_name*; None (with a warning) if it fails."""
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            self._warn(f"Could not create module spec for {path}")
            return None
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception:
            sys.modules.pop(module_name, None)
            self._warn(f"Failed to load local plugin {path}", exc_info=True)
            return None
        return module

    def _warn(self, message: str, *, exc_info: bool = False) -> None:
        logger.warning(message, exc_info=exc_info)
        self._warnings.append(message)


def _has_hook_impls(cls: type) -> bool:
    # HookimplMarker("solidctl") tags decorated functions with ``solidctl_impl``.
    marker = f"{PROJECT_NAME}_impl"
    return any(
        getattr(value, marker, None) is not None
        for name, value in inspect.getmembers(cls, callable)
        if not name.startswith("_")
    )


def _plugin_classes(module: ModuleType) -> Iterator[type]:
    """Classes defined in *module* itself that implement at least one hook."""
    for _name, obj in inspect.getmembers(module, inspect.isclass):
        if obj.__module__ == module.__name__ and _has_hook_impls(obj):
            yield obj
