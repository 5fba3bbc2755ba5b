"""Modifier plugin registration.

Modifier plugins pick among sibling keys such as ``price_singular`` and
``price_plural`` by computing, from the call parameters, which modifier tags
apply. Plugins are pluggy plugins implementing the ``compute_modifiers``
hook and declare the languages they support as data.

Usage:
    from infrastructure.i18n.plugins import FunctionPlugin, PluginRegistry

    registry = PluginRegistry()
    registry.register(
        FunctionPlugin(
            name="plural",
            supported_languages={Language.EN},
            compute=lambda params: ["singular" if params.get("count") == 1 else "plural"],
        )
    )
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
)

import pluggy

from infrastructure.hookspecs import modifiers as modifier_hookspecs
from infrastructure.i18n.models import Language, TranslationParams
from infrastructure.logging import get_module_logger

logger = get_module_logger()

hookimpl = pluggy.HookimplMarker(modifier_hookspecs.PROJECT_NAME)

ENTRYPOINT_GROUP = "i18n_engine.modifiers"

ComputeFunction = Callable[[TranslationParams], Sequence[str]]


def _as_languages(languages: Iterable[Any]) -> FrozenSet[Language]:
    return frozenset(Language.from_string(language) for language in languages)


class ModifierPlugin(ABC):
    """Base class for modifier plugins.

    Subclasses set ``name`` and ``supported_languages`` and implement
    ``compute_modifiers`` decorated with ``@hookimpl``. The base class itself
    cannot be instantiated.

    Attributes:
        name: Unique plugin name, used in diagnostics.
        supported_languages: Languages the plugin applies to.
    """

    name: str = ""
    supported_languages: FrozenSet[Language] = frozenset()

    def __init__(
        self,
        name: Optional[str] = None,
        supported_languages: Optional[Iterable[Any]] = None,
    ):
        if name is not None:
            self.name = name
        if supported_languages is not None:
            self.supported_languages = _as_languages(supported_languages)
        if not self.name:
            raise ValueError(f"{type(self).__name__} requires a name")

    def supports(self, language: Language) -> bool:
        return language in self.supported_languages

    @hookimpl
    @abstractmethod
    def compute_modifiers(self, params: TranslationParams) -> Sequence[str]:
        """Return the ordered modifier tags for params."""

    def __repr__(self) -> str:
        languages = sorted(language.value for language in self.supported_languages)
        return f"{type(self).__name__}(name={self.name!r}, supported_languages={languages})"


class FunctionPlugin(ModifierPlugin):
    """Modifier plugin backed by a plain function."""

    def __init__(
        self,
        name: str,
        supported_languages: Iterable[Any],
        compute: ComputeFunction,
    ):
        super().__init__(name=name, supported_languages=supported_languages)
        self._compute = compute

    @hookimpl
    def compute_modifiers(self, params: TranslationParams) -> Sequence[str]:
        return self._compute(params)


@dataclass(frozen=True)
class ActivePlugin:
    """A registered plugin bound for one resolution.

    Attributes:
        name: Plugin name.
        compute: Callable returning the ordered modifier tags for params.
    """

    name: str
    compute: ComputeFunction

    def modifiers(self, params: TranslationParams) -> List[str]:
        result = self.compute(params)
        if result is None:
            return []
        if isinstance(result, str):
            return [result]
        return list(result)


class PluginRegistry:
    """Ordered registry of modifier plugins backed by a pluggy PluginManager.

    Registration order is significant: plugins are consulted in the order
    they were registered.
    """

    def __init__(self, plugins: Iterable[Any] = ()):
        self._pm = pluggy.PluginManager(modifier_hookspecs.PROJECT_NAME)
        self._pm.add_hookspecs(modifier_hookspecs)
        self._order: List[str] = []
        self._languages: Dict[str, FrozenSet[Language]] = {}
        for plugin in plugins:
            self.register(plugin)

    def register(self, plugin: Any, name: Optional[str] = None) -> str:
        """Register a plugin.

        Args:
            plugin: ModifierPlugin instance, or any object (e.g. a module)
                exposing ``supported_languages`` and a ``compute_modifiers``
                hookimpl.
            name: Name override (defaults to ``plugin.name``).

        Returns:
            The name the plugin was registered under.

        Raises:
            ValueError: If the name is taken, the plugin declares no
                supported languages, or pluggy rejects the hook implementation.
        """
        plugin_name = name or getattr(plugin, "name", None) or getattr(
            plugin, "__name__", None
        )
        if not plugin_name:
            raise ValueError(f"Cannot determine a name for plugin {plugin!r}")
        if plugin_name in self._languages:
            raise ValueError(f"Modifier plugin already registered: {plugin_name}")

        languages = getattr(plugin, "supported_languages", None)
        if languages is None:
            raise ValueError(
                f"Modifier plugin {plugin_name} must declare supported_languages"
            )

        try:
            self._pm.register(plugin, name=plugin_name)
        except pluggy.PluginValidationError as e:
            if self._pm.has_plugin(plugin_name):
                self._pm.unregister(name=plugin_name)
            raise ValueError(f"Invalid modifier plugin {plugin_name}: {e}") from e

        if not any(
            impl.plugin_name == plugin_name
            for impl in self._pm.hook.compute_modifiers.get_hookimpls()
        ):
            self._pm.unregister(name=plugin_name)
            raise ValueError(
                f"Modifier plugin {plugin_name} does not implement compute_modifiers"
            )

        self._order.append(plugin_name)
        self._languages[plugin_name] = _as_languages(languages)
        logger.debug(
            "modifier_plugin_registered",
            plugin=plugin_name,
            supported_languages=sorted(lang.value for lang in self._languages[plugin_name]),
        )
        return plugin_name

    def unregister(self, name: str) -> None:
        """Remove a plugin by name.

        Raises:
            KeyError: If no plugin is registered under name.
        """
        if name not in self._languages:
            raise KeyError(f"Modifier plugin not registered: {name}")
        self._pm.unregister(name=name)
        self._order.remove(name)
        del self._languages[name]
        logger.debug("modifier_plugin_unregistered", plugin=name)

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> int:
        """Register plugins advertised by installed packages.

        Args:
            group: Entry point group to scan.

        Returns:
            Number of plugins loaded.
        """
        before = set(self._pm.get_plugins())
        count = self._pm.load_setuptools_entrypoints(group)
        loaded = [
            (plugin_name, plugin)
            for plugin_name, plugin in self._pm.list_name_plugin()
            if plugin is not None and plugin not in before
        ]
        for plugin_name, plugin in loaded:
            # Re-registered in load order to record ordering and languages
            self._pm.unregister(name=plugin_name)
            self.register(plugin, name=plugin_name)
        logger.info("modifier_plugins_loaded", group=group, plugin_count=count)
        return count

    @property
    def plugins(self) -> List[str]:
        """Registered plugin names in registration order."""
        return list(self._order)

    def supported_languages(self, name: str) -> FrozenSet[Language]:
        return self._languages[name]

    def for_language(self, language: Language) -> List[ActivePlugin]:
        """Return the plugins supporting language, in registration order."""
        impls = {
            impl.plugin_name: impl.function
            for impl in self._pm.hook.compute_modifiers.get_hookimpls()
        }
        return [
            ActivePlugin(name=name, compute=impls[name])
            for name in self._order
            if language in self._languages[name]
        ]

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, name: object) -> bool:
        return name in self._languages

    def __iter__(self):
        return iter(self.plugins)
